from setuptools import find_packages, setup

setup(
    name="permgen",
    version="0.1.0",
    description="Permutation generation by five interchangeable algorithms",
    packages=find_packages(),
    python_requires=">=3.11",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["permgen = permgen.cli:main"]},
)

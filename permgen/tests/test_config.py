"""Tests for default algorithm configuration."""

import logging
import os

import pytest

from permgen import Algorithm, UnknownAlgorithmError
from permgen._config import get_default_algorithm, set_default_algorithm


def _reset():
    import permgen._config as _cfg
    _cfg._algorithm_override = None
    os.environ.pop("PERMGEN_ALGORITHM", None)


class TestGetDefaultAlgorithm:
    def setup_method(self):
        _reset()

    def teardown_method(self):
        _reset()

    def test_falls_back_to_reference(self):
        assert get_default_algorithm() is Algorithm.REFERENCE

    def test_env_var_token(self):
        os.environ["PERMGEN_ALGORITHM"] = "2"
        assert get_default_algorithm() is Algorithm.PLAIN_CHANGES

    def test_env_var_name_case_insensitive(self):
        os.environ["PERMGEN_ALGORITHM"] = "Heap-Iterative"
        assert get_default_algorithm() is Algorithm.HEAP_ITERATIVE

    def test_invalid_env_var_ignored(self, caplog):
        os.environ["PERMGEN_ALGORITHM"] = "quicksort"
        with caplog.at_level(logging.WARNING, logger="permgen"):
            assert get_default_algorithm() is Algorithm.REFERENCE
        assert "ignoring PERMGEN_ALGORITHM" in caplog.text

    def test_override_wins_over_env(self):
        os.environ["PERMGEN_ALGORITHM"] = "2"
        set_default_algorithm("heap")
        assert get_default_algorithm() is Algorithm.HEAP

    def test_auto_restores_default(self):
        set_default_algorithm(Algorithm.INSERTION)
        assert get_default_algorithm() is Algorithm.INSERTION
        set_default_algorithm("auto")
        assert get_default_algorithm() is Algorithm.REFERENCE


class TestSetDefaultAlgorithm:
    def setup_method(self):
        _reset()

    def teardown_method(self):
        _reset()

    def test_invalid_name_raises(self):
        with pytest.raises(UnknownAlgorithmError, match="bogus"):
            set_default_algorithm("bogus")

    def test_invalid_name_keeps_previous(self):
        set_default_algorithm("3")
        with pytest.raises(UnknownAlgorithmError):
            set_default_algorithm("7")
        assert get_default_algorithm() is Algorithm.HEAP

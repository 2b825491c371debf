import sys

from permgen.cli import main

sys.exit(main())

"""Allow running the shell with ``python -m kvshell``."""

import sys

from .cli import main

sys.exit(main())

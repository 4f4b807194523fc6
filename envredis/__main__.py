"""Allow running envredis as `python -m envredis`."""

import sys

from .cli import main

sys.exit(main())

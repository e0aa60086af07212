"""Allow ``python -m envgg``."""

import sys

from envgg.cli import main

sys.exit(main())

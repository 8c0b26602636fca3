"""Allow ``python -m botstrings``."""

import sys

from botstrings.cli import main

sys.exit(main())

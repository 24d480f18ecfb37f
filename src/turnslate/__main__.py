"""Allow ``python -m turnslate``."""

import sys

from turnslate.cli import main

sys.exit(main())

"""Allow ``python -m create_godotrs``."""

import sys

from create_godotrs.cli import main

sys.exit(main())

"""Allow ``python -m typedloc``."""

import sys

from typedloc.cli import main

sys.exit(main())

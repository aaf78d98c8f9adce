"""Allow `python -m FDNORM`."""

import sys

from FDNORM.cli import main

sys.exit(main())

"""Allow ``python -m jpackwrap``."""

import sys

from jpackwrap.cli import main


sys.exit(main())

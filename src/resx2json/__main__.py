"""Allow ``python -m resx2json``."""

import sys

from resx2json.cli import main

sys.exit(main())

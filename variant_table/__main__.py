"""Allow ``python -m variant_table``."""

import sys

from variant_table.cli import main

sys.exit(main())

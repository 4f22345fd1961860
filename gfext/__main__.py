"""python -m gfext"""

import sys

from gfext.cli import cli

sys.exit(cli())

# Path: dto_link/__main__.py
"""Allow `python -m dto_link`."""

import sys

from .main import main

sys.exit(main())

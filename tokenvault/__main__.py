# --------------------------------------------------------------
# File: __main__.py
# Description: Permite ejecutar la CLI con `python -m tokenvault`.
# --------------------------------------------------------------

import sys

from tokenvault.cli import main

sys.exit(main())

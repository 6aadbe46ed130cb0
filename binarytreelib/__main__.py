"""Entry point for ``python -m binarytreelib``."""

import sys

from .demo import main

sys.exit(main())

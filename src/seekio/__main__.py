"""Allow running seekio as ``python -m seekio``."""

import sys

from seekio.cli import main

sys.exit(main())

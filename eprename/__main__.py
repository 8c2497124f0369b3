"""Allow ``python -m eprename``."""
import sys

from .renamer import main

sys.exit(main())

"""Allow running as: python -m digital_rain"""

import sys

from .cli import main

sys.exit(main())

from __future__ import annotations

import sys

from fileplotter.cli import main

sys.exit(main())

from __future__ import annotations

import sys

from headinghandler.cli import main

sys.exit(main())

# SPDX-License-Identifier: MIT
from __future__ import annotations

import sys

from factlens.cli import main

if __name__ == "__main__":
    sys.exit(main())

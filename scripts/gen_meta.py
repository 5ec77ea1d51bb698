#!/usr/bin/env python3
"""
gen_meta.py - metadata generator entry point

Usage:
    python scripts/gen_meta.py [-o OUTPUT] FILE
"""

import os
import sys

# Add scripts directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from metagen.cli import main


if __name__ == '__main__':
    sys.exit(main())

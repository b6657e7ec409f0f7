#!/usr/bin/env python3
"""Entry point for PyInstaller-frozen executable."""

import sys

from psyq_symbols.cli import main
sys.exit(main())

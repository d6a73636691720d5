#!/usr/bin/env python3
"""Run from a source checkout: `python main.py [directory-or-file]`."""
from __future__ import annotations

from pymdb.main import main

if __name__ == "__main__":
    raise SystemExit(main())

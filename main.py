#!/usr/bin/env python3
"""
ghclone - Main Entry Point

Interactively pick repositories of a GitHub account and clone them
into a local directory.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from ghclone.cli import main

if __name__ == "__main__":
    main()

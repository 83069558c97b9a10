#!/usr/bin/env python3
"""Seed a file-backed catalogue for demos and manual testing.

Usage:
    python scripts/seed_listings.py --data-dir data --count 50 --admin-password admin123

See ``realty_store.seeding`` for the flags and the ``REALTY_*`` settings
they override.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from realty_store.seeding import main

if __name__ == "__main__":
    main()

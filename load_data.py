# load_data.py
"""
Load a ledger-book CSV into the database for one user.

Usage:
    python load_data.py USER_ID [CSV_PATH]
"""

import sys

from scripts.ingest import main

if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit("usage: python load_data.py USER_ID [CSV_PATH]")
    main(*sys.argv[1:3])

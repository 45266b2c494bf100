"""
Console Launcher for Book Log

Run from a checkout without installing:

    python app/main.py

The ledger (booklog.json), export (BookLog_Export.txt) and log file are
kept in BOOKLOG_DATA_DIR, or the current directory when it is unset.
"""

import sys
from pathlib import Path

# Allow running from a checkout
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from booklog.shell import main


if __name__ == "__main__":
    sys.exit(main())

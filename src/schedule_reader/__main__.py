"""Allow running as a module.

Usage:
    python -m schedule_reader SCHEDULE.xlsx
"""

import sys

from schedule_reader.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""
Kill Stats — Report Generator

Reads every kill-event CSV in a directory, aggregates them in parallel and
writes the top 10 weapons and top 10 killers to a JSON report.

Usage:
    python scripts/kill_report.py <input-path> <num-threads> <output-file-name>

Environment variables:
    KILLSTATS_REPORT_ID   override the report identifier written to the output
"""

import sys
from pathlib import Path

# Make `killstats` importable when run as a plain script
SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from killstats.main import main  # noqa: E402


if __name__ == "__main__":
    main()

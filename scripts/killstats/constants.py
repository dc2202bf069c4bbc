"""Pipeline constants — column layout, ranking limits, report identifier."""

import os

from killstats.errors import UsageError

# ─── CSV Column Layout ──────────────────────────────────────────

# 0-indexed positions in every kill-event row
WEAPON_COL = 0
KILLER_COL = 1
KILLER_X_COL = 3
KILLER_Y_COL = 4
VICTIM_X_COL = 10
VICTIM_Y_COL = 11

CSV_ENCODING = "utf-8"

# ─── Ranking ────────────────────────────────────────────────────

TOP_WEAPONS = 10
TOP_KILLERS = 10
TOP_KILLER_WEAPONS = 3

# Rounding applied to distances and percentages
DECIMALS = 2

# ─── Report ─────────────────────────────────────────────────────

REPORT_ID_KEY = "padron"
REPORT_ID_ENV = "KILLSTATS_REPORT_ID"
DEFAULT_REPORT_ID = 94455


def report_id():
    """Report identifier, from KILLSTATS_REPORT_ID if set."""
    value = os.environ.get(REPORT_ID_ENV)
    if value is None:
        return DEFAULT_REPORT_ID
    try:
        return int(value)
    except ValueError:
        raise UsageError(f"{REPORT_ID_ENV} must be an integer, got {value!r}") from None

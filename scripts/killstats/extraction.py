"""Row extraction — turn one raw CSV row into a kill event.

Only the weapon and killer names are required. Coordinates are optional:
anything that does not parse as a finite number is treated as unknown.
"""

import math

from killstats.constants import (
    WEAPON_COL, KILLER_COL,
    KILLER_X_COL, KILLER_Y_COL, VICTIM_X_COL, VICTIM_Y_COL,
    DECIMALS,
)
from killstats.errors import ParseError


def parse_coordinate(cell):
    """Parse a coordinate cell. Returns a float, or None if unknown."""
    if cell is None:
        return None
    try:
        value = float(cell.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _cell(row, index):
    return row[index] if index < len(row) else None


def _position(row, x_col, y_col):
    x = parse_coordinate(_cell(row, x_col))
    y = parse_coordinate(_cell(row, y_col))
    if x is None or y is None:
        return None
    return (x, y)


def kill_distance(killer_position, victim_position):
    """Euclidean distance between killer and victim, rounded to 2 decimals.

    Unknown positions contribute 0.0 rather than being skipped, so weapons
    with missing position data get a lower average distance. A distance too
    large to count in hundredths is treated the same as an unknown one.
    """
    if killer_position is None or victim_position is None:
        return 0.0
    kx, ky = killer_position
    vx, vy = victim_position
    distance = round(math.hypot(kx - vx, ky - vy), DECIMALS)
    if not math.isfinite(distance * 100):
        return 0.0
    return distance


def extract_event(row):
    """Build a kill event dict from a raw row.

    Raises ParseError if the weapon or killer column is missing.
    """
    if len(row) <= WEAPON_COL:
        raise ParseError("row has no weapon name")
    if len(row) <= KILLER_COL:
        raise ParseError("row has no killer name")

    killer_position = _position(row, KILLER_X_COL, KILLER_Y_COL)
    victim_position = _position(row, VICTIM_X_COL, VICTIM_Y_COL)

    return {
        "weapon": row[WEAPON_COL],
        "killer": row[KILLER_COL],
        "killer_position": killer_position,
        "victim_position": victim_position,
        "distance": kill_distance(killer_position, victim_position),
    }

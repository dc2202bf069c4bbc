"""Shared test factories for pipeline tests.

Provides factory functions for building raw kill-event rows, CSV files and
partial aggregates with sensible defaults and easy overrides.
"""

import csv
from pathlib import Path

HEADER = [
    "killed_by", "killer_name", "killer_placement", "killer_position_x",
    "killer_position_y", "map", "match_id", "time", "victim_name",
    "victim_placement", "victim_position_x", "victim_position_y",
]


# ─── Row Factory ─────────────────────────────────────────────────

def make_row(weapon="Knife", killer="Alice", killer_pos=None, victim_pos=None):
    """Build a 12-column kill-event row.

    Positions are (x, y) tuples; None leaves both cells empty.
    """
    row = [weapon, killer, "1", "", "", "ERANGEL", "match-1", "120", "Bob", "2", "", ""]
    if killer_pos is not None:
        row[3], row[4] = str(killer_pos[0]), str(killer_pos[1])
    if victim_pos is not None:
        row[10], row[11] = str(victim_pos[0]), str(victim_pos[1])
    return row


def make_rows(n, **kwargs):
    """N identical rows built with make_row()."""
    return [make_row(**kwargs) for _ in range(n)]


# ─── CSV File Factory ────────────────────────────────────────────

def make_csv(path, rows, header=True):
    """Write rows to a CSV file (with the standard header). Returns the path."""
    path = Path(path)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        if header:
            writer.writerow(HEADER)
        writer.writerows(rows)
    return path


# ─── Aggregate Factory ───────────────────────────────────────────

def make_partial(kills):
    """Build a partial aggregate from (weapon, killer, distance) triples."""
    from killstats.aggregation import new_aggregate, add_event

    aggregate = new_aggregate()
    for weapon, killer, distance in kills:
        add_event(aggregate, {"weapon": weapon, "killer": killer, "distance": distance})
    return aggregate

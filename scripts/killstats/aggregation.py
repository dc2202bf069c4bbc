"""Aggregation functions — fold kill events into per-weapon and per-killer stats.

An aggregate is a plain dict:

    {
        "record_count": int,
        "weapons": {name: {"kill_count": int, "distance_hundredths": int}},
        "killers": {name: {"kill_count": int, "weapons": {weapon: int}}},
    }

Distances are accumulated as integer hundredths. Every per-event distance is
rounded to 2 decimals before it is added, so the integer sum is exact and
merging is associative no matter how the reduction is ordered.

No I/O, no side effects beyond the aggregate being built.
"""

from killstats.errors import ParseError
from killstats.extraction import extract_event


def new_aggregate():
    """Return an empty aggregate."""
    return {"record_count": 0, "weapons": {}, "killers": {}}


def to_hundredths(distance):
    """Convert a 2-decimal distance to an integer count of hundredths."""
    return int(round(distance * 100))


def distance_sum(weapon_stats):
    """Sum of per-event distances for one weapon entry."""
    return weapon_stats["distance_hundredths"] / 100


def add_event(aggregate, event):
    """Fold one kill event into the aggregate in place."""
    weapon = event["weapon"]
    killer = event["killer"]

    aggregate["record_count"] += 1

    w = aggregate["weapons"].get(weapon)
    if w is None:
        w = aggregate["weapons"][weapon] = {"kill_count": 0, "distance_hundredths": 0}
    w["kill_count"] += 1
    w["distance_hundredths"] += to_hundredths(event["distance"])

    k = aggregate["killers"].get(killer)
    if k is None:
        k = aggregate["killers"][killer] = {"kill_count": 0, "weapons": {}}
    k["kill_count"] += 1
    k["weapons"][weapon] = k["weapons"].get(weapon, 0) + 1


def aggregate_rows(rows, source=None):
    """Aggregate the data rows of one file (header already removed).

    Blank rows carry no fields and are skipped. Any other row that cannot be
    turned into a kill event raises ParseError with its position; nothing is
    returned for a file with a bad row.
    """
    aggregate = new_aggregate()
    # Row 1 is the header
    for row_number, row in enumerate(rows, start=2):
        if not row:
            continue
        try:
            event = extract_event(row)
        except ParseError as e:
            raise ParseError(str(e), path=source, line=row_number) from e
        add_event(aggregate, event)
    return aggregate


# ─── Merging ────────────────────────────────────────────────────

def merge_aggregates(a, b):
    """Combine two aggregates into a new one. Neither input is modified.

    Every field is an integer sum, so the result is the same for any order
    of arguments and any grouping of repeated merges.
    """
    merged = {
        "record_count": a["record_count"] + b["record_count"],
        "weapons": {},
        "killers": {},
    }

    for source in (a, b):
        for name, stats in source["weapons"].items():
            w = merged["weapons"].setdefault(name, {"kill_count": 0, "distance_hundredths": 0})
            w["kill_count"] += stats["kill_count"]
            w["distance_hundredths"] += stats["distance_hundredths"]

        for name, stats in source["killers"].items():
            k = merged["killers"].setdefault(name, {"kill_count": 0, "weapons": {}})
            k["kill_count"] += stats["kill_count"]
            for weapon, count in stats["weapons"].items():
                k["weapons"][weapon] = k["weapons"].get(weapon, 0) + count

    return merged


def merge_all(aggregates):
    """Fold any number of aggregates into one, starting from empty."""
    result = new_aggregate()
    for aggregate in aggregates:
        result = merge_aggregates(result, aggregate)
    return result

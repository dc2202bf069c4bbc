"""Ranking — turn the global aggregate into top-N weapon and killer views.

All ordering goes through an explicit sort on (count desc, name asc), so the
result never depends on dict iteration order.
"""

from killstats.aggregation import distance_sum
from killstats.constants import (
    TOP_WEAPONS, TOP_KILLERS, TOP_KILLER_WEAPONS, DECIMALS,
    DEFAULT_REPORT_ID, REPORT_ID_KEY,
)


def _by_count_then_name(item):
    name, count = item
    return (-count, name)


def percentage(part, whole):
    """part / whole as a percentage rounded to 2 decimals (0.0 if whole is 0)."""
    if whole == 0:
        return 0.0
    return round(part / whole * 100, DECIMALS)


def rank_weapons(aggregate, limit=TOP_WEAPONS):
    """Top weapons by kill count with death share and average distance."""
    total = aggregate["record_count"]
    counts = [(name, w["kill_count"]) for name, w in aggregate["weapons"].items()]
    counts.sort(key=_by_count_then_name)

    ranked = []
    for name, kill_count in counts[:limit]:
        stats = aggregate["weapons"][name]
        ranked.append({
            "name": name,
            "kill_count": kill_count,
            "deaths_percentage": percentage(kill_count, total),
            "average_distance": round(distance_sum(stats) / kill_count, DECIMALS),
        })
    return ranked


def top_weapons_for(killer_stats, limit=TOP_KILLER_WEAPONS):
    """A killer's most used weapons as (weapon, usage percentage) pairs."""
    counts = sorted(killer_stats["weapons"].items(), key=_by_count_then_name)
    return [
        (weapon, percentage(count, killer_stats["kill_count"]))
        for weapon, count in counts[:limit]
    ]


def rank_killers(aggregate, limit=TOP_KILLERS):
    """Top killers by kill count, each with their top weapons."""
    counts = [(name, k["kill_count"]) for name, k in aggregate["killers"].items()]
    counts.sort(key=_by_count_then_name)

    return [
        {
            "name": name,
            "kill_count": kill_count,
            "top_weapons": top_weapons_for(aggregate["killers"][name]),
        }
        for name, kill_count in counts[:limit]
    ]


def build_report(aggregate, report_id=DEFAULT_REPORT_ID):
    """Build the output document. Keys are inserted in rank order."""
    top_killers = {}
    for killer in rank_killers(aggregate):
        top_killers[killer["name"]] = {
            "deaths": killer["kill_count"],
            "weapons_percentage": dict(killer["top_weapons"]),
        }

    top_weapons = {}
    for weapon in rank_weapons(aggregate):
        top_weapons[weapon["name"]] = {
            "deaths_percentage": weapon["deaths_percentage"],
            "average_distance": weapon["average_distance"],
        }

    return {
        REPORT_ID_KEY: report_id,
        "top_killers": top_killers,
        "top_weapons": top_weapons,
    }

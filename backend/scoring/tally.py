"""
Per-nominee aggregation of a session's nominations.

Counts nominations per nominee, turns each count into a share of the total
(percent, one decimal) and orders nominees by descending count. Ties keep
the order in which each nominee first appeared.
"""

from collections import Counter

from models.nomination import Nomination
from models.tally import NomineeTally, ResultsSummary


def count_nominees(nominations: list[Nomination]) -> dict[str, int]:
    # Counter preserves first-seen insertion order
    return dict(Counter(n.nominee_name for n in nominations))


def percentage(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(100 * count / total, 1)


def tally_nominees(nominations: list[Nomination]) -> list[NomineeTally]:
    counts = count_nominees(nominations)
    total = sum(counts.values())

    tallies = [
        NomineeTally(nominee_name=name, count=count, percentage=percentage(count, total))
        for name, count in counts.items()
    ]
    # sort() is stable, so equal counts stay in first-nomination order
    tallies.sort(key=lambda t: t.count, reverse=True)
    return tallies


def summarize(session_id: str, nominations: list[Nomination]) -> ResultsSummary:
    return ResultsSummary(
        session_id=session_id,
        total_nominations=len(nominations),
        nominees=tally_nominees(nominations),
    )

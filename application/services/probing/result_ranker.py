from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List

from domain.entities import ProbeOutcome
from domain.enums import ProbeMethod


def compare_outcomes(a: ProbeOutcome, b: ProbeOutcome) -> int:
    """Comparator: measured fastest-first, then blocked, then offline.

    Returns 0 for outcomes in the same group with no time, so the stable
    sort keeps their input order.
    """
    if a.time is not None and b.time is not None:
        return (a.time > b.time) - (a.time < b.time)
    if a.time is not None:
        return -1
    if b.time is not None:
        return 1
    a_blocked = a.method is ProbeMethod.BLOCKED
    b_blocked = b.method is ProbeMethod.BLOCKED
    if a_blocked and not b_blocked:
        return -1
    if b_blocked and not a_blocked:
        return 1
    return 0


class ResultRanker:
    """Stable presentation order for finished outcomes."""

    def rank(self, outcomes: Iterable[ProbeOutcome]) -> List[ProbeOutcome]:
        # sorted() is stable, ties keep submission order
        return sorted(outcomes, key=cmp_to_key(compare_outcomes))

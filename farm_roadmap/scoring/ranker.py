"""
Recommendation ranker: stable multi-key sort.

    Primary:   priority          descending  (High=3, Medium=2, Low=1)
    Secondary: estimated_impact  descending  (same scale)
    Remaining ties keep synthesis order (``sorted()`` is stable); report
    assertions rely on that.
"""

from __future__ import annotations

from collections.abc import Iterable

from farm_roadmap.models.assessment import LEVEL_ORDINAL, Recommendation


def rank_key(rec: Recommendation) -> tuple[int, int]:
    return (-LEVEL_ORDINAL[rec.priority], -LEVEL_ORDINAL[rec.estimated_impact])


def rank_recommendations(candidates: Iterable[Recommendation]) -> list[Recommendation]:
    """Return a new list ordered by priority, then impact, then input order."""
    return sorted(candidates, key=rank_key)

"""
Profile classifier: turns category means into qualitative labels.

Per category mean ``s`` (both bounds inclusive):

    s >= strength_threshold     (4.0) → "Strong <display name>"  (lower-cased)
    s <= improvement_threshold  (2.5) → "<Display Name> optimization needed"
    otherwise                         → no label

If no category earns a label of a kind, one generic fallback is used so
neither list is ever empty.
"""

from __future__ import annotations

from collections.abc import Mapping

from farm_roadmap.taxonomy.category_taxonomy import display_name

FALLBACK_STRENGTH = "Good foundation to build upon"
FALLBACK_IMPROVEMENT = "Continuous improvement opportunities"


def classify_categories(
    scores: Mapping[str, float],
    strength_threshold: float = 4.0,
    improvement_threshold: float = 2.5,
) -> tuple[list[str], list[str]]:
    """Label strong and weak categories.

    Args:
        scores:                Category slug → mean score (iteration order kept).
        strength_threshold:    Inclusive lower bound for a strength.
        improvement_threshold: Inclusive upper bound for an improvement area.

    Returns:
        ``(strengths, improvement_areas)``, each non-empty.
    """
    strengths: list[str] = []
    improvement_areas: list[str] = []

    for category, score in scores.items():
        name = display_name(category)
        if score >= strength_threshold:
            strengths.append(f"Strong {name.lower()}")
        elif score <= improvement_threshold:
            improvement_areas.append(f"{name} optimization needed")

    if not strengths:
        strengths.append(FALLBACK_STRENGTH)
    if not improvement_areas:
        improvement_areas.append(FALLBACK_IMPROVEMENT)

    return strengths, improvement_areas

"""
Recommendation synthesizer: rule-table lookup for weak categories.

Synthesis order (which the ranker preserves for equal priority/impact):
  1. Categories in profile order, skipping any with mean > recommendation
     threshold.  Within a category, rules fire in table order.
  2. The cross-cutting "comprehensive improvement plan" last, when the
     overall score is at or below its threshold and at least one category
     was scored.

Only scores are consulted, never the raw answers.  Categories without an
entry in the rule table contribute nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from farm_roadmap.models.assessment import FarmProfile, Recommendation
from farm_roadmap.scoring.rules import (
    COMPREHENSIVE_PLAN,
    RECOMMENDATION_RULES,
    RecommendationRule,
)

logger = logging.getLogger(__name__)


def synthesize_recommendations(
    profile: FarmProfile,
    recommendation_threshold: float = 3.0,
    comprehensive_plan_threshold: float = 2.5,
    rules: Mapping[str, tuple[RecommendationRule, ...]] = RECOMMENDATION_RULES,
) -> list[Recommendation]:
    """Build candidate recommendations, unsorted, in synthesis order.

    Args:
        profile:                      Output of ``calculate_farm_profile()``.
        recommendation_threshold:     Inclusive upper bound for a category to
                                      be considered for recommendations.
        comprehensive_plan_threshold: Inclusive upper bound on the overall
                                      score for the cross-cutting plan.
        rules:                        Category → ordered rules.

    Returns:
        New ``Recommendation`` objects (fresh on every call).
    """
    candidates: list[Recommendation] = []

    for category, score in profile.scores.items():
        if score > recommendation_threshold:
            continue
        fired = [rule.template.build() for rule in rules.get(category, ()) if rule.applies(score)]
        if not fired:
            logger.debug("No recommendation rules fired for %s (score %.2f)", category, score)
        candidates.extend(fired)

    if profile.scores and profile.overall_score <= comprehensive_plan_threshold:
        candidates.append(COMPREHENSIVE_PLAN.build())

    return candidates

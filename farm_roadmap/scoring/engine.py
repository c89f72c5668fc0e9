"""
Public entry points of the scoring engine.

Usage flow
----------
1. calculate_farm_profile(responses)
   -> FarmProfile   (normalize → aggregate → classify)

2. generate_recommendations(profile, responses)
   -> list[Recommendation]   (synthesize → rank)

``run_assessment()`` does both in one call.  ``responses`` is always the
mapping of response id → ``AssessmentResponse`` handed over by the form
handler; its insertion order fixes category order and therefore the final
tie order of recommendations.

Everything here is deterministic and side-effect free, so the same input
always produces equal output and concurrent calls need no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from farm_roadmap.config import ScoringConfig
from farm_roadmap.models.assessment import (
    AssessmentResponse,
    AssessmentResult,
    FarmProfile,
    Recommendation,
)
from farm_roadmap.scoring.aggregator import aggregate_scores
from farm_roadmap.scoring.classifier import classify_categories
from farm_roadmap.scoring.normalizer import is_recognized_answer
from farm_roadmap.scoring.ranker import rank_recommendations
from farm_roadmap.scoring.synthesizer import synthesize_recommendations

logger = logging.getLogger(__name__)

_DEFAULT_SCORING = ScoringConfig()


def calculate_farm_profile(
    responses: Mapping[str, AssessmentResponse],
    config: Optional[ScoringConfig] = None,
) -> FarmProfile:
    """Build the maturity profile for one submission.

    Args:
        responses: Response id → answer.
        config:    Scoring thresholds; defaults to ``ScoringConfig()``.

    Returns:
        FarmProfile.  For an empty mapping: no scores, overall score
        ``config.empty_overall_score`` and both fallback labels.
    """
    cfg = config or _DEFAULT_SCORING

    aggregate = aggregate_scores(
        responses.values(),
        neutral_score=cfg.neutral_score,
        empty_overall_score=cfg.empty_overall_score,
    )
    strengths, improvement_areas = classify_categories(
        aggregate.scores,
        strength_threshold=cfg.strength_threshold,
        improvement_threshold=cfg.improvement_threshold,
    )

    profile = FarmProfile(
        scores=aggregate.scores,
        strengths=strengths,
        improvement_areas=improvement_areas,
        overall_score=aggregate.overall_score,
    )
    logger.debug(
        "Profile built: %d responses, %d categories, overall %.2f",
        len(responses), len(profile.scores), profile.overall_score,
    )
    return profile


def generate_recommendations(
    profile: FarmProfile,
    responses: Mapping[str, AssessmentResponse],
    config: Optional[ScoringConfig] = None,
) -> list[Recommendation]:
    """Return ranked recommendations for a profile.

    ``responses`` is the submission the profile was built from.  Rules are
    keyed on scores only, so it is used for diagnostics, never for matching.
    """
    cfg = config or _DEFAULT_SCORING

    candidates = synthesize_recommendations(
        profile,
        recommendation_threshold=cfg.recommendation_threshold,
        comprehensive_plan_threshold=cfg.comprehensive_plan_threshold,
    )
    ranked = rank_recommendations(candidates)
    logger.debug(
        "%d recommendations from %d responses (overall %.2f)",
        len(ranked), len(responses), profile.overall_score,
    )
    return ranked


def run_assessment(
    responses: Mapping[str, AssessmentResponse],
    config: Optional[ScoringConfig] = None,
) -> AssessmentResult:
    """Profile + ranked recommendations in one call."""
    profile = calculate_farm_profile(responses, config)
    return AssessmentResult(
        profile=profile,
        recommendations=generate_recommendations(profile, responses, config),
    )


def find_unrecognized_answers(
    responses: Mapping[str, AssessmentResponse],
) -> list[AssessmentResponse]:
    """Answers that scoring silently maps to the neutral default.

    Diagnostic only; scores are unaffected.
    """
    return [r for r in responses.values() if not is_recognized_answer(r)]

"""
Category aggregator: groups normalized scores by category and averages them.

The overall score is the mean of the *category* means, not of the individual
answers. A category with five questions carries the same weight as one with
a single question.

    A = [5, 5] → 5.0,   B = [1] → 1.0   ⇒   overall = 3.0   (not 11/3)

Categories with no responses are left out of both ``scores`` and the overall
average.  With no responses at all the overall score is the configured empty
fallback (0.0 by default) rather than a division by zero.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from farm_roadmap.models.assessment import AssessmentResponse
from farm_roadmap.scoring.normalizer import NEUTRAL_SCORE, normalize_response


@dataclass(frozen=True)
class CategoryAggregate:
    """Result of aggregating one submission.

    Attributes:
        scores:        Category slug → mean score, in first-appearance order.
        overall_score: Mean of the category means.
        counts:        Category slug → number of responses averaged.
    """

    scores:        dict[str, float]
    overall_score: float
    counts:        dict[str, int]


def aggregate_scores(
    responses: Iterable[AssessmentResponse],
    neutral_score: int = NEUTRAL_SCORE,
    empty_overall_score: float = 0.0,
) -> CategoryAggregate:
    """Average normalized scores per category and across categories.

    Args:
        responses:           Answers in submission order.
        neutral_score:       Passed through to ``normalize_response()``.
        empty_overall_score: Overall score when there are no responses.

    Returns:
        CategoryAggregate with float means.
    """
    by_category: dict[str, list[float]] = defaultdict(list)
    for response in responses:
        by_category[response.category].append(
            normalize_response(response, neutral_score=neutral_score)
        )

    scores = {cat: sum(vals) / len(vals) for cat, vals in by_category.items()}
    counts = {cat: len(vals) for cat, vals in by_category.items()}

    if scores:
        overall = sum(scores.values()) / len(scores)
    else:
        overall = empty_overall_score

    return CategoryAggregate(scores=scores, overall_score=float(overall), counts=counts)

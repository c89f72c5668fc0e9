"""
Response normalizer: maps one raw survey answer to a 1–5 score.

Rules (evaluated in order — first match wins)
---------------------------------------------
    1. Numeric value  : returned unchanged.  No clamping: out-of-range
                        numbers pass straight through; range checks belong
                        to the form handler.
    2. "Yes" / "No"   : 5 / 1.
    3. Known option   : ANSWER_SCORES[question_id][value].
    4. Anything else  : neutral score (3 by default).

Rule 4 makes the function total, at the cost of absorbing typos and stale
option strings without any signal.  ``is_recognized_answer()`` lets callers
surface such answers separately without changing the score.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from farm_roadmap.models.assessment import AssessmentResponse

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 3
YES_SCORE = 5
NO_SCORE = 1


def _frozen(table: dict[str, dict[str, int]]) -> Mapping[str, Mapping[str, int]]:
    return MappingProxyType({qid: MappingProxyType(opts) for qid, opts in table.items()})


# Multiple-choice question id → option → score.
ANSWER_SCORES: Mapping[str, Mapping[str, int]] = _frozen({
    "fd-2": {   # growing system type
        "Hydroponic":    5,
        "Aeroponic":     5,
        "Aquaponic":     4,
        "Mixed systems": 4,
        "Soil-based":    3,
    },
    "tech-2": {  # monitoring systems
        "None":                1,
        "Temperature sensors": 3,
        "Humidity monitors":   3,
        "pH meters":           4,
        "EC/TDS meters":       4,
        "Cameras":             4,
    },
    "proc-2": {  # pest management
        "Integrated Pest Management (IPM)": 5,
        "Biological controls":              4,
        "Preventive measures only":         3,
        "Chemical treatments only":         2,
        "No formal approach":               1,
    },
    "org-2": {   # business model
        "Mixed sales channels": 5,
        "Direct-to-consumer":   4,
        "Farmers markets":      4,
        "CSA":                  3,
        "Wholesale":            3,
    },
    "yield-2": {  # production limiting factors
        "Market demand":      2,
        "Capital investment": 3,
        "Labor availability": 3,
        "Climate control":    4,
        "Space constraints":  4,
    },
    "crop-2": {  # crop selection drivers
        "Profit margins":      5,
        "Market demand":       4,
        "Climate suitability": 4,
        "Customer requests":   3,
        "Personal preference": 2,
    },
})


def normalize_response(
    response: AssessmentResponse,
    neutral_score: int = NEUTRAL_SCORE,
) -> int | float:
    """Convert one answer into its score.

    Args:
        response:      The raw answer.
        neutral_score: Score for unrecognized string answers.

    Returns:
        The numeric value unchanged for numeric answers, otherwise an int 1–5.
    """
    value = response.value
    if isinstance(value, (int, float)):
        return value
    if value == "Yes":
        return YES_SCORE
    if value == "No":
        return NO_SCORE

    score = ANSWER_SCORES.get(response.question_id, {}).get(value)
    if score is None:
        logger.debug(
            "Unrecognized answer %r for question %s; using neutral score %d",
            value, response.question_id, neutral_score,
        )
        return neutral_score
    return score


def is_recognized_answer(response: AssessmentResponse) -> bool:
    """True unless the answer would fall through to the neutral default."""
    value = response.value
    if isinstance(value, (int, float)) or value in ("Yes", "No"):
        return True
    return value in ANSWER_SCORES.get(response.question_id, {})

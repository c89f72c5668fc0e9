"""
Assessment input and output models.

``AssessmentResponse`` is one raw survey answer as produced by the upstream
form-submission handler.  Identifiers are taken as-is: the handler is
responsible for rejecting unknown question ids and category slugs before the
engine sees them.

``FarmProfile`` is the aggregated maturity profile (per-category means,
overall mean, qualitative labels).

``Recommendation`` is one prioritized improvement action.

All models are frozen. A profile is built once per submission and the
recommendation list is rebuilt from scratch on every call.  Attribute names
are snake_case; the camelCase aliases (``questionId``, ``overallScore``,
``improvementAreas``, ``estimatedImpact``) match the JSON exchanged with the
web layer, so ``model_validate(payload)`` and ``model_dump(by_alias=True)``
round-trip that shape directly.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Level = Literal["High", "Medium", "Low"]
Timeframe = Literal["Immediate", "Short-term", "Long-term"]

# Ordinal scale shared by priority and estimated impact.
LEVEL_ORDINAL: Mapping[str, int] = MappingProxyType({"Low": 1, "Medium": 2, "High": 3})

_MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class AssessmentResponse(BaseModel):
    """A single survey answer.

    Attributes:
        question_id: Catalog question id, e.g. ``"tech-2"``.
        value: Numeric scale answer (normally 1–5), ``"Yes"`` / ``"No"``,
            or a multiple-choice option string.
        category: Category slug the answer is scored under.
    """

    model_config = _MODEL_CONFIG

    question_id: str
    value: Union[int, float, str]
    category: str


class FarmProfile(BaseModel):
    """Aggregated maturity profile for one submission.

    Attributes:
        scores: Category slug → mean normalized score.  Only categories with
            at least one response appear; insertion order is the order in
            which categories first appeared in the responses.
        strengths: Labels for categories at or above the strength threshold,
            or a single generic fallback.
        improvement_areas: Labels for categories at or below the improvement
            threshold, or a single generic fallback.
        overall_score: Mean of the category means (0.0 for no responses).

    Freezing is shallow: fields cannot be reassigned, but ``scores`` and the
    label lists are plain containers.  Callers treat them as read-only.
    """

    model_config = _MODEL_CONFIG

    scores: dict[str, float]
    strengths: list[str]
    improvement_areas: list[str]
    overall_score: float


class Recommendation(BaseModel):
    """A prioritized, actionable improvement suggestion."""

    model_config = _MODEL_CONFIG

    title: str
    description: str
    category: str
    priority: Level
    estimated_impact: Level
    timeframe: Timeframe


class AssessmentResult(BaseModel):
    """Profile plus ranked recommendations for one full engine run."""

    model_config = _MODEL_CONFIG

    profile: FarmProfile
    recommendations: list[Recommendation]

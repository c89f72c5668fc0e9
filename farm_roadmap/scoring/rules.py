"""
Static recommendation rule table.

Each category maps to an ordered tuple of ``RecommendationRule``s.  A rule
pairs a score band with a ``RecommendationTemplate``; the synthesizer emits
the template for every rule whose band contains the category mean.  Rule
order inside a category is the emission order.

Bands are half-open on the low side and closed on the high side:

    above < score <= at_most        (either bound may be None = unbounded)

So an "urgent" rule (``at_most=2.0``) and its milder counterpart
(``above=2.0``) never both fire for the same score.

The table is only consulted for categories whose mean is already at or below
the recommendation threshold (3.0 by default); bands refine within that.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from farm_roadmap.models.assessment import Level, Recommendation, Timeframe
from farm_roadmap.taxonomy.category_taxonomy import AssessmentCategory

URGENT_SCORE = 2.0


@dataclass(frozen=True)
class RecommendationTemplate:
    """Immutable recommendation blueprint; ``build()`` yields a fresh model."""

    title:            str
    description:      str
    category:         str
    priority:         Level
    estimated_impact: Level
    timeframe:        Timeframe

    def build(self) -> Recommendation:
        return Recommendation(
            title=self.title,
            description=self.description,
            category=self.category,
            priority=self.priority,
            estimated_impact=self.estimated_impact,
            timeframe=self.timeframe,
        )


@dataclass(frozen=True)
class RecommendationRule:
    """Score band + template.  See module docstring for band semantics."""

    template: RecommendationTemplate
    at_most:  Optional[float] = None
    above:    Optional[float] = None

    def applies(self, score: float) -> bool:
        if self.at_most is not None and score > self.at_most:
            return False
        if self.above is not None and score <= self.above:
            return False
        return True


_GROWING_SPACE_LAYOUT = dict(
    title="Optimize Growing Space Layout",
    description=(
        "Redesign growing areas to maximize space utilization and improve "
        "workflow efficiency."
    ),
    category=AssessmentCategory.FARM_DESIGN.value,
    estimated_impact="Medium",
    timeframe="Long-term",
)

RECOMMENDATION_RULES: Mapping[str, tuple[RecommendationRule, ...]] = MappingProxyType({
    AssessmentCategory.FARM_DESIGN: (
        RecommendationRule(
            RecommendationTemplate(priority="High", **_GROWING_SPACE_LAYOUT),
            at_most=URGENT_SCORE,
        ),
        RecommendationRule(
            RecommendationTemplate(priority="Medium", **_GROWING_SPACE_LAYOUT),
            above=URGENT_SCORE,
        ),
    ),
    AssessmentCategory.TECHNOLOGY: (
        RecommendationRule(
            RecommendationTemplate(
                title="Implement Climate Control Automation",
                description=(
                    "Upgrade to automated climate control systems to improve "
                    "consistency and reduce labor."
                ),
                category=AssessmentCategory.TECHNOLOGY.value,
                priority="High",
                estimated_impact="High",
                timeframe="Short-term",
            ),
        ),
        RecommendationRule(
            RecommendationTemplate(
                title="Add Environmental Monitoring Systems",
                description=(
                    "Install sensors for temperature, humidity, and other key "
                    "environmental factors."
                ),
                category=AssessmentCategory.TECHNOLOGY.value,
                priority="Medium",
                estimated_impact="Medium",
                timeframe="Immediate",
            ),
            at_most=URGENT_SCORE,
        ),
    ),
    AssessmentCategory.PROCESSES: (
        RecommendationRule(
            RecommendationTemplate(
                title="Develop Standard Operating Procedures",
                description=(
                    "Create documented procedures for key growing and "
                    "maintenance activities."
                ),
                category=AssessmentCategory.PROCESSES.value,
                priority="Medium",
                estimated_impact="Medium",
                timeframe="Short-term",
            ),
        ),
    ),
    AssessmentCategory.ORGANIZATION: (
        RecommendationRule(
            RecommendationTemplate(
                title="Implement Farm Management Software",
                description=(
                    "Digitize record-keeping and production tracking for "
                    "better decision-making."
                ),
                category=AssessmentCategory.ORGANIZATION.value,
                priority="Medium",
                estimated_impact="Medium",
                timeframe="Immediate",
            ),
        ),
    ),
    AssessmentCategory.YIELDS: (
        RecommendationRule(
            RecommendationTemplate(
                title="Analyze and Optimize Production Metrics",
                description=(
                    "Track yield data and identify factors limiting production "
                    "efficiency."
                ),
                category=AssessmentCategory.YIELDS.value,
                priority="High",
                estimated_impact="High",
                timeframe="Short-term",
            ),
        ),
    ),
    AssessmentCategory.CROPS: (
        RecommendationRule(
            RecommendationTemplate(
                title="Diversify Crop Portfolio",
                description=(
                    "Evaluate and introduce complementary crops to reduce risk "
                    "and increase profitability."
                ),
                category=AssessmentCategory.CROPS.value,
                priority="Medium",
                estimated_impact="Medium",
                timeframe="Long-term",
            ),
        ),
    ),
})

# Cross-cutting recommendation for a low overall score.
COMPREHENSIVE_PLAN = RecommendationTemplate(
    title="Develop a Comprehensive Improvement Plan",
    description=(
        "Create a structured plan to address multiple areas for systematic "
        "improvement."
    ),
    category=AssessmentCategory.ORGANIZATION.value,
    priority="High",
    estimated_impact="High",
    timeframe="Immediate",
)

"""
Assessment category taxonomy for the farm readiness survey.

Every survey question belongs to exactly one of six greenhouse-operation
domains.  ``AssessmentCategory`` holds the canonical slugs used in response
records; ``CATEGORY_DISPLAY_NAMES`` maps each slug to the label shown in
profile strengths / improvement areas.

The display-name mapping is the integrity contract for this module:
  - Every ``AssessmentCategory`` must have a display name.
  - The mapping is read-only (``MappingProxyType``) and shared by reference.

Category keys arriving in responses are NOT validated here; upstream
handlers own that.  ``display_name()`` therefore falls back to the raw key
for anything it does not recognise.

This module has NO imports from any other ``farm_roadmap`` package.
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping


class AssessmentCategory(StrEnum):
    """Greenhouse-operation domain assessed by the survey."""

    FARM_DESIGN = "farm-design"
    """Physical infrastructure and layout optimization."""

    TECHNOLOGY = "technology"
    """Automation and digital tools implementation."""

    PROCESSES = "processes"
    """Daily operations and workflow efficiency."""

    ORGANIZATION = "organization"
    """Business management and operational structure."""

    YIELDS = "yields"
    """Production efficiency and output optimization."""

    CROPS = "crops"
    """Crop selection and diversification strategy."""


CATEGORY_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType({
    AssessmentCategory.FARM_DESIGN:  "Farm Design",
    AssessmentCategory.TECHNOLOGY:   "Technology",
    AssessmentCategory.PROCESSES:    "Processes",
    AssessmentCategory.ORGANIZATION: "Organization",
    AssessmentCategory.YIELDS:       "Yields",
    AssessmentCategory.CROPS:        "Crops",
})


def display_name(category: str) -> str:
    """Return the human-readable name for a category slug.

    Unmapped keys are returned unchanged.
    """
    return CATEGORY_DISPLAY_NAMES.get(category, category)

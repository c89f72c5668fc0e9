"""
Shared pytest fixtures for the Farm Roadmap test suite.

Provides:
  - ``make_response``: factory for ``AssessmentResponse`` objects.
  - ``responses_from``: builds the id → response mapping the engine consumes.
  - Sample submissions (strong, weak, mixed) used across test modules.
  - ``config_file``: a minimal TOML config in a temp directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from farm_roadmap.models.assessment import AssessmentResponse


def _response(question_id: str, value, category: str) -> AssessmentResponse:
    return AssessmentResponse(question_id=question_id, value=value, category=category)


def _mapping(rows: list[tuple[str, object, str]]) -> dict[str, AssessmentResponse]:
    return {qid: _response(qid, value, cat) for qid, value, cat in rows}


@pytest.fixture
def make_response() -> Callable[..., AssessmentResponse]:
    return _response


@pytest.fixture
def responses_from() -> Callable[[list[tuple[str, object, str]]], dict[str, AssessmentResponse]]:
    """Build ``{question_id: AssessmentResponse}`` from (id, value, category) rows."""
    return _mapping


# ── Sample submissions ────────────────────────────────────────────────────────

@pytest.fixture
def strong_responses() -> dict[str, AssessmentResponse]:
    """Every category averages >= 4.0."""
    return _mapping([
        ("fd-1", 5, "farm-design"),
        ("fd-2", "Hydroponic", "farm-design"),
        ("fd-3", "Yes", "farm-design"),
        ("tech-1", 4, "technology"),
        ("tech-2", "pH meters", "technology"),
        ("tech-3", "Yes", "technology"),
        ("proc-1", 5, "processes"),
        ("proc-2", "Integrated Pest Management (IPM)", "processes"),
        ("proc-3", "Yes", "processes"),
        ("org-1", 4, "organization"),
        ("org-2", "Mixed sales channels", "organization"),
        ("org-3", "Yes", "organization"),
        ("yield-1", 5, "yields"),
        ("yield-2", "Climate control", "yields"),
        ("yield-3", "Yes", "yields"),
        ("crop-1", 4, "crops"),
        ("crop-2", "Profit margins", "crops"),
        ("crop-3", "Yes", "crops"),
    ])


@pytest.fixture
def weak_responses() -> dict[str, AssessmentResponse]:
    """Every category averages <= 2.0."""
    return _mapping([
        ("fd-1", 1, "farm-design"),
        ("fd-2", "Soil-based", "farm-design"),
        ("fd-3", "No", "farm-design"),
        ("tech-1", 1, "technology"),
        ("tech-2", "None", "technology"),
        ("tech-3", "No", "technology"),
        ("proc-1", 2, "processes"),
        ("proc-2", "No formal approach", "processes"),
        ("proc-3", "No", "processes"),
        ("org-1", 1, "organization"),
        ("org-2", "Wholesale", "organization"),
        ("org-3", "No", "organization"),
        ("yield-1", 2, "yields"),
        ("yield-2", "Market demand", "yields"),
        ("yield-3", "No", "yields"),
        ("crop-1", 1, "crops"),
        ("crop-2", "Personal preference", "crops"),
        ("crop-3", "No", "crops"),
    ])


@pytest.fixture
def mixed_responses() -> dict[str, AssessmentResponse]:
    """Strong farm design (4.33), middling technology (3.0), weak yields (1.67)."""
    return _mapping([
        ("fd-1", 4, "farm-design"),
        ("fd-2", "Aquaponic", "farm-design"),
        ("fd-3", "Yes", "farm-design"),
        ("tech-1", 3, "technology"),
        ("tech-2", "Temperature sensors", "technology"),
        ("tech-3", "Maybe", "technology"),
        ("yield-1", 2, "yields"),
        ("yield-2", "Market demand", "yields"),
        ("yield-3", "No", "yields"),
    ])


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Minimal valid TOML config; WARNING log level keeps CLI output clean."""
    path = tmp_path / "config.toml"
    path.write_text(
        "[logging]\n"
        'level = "WARNING"\n'
        "\n"
        "[output]\n"
        f'report_dir = "{(tmp_path / "reports").as_posix()}"\n',
        encoding="utf-8",
    )
    return path

"""Tests for farm_roadmap.reporting.formatters."""

from __future__ import annotations

import pytest

from farm_roadmap.reporting.formatters import (
    format_profile_summary,
    format_question_list,
    format_recommendations_table,
    score_pct,
)
from farm_roadmap.scoring.engine import calculate_farm_profile, run_assessment
from farm_roadmap.taxonomy.question_catalog import get_questions_by_category


# ── score_pct ─────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "score, expected",
    [(0.0, 0.0), (2.5, 50.0), (5.0, 100.0), (7.0, 100.0), (-1.0, 0.0)],
)
def test_score_pct(score: float, expected: float) -> None:
    assert score_pct(score) == pytest.approx(expected)


# ── format_profile_summary ────────────────────────────────────────────────────


def test_profile_summary_lists_categories_and_labels(mixed_responses) -> None:
    text = format_profile_summary(calculate_farm_profile(mixed_responses))
    assert "=== Farm Profile ===" in text
    assert "Overall score: 3.00 / 5" in text
    assert "Farm Design" in text
    assert "+ Strong farm design" in text
    assert "- Yields optimization needed" in text


def test_profile_summary_empty() -> None:
    text = format_profile_summary(calculate_farm_profile({}))
    assert "(no responses scored)" in text
    assert "Overall score: 0.00 / 5" in text


# ── format_recommendations_table ──────────────────────────────────────────────


def test_recommendations_table_rows_in_rank_order(mixed_responses) -> None:
    result = run_assessment(mixed_responses)
    lines = format_recommendations_table(result.recommendations).split("\n")
    rows = [ln for ln in lines if ln.strip()[:1].isdigit()]
    assert len(rows) == 2
    assert "Implement Climate Control Automation" in rows[0]
    assert "Analyze and Optimize Production Metrics" in rows[1]


def test_recommendations_table_empty() -> None:
    assert "(no recommendations" in format_recommendations_table([])


# ── format_question_list ──────────────────────────────────────────────────────


def test_question_list_groups_by_category() -> None:
    text = format_question_list(get_questions_by_category("technology"))
    assert "[TECHNOLOGY]" in text
    assert "tech-2" in text
    assert "EC/TDS meters" in text

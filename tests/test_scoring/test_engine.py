"""
Tests for farm_roadmap/scoring/engine.py (end-to-end pipeline).

What we test
------------
calculate_farm_profile():
  - Mixed submission: category means, overall mean of means, labels.
  - Yes/No normalize to 5/1 inside the pipeline.
  - strengths / improvement_areas non-empty for any non-empty input.
  - Empty submission → neutral profile with both fallbacks and 0.0 overall.
  - ScoringConfig thresholds are honoured.

generate_recommendations():
  - Strong submission → no recommendations.
  - Weak submission → full ranked list, High/High ties in category order.
  - Mixed submission → two High/High recommendations in category order.
  - Ranked list never has a lower priority before a higher one.

run_assessment():
  - Idempotent: identical input → equal result.

find_unrecognized_answers():
  - Lists only answers that fell through to the neutral default.
"""

from __future__ import annotations

import pytest

from farm_roadmap.config import ScoringConfig
from farm_roadmap.models.assessment import LEVEL_ORDINAL
from farm_roadmap.scoring.classifier import FALLBACK_IMPROVEMENT, FALLBACK_STRENGTH
from farm_roadmap.scoring.engine import (
    calculate_farm_profile,
    find_unrecognized_answers,
    generate_recommendations,
    run_assessment,
)


class TestCalculateFarmProfile:
    def test_mixed_scores(self, mixed_responses):
        profile = calculate_farm_profile(mixed_responses)
        assert list(profile.scores) == ["farm-design", "technology", "yields"]
        assert profile.scores["farm-design"] == pytest.approx(13 / 3, abs=1e-9)
        assert profile.scores["technology"] == pytest.approx(3.0, abs=1e-9)
        assert profile.scores["yields"] == pytest.approx(5 / 3, abs=1e-9)
        assert profile.overall_score == pytest.approx(3.0, abs=1e-9)

    def test_mixed_labels(self, mixed_responses):
        profile = calculate_farm_profile(mixed_responses)
        assert profile.strengths == ["Strong farm design"]
        assert profile.improvement_areas == ["Yields optimization needed"]

    def test_overall_is_mean_of_means(self, responses_from):
        profile = calculate_farm_profile(responses_from([
            ("a-1", 5, "farm-design"),
            ("a-2", 5, "farm-design"),
            ("b-1", 1, "crops"),
        ]))
        assert profile.overall_score == pytest.approx(3.0)

    def test_yes_no_scores(self, responses_from):
        profile = calculate_farm_profile(responses_from([
            ("fd-3", "Yes", "farm-design"),
            ("tech-3", "No", "technology"),
        ]))
        assert profile.scores == {"farm-design": 5.0, "technology": 1.0}

    def test_labels_never_empty(self, strong_responses, weak_responses, mixed_responses):
        for responses in (strong_responses, weak_responses, mixed_responses):
            profile = calculate_farm_profile(responses)
            assert profile.strengths
            assert profile.improvement_areas

    def test_strong_profile_uses_improvement_fallback(self, strong_responses):
        profile = calculate_farm_profile(strong_responses)
        assert len(profile.strengths) == 6
        assert profile.improvement_areas == [FALLBACK_IMPROVEMENT]

    def test_weak_profile_uses_strength_fallback(self, weak_responses):
        profile = calculate_farm_profile(weak_responses)
        assert profile.strengths == [FALLBACK_STRENGTH]
        assert len(profile.improvement_areas) == 6

    def test_empty_submission(self):
        profile = calculate_farm_profile({})
        assert profile.scores == {}
        assert profile.overall_score == 0.0
        assert profile.strengths == [FALLBACK_STRENGTH]
        assert profile.improvement_areas == [FALLBACK_IMPROVEMENT]

    def test_boundaries_inclusive(self, responses_from):
        profile = calculate_farm_profile(responses_from([
            ("crop-1", 4, "crops"),
            ("yield-1", 2, "yields"),
            ("yield-2", 3, "yields"),
        ]))
        assert profile.scores == {"crops": 4.0, "yields": 2.5}
        assert profile.strengths == ["Strong crops"]
        assert profile.improvement_areas == ["Yields optimization needed"]

    def test_custom_config(self, responses_from):
        config = ScoringConfig(strength_threshold=4.5, empty_overall_score=2.0)
        profile = calculate_farm_profile(responses_from([("crop-1", 4, "crops")]), config)
        assert profile.strengths == [FALLBACK_STRENGTH]
        assert calculate_farm_profile({}, config).overall_score == 2.0


class TestGenerateRecommendations:
    def test_strong_submission_has_none(self, strong_responses):
        profile = calculate_farm_profile(strong_responses)
        assert generate_recommendations(profile, strong_responses) == []

    def test_weak_submission_full_ranking(self, weak_responses):
        profile = calculate_farm_profile(weak_responses)
        recs = generate_recommendations(profile, weak_responses)
        assert [r.title for r in recs] == [
            "Implement Climate Control Automation",
            "Analyze and Optimize Production Metrics",
            "Develop a Comprehensive Improvement Plan",
            "Optimize Growing Space Layout",
            "Add Environmental Monitoring Systems",
            "Develop Standard Operating Procedures",
            "Implement Farm Management Software",
            "Diversify Crop Portfolio",
        ]

    def test_mixed_high_high_in_category_order(self, mixed_responses):
        profile = calculate_farm_profile(mixed_responses)
        recs = generate_recommendations(profile, mixed_responses)
        assert [(r.category, r.priority, r.estimated_impact) for r in recs] == [
            ("technology", "High", "High"),
            ("yields", "High", "High"),
        ]

    def test_category_order_flips_with_input_order(self, responses_from):
        yields_first = responses_from([
            ("yield-1", 2, "yields"),
            ("tech-1", 2, "technology"),
        ])
        profile = calculate_farm_profile(yields_first)
        recs = generate_recommendations(profile, yields_first)
        high_high = [r.category for r in recs if r.priority == r.estimated_impact == "High"]
        assert high_high[:2] == ["yields", "technology"]

    def test_priority_never_increases(self, weak_responses):
        profile = calculate_farm_profile(weak_responses)
        recs = generate_recommendations(profile, weak_responses)
        keys = [
            (LEVEL_ORDINAL[r.priority], LEVEL_ORDINAL[r.estimated_impact]) for r in recs
        ]
        assert keys == sorted(keys, reverse=True)

    def test_empty_submission_has_none(self):
        profile = calculate_farm_profile({})
        assert generate_recommendations(profile, {}) == []


class TestRunAssessment:
    def test_idempotent(self, mixed_responses, weak_responses):
        for responses in (mixed_responses, weak_responses):
            assert run_assessment(responses) == run_assessment(responses)

    def test_result_matches_two_step_calls(self, weak_responses):
        result = run_assessment(weak_responses)
        profile = calculate_farm_profile(weak_responses)
        assert result.profile == profile
        assert result.recommendations == generate_recommendations(profile, weak_responses)


class TestFindUnrecognizedAnswers:
    def test_lists_neutral_fallbacks(self, mixed_responses):
        unrecognized = find_unrecognized_answers(mixed_responses)
        assert [(r.question_id, r.value) for r in unrecognized] == [("tech-3", "Maybe")]

    def test_none_for_clean_submission(self, strong_responses):
        assert find_unrecognized_answers(strong_responses) == []

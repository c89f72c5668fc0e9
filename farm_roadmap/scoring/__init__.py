"""
Scoring engine: converts categorized survey answers into a farm maturity
profile and a ranked list of improvement recommendations.

Modules
-------
normalizer  : ANSWER_SCORES table + normalize_response() — one answer → score.
aggregator  : CategoryAggregate + aggregate_scores() — category means and the
              overall mean of means.
classifier  : classify_categories() — strengths / improvement-area labels.
rules       : RecommendationTemplate, RecommendationRule, RECOMMENDATION_RULES
              — the static per-category rule table.
synthesizer : synthesize_recommendations() — rule-table lookup for weak
              categories plus the cross-cutting improvement plan.
ranker      : rank_recommendations() — stable priority/impact sort.
engine      : calculate_farm_profile() + generate_recommendations() +
              run_assessment() — the public entry points.

Every module here is pure: no I/O, no shared mutable state.
"""

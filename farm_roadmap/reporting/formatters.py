"""
ASCII terminal formatters for the CLI.

All formatters take engine output objects and return plain multi-line
strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from collections.abc import Sequence

from farm_roadmap.models.assessment import FarmProfile, Recommendation
from farm_roadmap.models.question import AssessmentQuestion
from farm_roadmap.taxonomy.category_taxonomy import display_name

MAX_SCORE = 5.0


def score_pct(score: float) -> float:
    """Map a 0–5 score onto 0–100 for progress bars.  Clamped."""
    return max(0.0, min(100.0, score / MAX_SCORE * 100.0))


def _bar(score: float, width: int = 20) -> str:
    filled = round(score_pct(score) / 100.0 * width)
    return "#" * filled + "." * (width - filled)


# ── Profile ───────────────────────────────────────────────────────────────────


def format_profile_summary(profile: FarmProfile) -> str:
    """Format category scores, overall score and labels.

    Example::

        === Farm Profile ===
          Overall score: 3.40 / 5

          Category            Score  Progress
          ------------------------------------------------
          Farm Design          4.33  [#################...]
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Farm Profile ===")
    lines.append(f"  Overall score: {profile.overall_score:.2f} / 5")

    if not profile.scores:
        lines.append("")
        lines.append("  (no responses scored)")
    else:
        lines.append("")
        lines.append(f"  {'Category':<18}  {'Score':>5}  Progress")
        lines.append("  " + "-" * 48)
        for cat, score in profile.scores.items():
            lines.append(f"  {display_name(cat):<18}  {score:>5.2f}  [{_bar(score)}]")

    lines.append("")
    lines.append("  Strengths:")
    lines.extend(f"    + {s}" for s in profile.strengths)
    lines.append("  Improvement areas:")
    lines.extend(f"    - {s}" for s in profile.improvement_areas)
    return "\n".join(lines)


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendations_table(recommendations: Sequence[Recommendation]) -> str:
    """Format ranked recommendations as an ASCII table, one row each."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Recommendations ===")

    if not recommendations:
        lines.append("")
        lines.append("  (no recommendations: every category is above the threshold)")
        return "\n".join(lines)

    header = (
        f"  {'Rank':>4}  {'Title':<42}  {'Category':<14}  "
        f"{'Priority':<8}  {'Impact':<8}  {'Timeframe':<10}"
    )
    lines.append("")
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for rank, rec in enumerate(recommendations, start=1):
        lines.append(
            f"  {rank:>4}  {rec.title[:42]:<42}  {rec.category:<14}  "
            f"{rec.priority:<8}  {rec.estimated_impact:<8}  {rec.timeframe:<10}"
        )
    return "\n".join(lines)


# ── Catalog ───────────────────────────────────────────────────────────────────


def format_question_list(questions: Sequence[AssessmentQuestion]) -> str:
    """List catalog questions grouped under their category name."""
    lines: list[str] = []
    current = None
    for q in questions:
        if q.category != current:
            current = q.category
            lines.append("")
            lines.append(f"  [{display_name(q.category).upper()}]")
        lines.append(f"    {q.id:<8} ({q.type}) {q.question}")
        if q.options:
            lines.append(f"             options: {', '.join(q.options)}")
    return "\n".join(lines)

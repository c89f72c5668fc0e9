"""
Assessment report export: JSON payload and flat CSV.

``build_report_payload()`` is the single adapter from engine output to a
serialisable dict; the writers just put it on disk and return the ``Path``.

Output files
------------
  <report_dir>/
    assessment_{stamp}.json          -- profile + ranked recommendations
    recommendations_{stamp}.csv      -- one row per recommendation
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from farm_roadmap.models.assessment import AssessmentResult
from farm_roadmap.reporting.formatters import score_pct
from farm_roadmap.taxonomy.category_taxonomy import display_name

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"

RECOMMENDATION_FIELDS = [
    "rank", "title", "category", "priority", "estimated_impact",
    "timeframe", "description",
]


def build_report_payload(
    result: AssessmentResult,
    generated_at: datetime | None = None,
) -> dict:
    """Convert an ``AssessmentResult`` into a JSON-ready dict.

    Profile fields keep their camelCase wire names.  Each category gets a
    ``categories`` entry with its display name and 0–100 percentage, and each
    recommendation a 1-based ``rank``.

    Args:
        result:       Engine output.
        generated_at: Timestamp for provenance. Defaults to now (UTC).

    Returns:
        Dict with keys ``schema_version``, ``generated_at``, ``profile``,
        ``categories``, ``recommendations``.
    """
    if generated_at is None:
        generated_at = datetime.now(tz=timezone.utc)

    profile = result.profile
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at":   generated_at.isoformat(),
        "profile":        profile.model_dump(by_alias=True),
        "categories": [
            {
                "category":     cat,
                "display_name": display_name(cat),
                "score":        round(score, 2),
                "score_pct":    round(score_pct(score), 1),
            }
            for cat, score in profile.scores.items()
        ],
        "recommendations": [
            {"rank": rank, **rec.model_dump(by_alias=True)}
            for rank, rec in enumerate(result.recommendations, start=1)
        ],
    }


def write_report_json(
    result: AssessmentResult,
    output_dir: Path,
    generated_at: datetime | None = None,
) -> Path:
    """Write the full report payload to ``assessment_{stamp}.json``."""
    payload = build_report_payload(result, generated_at)
    stamp = _file_stamp(payload["generated_at"])

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"assessment_{stamp}.json"
    json_path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    logger.info("Assessment JSON written: %s", json_path)
    return json_path


def write_recommendations_csv(
    result: AssessmentResult,
    output_dir: Path,
    generated_at: datetime | None = None,
) -> Path:
    """Write ranked recommendations to ``recommendations_{stamp}.csv``.

    Columns: rank, title, category, priority, estimated_impact, timeframe,
             description.  An empty recommendation list still gets a header.
    """
    if generated_at is None:
        generated_at = datetime.now(tz=timezone.utc)
    stamp = _file_stamp(generated_at.isoformat())

    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / f"recommendations_{stamp}.csv"

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=RECOMMENDATION_FIELDS)
        writer.writeheader()
        for rank, rec in enumerate(result.recommendations, start=1):
            writer.writerow({"rank": rank, **rec.model_dump()})

    logger.info(
        "Recommendation CSV written: %s (%d rows)", csv_path, len(result.recommendations)
    )
    return csv_path


def _file_stamp(iso_ts: str) -> str:
    # "2026-10-18T09:30:00+00:00" -> "20261018T093000"
    return iso_ts[:19].replace("-", "").replace(":", "")

"""
Farm Roadmap CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Run the scoring engine / look up the catalog.
  5. Report result to stdout.

Install and run::

    pip install -e .
    farm-roadmap --help
    farm-roadmap questions
    farm-roadmap assess responses.json
    farm-roadmap assess responses.json --json
    farm-roadmap assess responses.json --write --output-dir reports/
    farm-roadmap validate-config
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="farm-roadmap",
    help="Farm readiness assessment: scoring and recommendations.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from farm_roadmap.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from farm_roadmap.utils.logging import configure_logging
    configure_logging(config.logging)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("assess")
def assess(
    responses_file: Path = typer.Argument(
        ...,
        help="JSON file of survey responses (object keyed by id, or array).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the report payload as JSON instead of tables.",
    ),
    write: bool = typer.Option(
        False,
        "--write",
        help="Also write JSON + CSV report files.",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Report directory for --write (default: config output.report_dir).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Score a set of survey responses and print ranked recommendations.

    Answers the engine does not recognise are still scored (neutral 3) but
    are listed as warnings on stderr.
    """
    from pydantic import ValidationError

    from farm_roadmap.reporting.export import (
        build_report_payload,
        write_recommendations_csv,
        write_report_json,
    )
    from farm_roadmap.reporting.formatters import (
        format_profile_summary,
        format_recommendations_table,
    )
    from farm_roadmap.reporting.reader import load_responses
    from farm_roadmap.scoring.engine import find_unrecognized_answers, run_assessment
    from farm_roadmap.taxonomy.question_catalog import completion_pct

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        responses = load_responses(responses_file)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Invalid responses file: {exc}", err=True)
        raise typer.Exit(code=1)

    for resp in find_unrecognized_answers(responses):
        typer.echo(
            f"[WARN] Unrecognized answer {resp.value!r} for {resp.question_id}; "
            f"scored as neutral {config.scoring.neutral_score}.",
            err=True,
        )

    result = run_assessment(responses, config.scoring)
    generated_at = datetime.now(tz=timezone.utc)

    if as_json:
        typer.echo(json.dumps(build_report_payload(result, generated_at), indent=2, default=str))
    else:
        answered = completion_pct(r.question_id for r in responses.values())
        typer.echo(f"Responses: {len(responses)}  (catalog coverage {answered:.0f}%)")
        typer.echo(format_profile_summary(result.profile))
        typer.echo(format_recommendations_table(result.recommendations))

    if write:
        target = Path(output_dir or config.output.report_dir)
        json_path = write_report_json(result, target, generated_at)
        csv_path = write_recommendations_csv(result, target, generated_at)
        typer.echo(f"[OK] Report written: {json_path}", err=as_json)
        typer.echo(f"[OK] Report written: {csv_path}", err=as_json)


@app.command("questions")
def questions(
    category: Optional[str] = typer.Option(
        None,
        "--category",
        "-c",
        help="Only list questions of this category (e.g. technology).",
    ),
) -> None:
    """List the assessment question catalog."""
    from farm_roadmap.reporting.formatters import format_question_list
    from farm_roadmap.taxonomy.question_catalog import (
        get_all_questions,
        get_category,
        get_questions_by_category,
        get_total_questions,
    )

    if category is not None:
        if get_category(category) is None:
            typer.echo(f"[ERROR] Unknown category: {category}", err=True)
            raise typer.Exit(code=1)
        selected = get_questions_by_category(category)
    else:
        selected = get_all_questions()

    typer.echo(f"{len(selected)} of {get_total_questions()} questions")
    typer.echo(format_question_list(selected))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)
    scoring = config.scoring

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Strength threshold:       >= {scoring.strength_threshold}")
    typer.echo(f"  Improvement threshold:    <= {scoring.improvement_threshold}")
    typer.echo(f"  Recommendation threshold: <= {scoring.recommendation_threshold}")
    typer.echo(f"  Improvement plan at:      <= {scoring.comprehensive_plan_threshold}")
    typer.echo(f"  Report dir:               {config.output.report_dir}")
    typer.echo(f"  Log level:                {config.logging.level}")
    typer.echo(f"  Debug mode:               {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()

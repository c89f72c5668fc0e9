"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local secrets and env overrides (gitignored)
  4. Environment variables        — ``FARM_ROADMAP_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The scoring engine itself never loads configuration: its functions take an
optional ``ScoringConfig`` and fall back to ``ScoringConfig()``, whose
defaults are the published scoring thresholds.  Only the CLI reads files.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class ScoringConfig(BaseModel):
    """Thresholds used by the profile classifier and recommendation synthesizer.

    All comparisons are inclusive (``>=`` for strengths, ``<=`` for the rest).
    """

    model_config = ConfigDict(frozen=True)

    strength_threshold: float = 4.0
    improvement_threshold: float = 2.5
    recommendation_threshold: float = 3.0
    comprehensive_plan_threshold: float = 2.5
    neutral_score: int = 3
    empty_overall_score: float = 0.0

    @model_validator(mode="after")
    def validate_threshold_order(self) -> "ScoringConfig":
        if self.improvement_threshold >= self.strength_threshold:
            raise ValueError(
                f"improvement_threshold ({self.improvement_threshold}) must be "
                f"below strength_threshold ({self.strength_threshold})."
            )
        return self

    @field_validator("neutral_score")
    @classmethod
    def validate_neutral_score(cls, v: int) -> int:
        if not 1 <= v <= 5:
            raise ValueError(f"neutral_score must be in [1, 5], got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: Optional[str] = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class OutputConfig(BaseModel):
    """Where ``assess --write`` puts its report files."""

    model_config = ConfigDict(frozen=True)

    report_dir: str = "data/outputs/assessments"


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()`` which merges TOML + .env.
    """

    model_config = ConfigDict(frozen=True)

    scoring: ScoringConfig = ScoringConfig()
    logging: LoggingConfig = LoggingConfig()
    output: OutputConfig = OutputConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply FARM_ROADMAP_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply FARM_ROADMAP_* env vars to the raw config dict.

    Supported overrides:
      FARM_ROADMAP_LOG_LEVEL   → raw["logging"]["level"]
      FARM_ROADMAP_OUTPUT_DIR  → raw["output"]["report_dir"]
      FARM_ROADMAP_DEBUG       → raw["debug"]
    """
    if log_level := os.environ.get("FARM_ROADMAP_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if report_dir := os.environ.get("FARM_ROADMAP_OUTPUT_DIR"):
        raw.setdefault("output", {})["report_dir"] = report_dir

    if debug := os.environ.get("FARM_ROADMAP_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        scoring=ScoringConfig(**raw.get("scoring", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        output=OutputConfig(**raw.get("output", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )

"""
Load survey responses from a JSON file.

Two shapes are accepted:

  Object keyed by response id (what the web form submits)::

    {"fd-1": {"questionId": "fd-1", "value": 4, "category": "farm-design"}, ...}

  Array of response objects, keyed here by ``questionId``::

    [{"questionId": "fd-1", "value": 4, "category": "farm-design"}, ...]

  A ``questionId`` may appear only once in an array.

Key order is preserved; it decides category order in the profile.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from farm_roadmap.models.assessment import AssessmentResponse

logger = logging.getLogger(__name__)


def parse_responses(raw: Any) -> dict[str, AssessmentResponse]:
    """Validate already-decoded JSON into ``AssessmentResponse`` objects.

    Raises:
        ValueError: If ``raw`` is neither an object nor an array, or an
            array repeats a ``questionId``.
        pydantic.ValidationError: If an entry is missing fields.
    """
    if isinstance(raw, dict):
        return {str(key): AssessmentResponse.model_validate(val) for key, val in raw.items()}
    if isinstance(raw, list):
        parsed = [AssessmentResponse.model_validate(val) for val in raw]
        responses: dict[str, AssessmentResponse] = {}
        for r in parsed:
            if r.question_id in responses:
                raise ValueError(f"Duplicate questionId in responses: {r.question_id}")
            responses[r.question_id] = r
        return responses
    raise ValueError(
        f"Responses must be a JSON object or array, got {type(raw).__name__}."
    )


def load_responses(path: Path) -> dict[str, AssessmentResponse]:
    """Read and validate a responses JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not valid JSON or has the wrong shape.
        pydantic.ValidationError: If an entry is missing fields.
    """
    if not path.exists():
        raise FileNotFoundError(f"Responses file not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

    responses = parse_responses(raw)
    logger.info("Loaded %d responses from %s", len(responses), path)
    return responses

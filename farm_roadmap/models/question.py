"""
Question catalog models.

``AssessmentQuestion`` describes one survey question as presented to the
grower: its prompt, answer type and (for multiple-choice) the option list.

``CategoryInfo`` describes one assessment category section of the survey,
including the colour token and display order used by the front end.

Both models are frozen; the catalog is static configuration built once at
import time.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator

QuestionType = Literal["scale", "multiple-choice", "yes-no"]


class ScaleLabels(BaseModel):
    """Anchor labels for the two ends of a 1–5 scale question."""

    model_config = ConfigDict(frozen=True)

    min: str
    max: str


class AssessmentQuestion(BaseModel):
    """One survey question.

    Attributes:
        id: Stable question identifier, e.g. ``"fd-2"``.
        question: Prompt shown to the grower.
        category: Category slug the answer is scored under.
        type: Answer type; ``"scale"`` answers are numeric 1–5,
            ``"yes-no"`` answers are ``"Yes"`` / ``"No"``, and
            ``"multiple-choice"`` answers are one of ``options``.
        options: Allowed answers for multiple-choice questions.
        scale_labels: End-point labels for scale questions.
        description: Optional helper text.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    category: str
    type: QuestionType
    options: tuple[str, ...] = ()
    scale_labels: Optional[ScaleLabels] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def validate_type_fields(self) -> "AssessmentQuestion":
        if self.type == "multiple-choice" and not self.options:
            raise ValueError(f"Multiple-choice question '{self.id}' has no options.")
        if self.type != "multiple-choice" and self.options:
            raise ValueError(f"Only multiple-choice questions take options ('{self.id}').")
        return self


class CategoryInfo(BaseModel):
    """Survey section metadata for one assessment category."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    color: str
    display_order: int

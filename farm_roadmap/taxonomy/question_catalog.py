"""
Static farm roadmap question catalog.

Six categories × three questions each.  Every category follows the same
shape: one 1–5 scale question, one multiple-choice question and one
yes/no question, so each category mean blends a self-rating, a practice
choice and a binary capability check.

Lookup helpers
--------------
get_all_questions()          -> every question in category display order
get_questions_by_category()  -> questions for one category (empty if unknown)
get_total_questions()        -> catalog size
get_category()               -> CategoryInfo or None
completion_pct()             -> share of catalog questions answered (0–100)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from farm_roadmap.models.question import AssessmentQuestion, CategoryInfo, ScaleLabels
from farm_roadmap.taxonomy.category_taxonomy import AssessmentCategory

CATEGORIES: tuple[CategoryInfo, ...] = (
    CategoryInfo(
        id=AssessmentCategory.FARM_DESIGN,
        name="Farm Design",
        description="Physical infrastructure and layout optimization",
        color="bg-green-500",
        display_order=1,
    ),
    CategoryInfo(
        id=AssessmentCategory.TECHNOLOGY,
        name="Technology",
        description="Automation and digital tools implementation",
        color="bg-blue-500",
        display_order=2,
    ),
    CategoryInfo(
        id=AssessmentCategory.PROCESSES,
        name="Processes",
        description="Daily operations and workflow efficiency",
        color="bg-purple-500",
        display_order=3,
    ),
    CategoryInfo(
        id=AssessmentCategory.ORGANIZATION,
        name="Organization",
        description="Business management and operational structure",
        color="bg-orange-500",
        display_order=4,
    ),
    CategoryInfo(
        id=AssessmentCategory.YIELDS,
        name="Yields",
        description="Production efficiency and output optimization",
        color="bg-yellow-500",
        display_order=5,
    ),
    CategoryInfo(
        id=AssessmentCategory.CROPS,
        name="Crops",
        description="Crop selection and diversification strategy",
        color="bg-red-500",
        display_order=6,
    ),
)

QUESTIONS: tuple[AssessmentQuestion, ...] = (
    # ── Farm Design ───────────────────────────────────────────────────────────
    AssessmentQuestion(
        id="fd-1",
        question="How would you rate your current greenhouse structure efficiency?",
        category=AssessmentCategory.FARM_DESIGN,
        type="scale",
        scale_labels=ScaleLabels(min="Needs major improvements", max="Highly efficient"),
        description="Consider airflow, lighting access, and space utilization",
    ),
    AssessmentQuestion(
        id="fd-2",
        question="What type of growing system do you primarily use?",
        category=AssessmentCategory.FARM_DESIGN,
        type="multiple-choice",
        options=("Soil-based", "Hydroponic", "Aquaponic", "Aeroponic", "Mixed systems"),
    ),
    AssessmentQuestion(
        id="fd-3",
        question="Do you have adequate space for expansion?",
        category=AssessmentCategory.FARM_DESIGN,
        type="yes-no",
    ),
    # ── Technology ────────────────────────────────────────────────────────────
    AssessmentQuestion(
        id="tech-1",
        question="How automated is your climate control system?",
        category=AssessmentCategory.TECHNOLOGY,
        type="scale",
        scale_labels=ScaleLabels(min="Completely manual", max="Fully automated"),
    ),
    AssessmentQuestion(
        id="tech-2",
        question="Which monitoring systems do you currently use?",
        category=AssessmentCategory.TECHNOLOGY,
        type="multiple-choice",
        options=(
            "Temperature sensors", "Humidity monitors", "pH meters",
            "EC/TDS meters", "Cameras", "None",
        ),
    ),
    AssessmentQuestion(
        id="tech-3",
        question="Do you use any farm management software?",
        category=AssessmentCategory.TECHNOLOGY,
        type="yes-no",
    ),
    # ── Processes ─────────────────────────────────────────────────────────────
    AssessmentQuestion(
        id="proc-1",
        question="How standardized are your growing procedures?",
        category=AssessmentCategory.PROCESSES,
        type="scale",
        scale_labels=ScaleLabels(min="No written procedures", max="Fully documented SOPs"),
    ),
    AssessmentQuestion(
        id="proc-2",
        question="What is your approach to pest management?",
        category=AssessmentCategory.PROCESSES,
        type="multiple-choice",
        options=(
            "Integrated Pest Management (IPM)", "Biological controls",
            "Chemical treatments only", "Preventive measures only",
            "No formal approach",
        ),
    ),
    AssessmentQuestion(
        id="proc-3",
        question="Do you track and analyze production data regularly?",
        category=AssessmentCategory.PROCESSES,
        type="yes-no",
    ),
    # ── Organization ──────────────────────────────────────────────────────────
    AssessmentQuestion(
        id="org-1",
        question="How would you rate your current record-keeping system?",
        category=AssessmentCategory.ORGANIZATION,
        type="scale",
        scale_labels=ScaleLabels(min="Paper-based or none", max="Digital and comprehensive"),
    ),
    AssessmentQuestion(
        id="org-2",
        question="What is your primary business model?",
        category=AssessmentCategory.ORGANIZATION,
        type="multiple-choice",
        options=(
            "Direct-to-consumer", "Wholesale", "Farmers markets", "CSA",
            "Mixed sales channels",
        ),
    ),
    AssessmentQuestion(
        id="org-3",
        question="Do you have a formal business plan?",
        category=AssessmentCategory.ORGANIZATION,
        type="yes-no",
    ),
    # ── Yields ────────────────────────────────────────────────────────────────
    AssessmentQuestion(
        id="yield-1",
        question="How consistent are your crop yields?",
        category=AssessmentCategory.YIELDS,
        type="scale",
        scale_labels=ScaleLabels(min="Highly variable", max="Very consistent"),
    ),
    AssessmentQuestion(
        id="yield-2",
        question="Which factors most limit your production?",
        category=AssessmentCategory.YIELDS,
        type="multiple-choice",
        options=(
            "Space constraints", "Climate control", "Labor availability",
            "Market demand", "Capital investment",
        ),
    ),
    AssessmentQuestion(
        id="yield-3",
        question="Do you benchmark your yields against industry standards?",
        category=AssessmentCategory.YIELDS,
        type="yes-no",
    ),
    # ── Crops ─────────────────────────────────────────────────────────────────
    AssessmentQuestion(
        id="crop-1",
        question="How diverse is your crop portfolio?",
        category=AssessmentCategory.CROPS,
        type="scale",
        scale_labels=ScaleLabels(min="Single crop focus", max="Highly diversified"),
    ),
    AssessmentQuestion(
        id="crop-2",
        question="What drives your crop selection decisions?",
        category=AssessmentCategory.CROPS,
        type="multiple-choice",
        options=(
            "Market demand", "Personal preference", "Climate suitability",
            "Profit margins", "Customer requests",
        ),
    ),
    AssessmentQuestion(
        id="crop-3",
        question="Do you rotate crops seasonally?",
        category=AssessmentCategory.CROPS,
        type="yes-no",
    ),
)

_QUESTIONS_BY_CATEGORY: Mapping[str, tuple[AssessmentQuestion, ...]] = MappingProxyType({
    cat.id: tuple(q for q in QUESTIONS if q.category == cat.id)
    for cat in CATEGORIES
})

_CATEGORIES_BY_ID: Mapping[str, CategoryInfo] = MappingProxyType(
    {cat.id: cat for cat in CATEGORIES}
)

QUESTION_IDS: frozenset[str] = frozenset(q.id for q in QUESTIONS)


def get_all_questions() -> tuple[AssessmentQuestion, ...]:
    """Return every question, grouped by category in display order."""
    ordered = sorted(CATEGORIES, key=lambda c: c.display_order)
    return tuple(q for cat in ordered for q in _QUESTIONS_BY_CATEGORY[cat.id])


def get_questions_by_category(category_id: str) -> tuple[AssessmentQuestion, ...]:
    """Return the questions of one category, or ``()`` for an unknown id."""
    return _QUESTIONS_BY_CATEGORY.get(category_id, ())


def get_total_questions() -> int:
    return len(QUESTIONS)


def get_category(category_id: str) -> CategoryInfo | None:
    return _CATEGORIES_BY_ID.get(category_id)


def completion_pct(answered_question_ids: Iterable[str]) -> float:
    """Percentage of catalog questions covered by ``answered_question_ids``.

    Unknown ids and duplicates are ignored.

    Returns:
        Float in [0.0, 100.0].
    """
    answered = QUESTION_IDS.intersection(answered_question_ids)
    return len(answered) / get_total_questions() * 100.0

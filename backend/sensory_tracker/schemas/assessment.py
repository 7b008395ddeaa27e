"""Assessment, questionnaire response and score schemas."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, field_validator

from sensory_tracker.schemas.common import CamelModel, ParseResult, UtcDatetime, parse_as

AssessmentStatus = Literal["draft", "completed"]
Answer = Literal["yes", "no"]
Frequency = Literal["rarely", "sometimes", "often"]


# ── Questionnaire responses ──────────────────────────────────────────────────

class AssessmentQuestion(CamelModel):
    id: str  # e.g. "auditory_seeking_1"; "seeking"/"avoiding" marks the direction
    answer: Answer
    frequency: Optional[Frequency] = None
    comments: Optional[str] = None


class AssessmentSection(CamelModel):
    section_id: str
    questions: list[AssessmentQuestion]


class AssessmentResponses(CamelModel):
    sections: list[AssessmentSection]


# ── Scores ───────────────────────────────────────────────────────────────────

# Integers stay integers; fractional scores are accepted too
Score = Union[Annotated[int, Field(ge=0)], Annotated[float, Field(ge=0.0)]]
Percentage = Annotated[float, Field(ge=0.0, le=100.0)]


class AssessmentScores(CamelModel):
    # Individual domain scores
    auditory_seeking_score: Score
    auditory_avoiding_score: Score
    visual_seeking_score: Score
    visual_avoiding_score: Score
    tactile_seeking_score: Score
    tactile_avoiding_score: Score
    vestibular_seeking_score: Score
    vestibular_avoiding_score: Score
    proprioception_seeking_score: Score
    proprioception_avoiding_score: Score
    oral_seeking_score: Score
    oral_avoiding_score: Score

    # Domain totals (seeking + avoiding)
    auditory_total: Score
    visual_total: Score
    tactile_total: Score
    vestibular_total: Score
    proprioception_total: Score
    oral_total: Score

    # Domain percentages, used for colour coding on the frontend
    auditory_percentage: Percentage
    visual_percentage: Percentage
    tactile_percentage: Percentage
    vestibular_percentage: Percentage
    proprioception_percentage: Percentage
    oral_percentage: Percentage

    # Overall totals
    total_seeking_score: Score
    total_avoiding_score: Score
    overall_score: Score
    overall_percentage: Percentage


# ── Assessments ──────────────────────────────────────────────────────────────

class AssessmentCreate(CamelModel):
    student_id: int
    teacher_id: int
    assessment_date: UtcDatetime
    responses: AssessmentResponses
    scores: AssessmentScores
    status: Optional[AssessmentStatus] = None  # storage defaults to "draft"
    additional_notes: Optional[str] = None


class AssessmentUpdate(CamelModel):
    """Partial update. Only the fields present in the payload are applied."""

    student_id: Optional[int] = None
    teacher_id: Optional[int] = None
    assessment_date: Optional[UtcDatetime] = None
    responses: Optional[AssessmentResponses] = None
    scores: Optional[AssessmentScores] = None
    status: Optional[AssessmentStatus] = None
    additional_notes: Optional[str] = None

    @field_validator(
        "student_id", "teacher_id", "assessment_date", "responses", "scores", "status",
        mode="before",
    )
    @classmethod
    def _reject_null(cls, value):
        # Defaults are not validated, so this only fires for an explicit null.
        if value is None:
            raise ValueError("Field may not be null")
        return value

    def changes(self) -> dict:
        """Fields explicitly set in the payload, keyed by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class AssessmentRead(CamelModel):
    id: int
    student_id: int
    teacher_id: int
    assessment_date: UtcDatetime
    responses: AssessmentResponses
    scores: AssessmentScores
    status: AssessmentStatus
    additional_notes: Optional[str] = None
    created_at: UtcDatetime
    completed_at: Optional[UtcDatetime] = None


def parse_assessment_create(data: Any) -> ParseResult[AssessmentCreate]:
    return parse_as(AssessmentCreate, data)


def parse_assessment_update(data: Any) -> ParseResult[AssessmentUpdate]:
    return parse_as(AssessmentUpdate, data)


def parse_assessment_responses(data: Any) -> ParseResult[AssessmentResponses]:
    return parse_as(AssessmentResponses, data)

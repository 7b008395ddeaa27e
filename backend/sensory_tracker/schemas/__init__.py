"""Pydantic request/response schemas and their parse functions."""

from sensory_tracker.schemas.common import CamelModel, ParseResult, describe_error, parse_as
from sensory_tracker.schemas.user import UserCreate, UserRead, parse_user_create
from sensory_tracker.schemas.student import StudentCreate, StudentRead, parse_student_create
from sensory_tracker.schemas.assessment import (
    AssessmentCreate,
    AssessmentQuestion,
    AssessmentRead,
    AssessmentResponses,
    AssessmentScores,
    AssessmentSection,
    AssessmentUpdate,
    parse_assessment_create,
    parse_assessment_responses,
    parse_assessment_update,
)

__all__ = [
    "CamelModel",
    "ParseResult",
    "describe_error",
    "parse_as",
    "UserCreate",
    "UserRead",
    "parse_user_create",
    "StudentCreate",
    "StudentRead",
    "parse_student_create",
    "AssessmentCreate",
    "AssessmentQuestion",
    "AssessmentRead",
    "AssessmentResponses",
    "AssessmentScores",
    "AssessmentSection",
    "AssessmentUpdate",
    "parse_assessment_create",
    "parse_assessment_responses",
    "parse_assessment_update",
]

"""Assessments router: CRUD, per-teacher listing, and score calculation."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from sensory_tracker.dependencies import get_repository
from sensory_tracker.errors import NotFoundError
from sensory_tracker.repositories import Repository
from sensory_tracker.schemas import (
    AssessmentRead,
    AssessmentScores,
    parse_assessment_create,
    parse_assessment_update,
)
from sensory_tracker.services import scoring

router = APIRouter(prefix="/api/assessments", tags=["assessments"])


@router.post("", response_model=AssessmentRead)
def create_assessment(
    payload: Any = Body(None),
    repo: Repository = Depends(get_repository),
):
    """Record an assessment. Status defaults to draft."""
    data = parse_assessment_create(payload).unwrap()
    return repo.create_assessment(data)


@router.post("/calculate-score", response_model=AssessmentScores)
def calculate_score(payload: Any = Body(None)):
    """Score questionnaire responses without storing anything."""
    return scoring.score_payload(payload)


@router.get("/teacher/{teacher_id}", response_model=list[AssessmentRead])
def list_teacher_assessments(
    teacher_id: int,
    repo: Repository = Depends(get_repository),
):
    return repo.get_assessments_by_teacher(teacher_id)


@router.get("/{assessment_id}", response_model=AssessmentRead)
def get_assessment(
    assessment_id: int,
    repo: Repository = Depends(get_repository),
):
    assessment = repo.get_assessment(assessment_id)
    if not assessment:
        raise HTTPException(status_code=404, detail="Assessment not found")
    return assessment


@router.put("/{assessment_id}", response_model=AssessmentRead)
def update_assessment(
    assessment_id: int,
    payload: Any = Body(None),
    repo: Repository = Depends(get_repository),
):
    """Apply a partial update.

    A missing assessment is reported as 400, on the same path as invalid input.
    """
    data = parse_assessment_update(payload).unwrap()
    try:
        return repo.update_assessment(assessment_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=400, detail=e.message)

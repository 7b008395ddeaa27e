"""Students router: create and fetch students."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from sensory_tracker.dependencies import get_repository
from sensory_tracker.repositories import Repository
from sensory_tracker.schemas import StudentRead, parse_student_create

router = APIRouter(prefix="/api/students", tags=["students"])


@router.post("", response_model=StudentRead)
def create_student(
    payload: Any = Body(None),
    repo: Repository = Depends(get_repository),
):
    data = parse_student_create(payload).unwrap()
    return repo.create_student(data)


@router.get("/{student_id}", response_model=StudentRead)
def get_student(
    student_id: int,
    repo: Repository = Depends(get_repository),
):
    student = repo.get_student(student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student

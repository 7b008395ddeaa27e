"""Users router: register teachers and look them up by identity."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from sensory_tracker.dependencies import get_repository
from sensory_tracker.repositories import Repository
from sensory_tracker.schemas import UserRead, parse_user_create

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserRead)
def create_user(
    payload: Any = Body(None),
    repo: Repository = Depends(get_repository),
):
    """Register a teacher. The firebase UID is stored as an opaque identity."""
    data = parse_user_create(payload).unwrap()
    return repo.create_user(data)


@router.get("/firebase/{firebase_uid}", response_model=UserRead)
def get_user_by_firebase_uid(
    firebase_uid: str,
    repo: Repository = Depends(get_repository),
):
    user = repo.get_user_by_firebase_uid(firebase_uid)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    repo: Repository = Depends(get_repository),
):
    user = repo.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

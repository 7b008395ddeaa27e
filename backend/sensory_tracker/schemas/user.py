"""User (teacher) schemas."""

from typing import Any

from sensory_tracker.schemas.common import CamelModel, ParseResult, UtcDatetime, parse_as


class UserCreate(CamelModel):
    email: str
    firebase_uid: str
    name: str


class UserRead(CamelModel):
    id: int
    email: str
    firebase_uid: str
    name: str
    created_at: UtcDatetime


def parse_user_create(data: Any) -> ParseResult[UserCreate]:
    return parse_as(UserCreate, data)

"""Student schemas."""

from typing import Any

from pydantic import Field

from sensory_tracker.schemas.common import CamelModel, ParseResult, UtcDatetime, parse_as


class StudentCreate(CamelModel):
    name: str
    school: str
    class_name: str = Field(alias="class")  # "class" is reserved in Python


class StudentRead(CamelModel):
    id: int
    name: str
    school: str
    class_name: str = Field(alias="class")
    created_at: UtcDatetime


def parse_student_create(data: Any) -> ParseResult[StudentCreate]:
    return parse_as(StudentCreate, data)

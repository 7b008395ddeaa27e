"""Shared schema plumbing: camelCase wire names and tagged parse results."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Annotated, Any, Generic, Optional, Type, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from sensory_tracker.errors import ValidationError

T = TypeVar("T", bound=BaseModel)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Base model: snake_case attributes, camelCase JSON keys, either accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a parse function: either ``value`` or ``error`` is set."""

    value: Optional[T] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def describe_error(error: dict) -> str:
    """Render one pydantic error as ``dotted.path: reason``."""
    path = ".".join(str(part) for part in error["loc"])
    return f"{path}: {error['msg']}" if path else error["msg"]


def parse_as(model: Type[T], data: Any) -> ParseResult[T]:
    """Validate an untyped value (usually a decoded JSON body) against ``model``.

    Every violation is listed in the error message as ``path: reason``,
    joined by ``"; "``.
    """
    if not isinstance(data, dict):
        message = f"Expected object, received {_json_type(data)}"
        return ParseResult(error=ValidationError(message))
    try:
        return ParseResult(value=model.model_validate(data))
    except PydanticValidationError as exc:
        violations = [describe_error(err) for err in exc.errors()]
        return ParseResult(error=ValidationError("; ".join(violations), violations))

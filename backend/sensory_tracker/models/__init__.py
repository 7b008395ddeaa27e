"""SQLAlchemy ORM models."""

from sensory_tracker.models.user import User
from sensory_tracker.models.student import Student
from sensory_tracker.models.assessment import Assessment

__all__ = [
    "User",
    "Student",
    "Assessment",
]

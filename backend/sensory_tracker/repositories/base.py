"""Storage interface shared by every backing store.

Identifiers are integers starting at 1, strictly increasing and never reused,
with one sequence per entity kind. Every method returns a fresh value that
callers may keep or mutate without touching the stored copy.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from sensory_tracker.schemas import (
    AssessmentCreate,
    AssessmentRead,
    AssessmentUpdate,
    StudentCreate,
    StudentRead,
    UserCreate,
    UserRead,
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Repository(ABC):
    """CRUD operations over users, students and assessments."""

    # ==================== USERS ====================

    @abstractmethod
    def create_user(self, data: UserCreate) -> UserRead:
        """Store a new user, assigning its id and ``created_at``."""

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRead]:
        """Return the user with this id, or None."""

    @abstractmethod
    def get_user_by_firebase_uid(self, firebase_uid: str) -> Optional[UserRead]:
        """Return the first user whose firebase UID matches, or None.

        Uniqueness of the UID is not checked here.
        """

    # ==================== STUDENTS ====================

    @abstractmethod
    def create_student(self, data: StudentCreate) -> StudentRead:
        """Store a new student, assigning its id and ``created_at``."""

    @abstractmethod
    def get_student(self, student_id: int) -> Optional[StudentRead]:
        """Return the student with this id, or None."""

    # ==================== ASSESSMENTS ====================

    @abstractmethod
    def create_assessment(self, data: AssessmentCreate) -> AssessmentRead:
        """Store a new assessment.

        ``status`` defaults to ``"draft"``. ``completed_at`` is set to now only
        when the stored status is ``"completed"``.
        """

    @abstractmethod
    def get_assessment(self, assessment_id: int) -> Optional[AssessmentRead]:
        """Return the assessment with this id, or None."""

    @abstractmethod
    def get_assessments_by_teacher(self, teacher_id: int) -> list[AssessmentRead]:
        """Return every assessment recorded by this teacher, possibly none."""

    @abstractmethod
    def update_assessment(self, assessment_id: int, data: AssessmentUpdate) -> AssessmentRead:
        """Merge the fields present in ``data`` over the stored assessment.

        ``completed_at`` is stamped with the current time whenever the merged
        status is ``"completed"``; otherwise the existing value is kept, even
        if the status moved away from ``"completed"``.

        Raises:
            NotFoundError: If no assessment has this id.
        """

"""In-memory repository. Data lives as long as the instance does."""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from sensory_tracker.errors import NotFoundError
from sensory_tracker.repositories.base import Repository, utcnow
from sensory_tracker.schemas import (
    AssessmentCreate,
    AssessmentRead,
    AssessmentUpdate,
    StudentCreate,
    StudentRead,
    UserCreate,
    UserRead,
)

logger = logging.getLogger(__name__)


class MemoryRepository(Repository):
    """Dict-backed store with one id counter per entity kind.

    All operations run under a single lock, so concurrent request threads
    never interleave a read-modify-write on a counter or a record.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock
        self._lock = threading.RLock()
        self._users: dict[int, UserRead] = {}
        self._students: dict[int, StudentRead] = {}
        self._assessments: dict[int, AssessmentRead] = {}
        self._next_user_id = 1
        self._next_student_id = 1
        self._next_assessment_id = 1

    # ==================== USERS ====================

    def create_user(self, data: UserCreate) -> UserRead:
        with self._lock:
            user_id = self._next_user_id
            self._next_user_id += 1
            user = UserRead(id=user_id, created_at=self._clock(), **data.model_dump())
            self._users[user_id] = user
        logger.debug("Created user %s", user_id)
        return user.model_copy(deep=True)

    def get_user(self, user_id: int) -> Optional[UserRead]:
        with self._lock:
            user = self._users.get(user_id)
        return user.model_copy(deep=True) if user else None

    def get_user_by_firebase_uid(self, firebase_uid: str) -> Optional[UserRead]:
        with self._lock:
            user = next(
                (u for u in self._users.values() if u.firebase_uid == firebase_uid),
                None,
            )
        return user.model_copy(deep=True) if user else None

    # ==================== STUDENTS ====================

    def create_student(self, data: StudentCreate) -> StudentRead:
        with self._lock:
            student_id = self._next_student_id
            self._next_student_id += 1
            student = StudentRead(id=student_id, created_at=self._clock(), **data.model_dump())
            self._students[student_id] = student
        logger.debug("Created student %s", student_id)
        return student.model_copy(deep=True)

    def get_student(self, student_id: int) -> Optional[StudentRead]:
        with self._lock:
            student = self._students.get(student_id)
        return student.model_copy(deep=True) if student else None

    # ==================== ASSESSMENTS ====================

    def create_assessment(self, data: AssessmentCreate) -> AssessmentRead:
        with self._lock:
            assessment_id = self._next_assessment_id
            self._next_assessment_id += 1
            now = self._clock()
            fields = data.model_dump()
            fields["status"] = fields["status"] or "draft"
            assessment = AssessmentRead(
                id=assessment_id,
                created_at=now,
                completed_at=now if fields["status"] == "completed" else None,
                **fields,
            )
            self._assessments[assessment_id] = assessment
        logger.debug("Created assessment %s (status=%s)", assessment_id, assessment.status)
        return assessment.model_copy(deep=True)

    def get_assessment(self, assessment_id: int) -> Optional[AssessmentRead]:
        with self._lock:
            assessment = self._assessments.get(assessment_id)
        return assessment.model_copy(deep=True) if assessment else None

    def get_assessments_by_teacher(self, teacher_id: int) -> list[AssessmentRead]:
        with self._lock:
            matches = [a for a in self._assessments.values() if a.teacher_id == teacher_id]
        return [a.model_copy(deep=True) for a in matches]

    def update_assessment(self, assessment_id: int, data: AssessmentUpdate) -> AssessmentRead:
        with self._lock:
            existing = self._assessments.get(assessment_id)
            if existing is None:
                raise NotFoundError("Assessment not found")

            merged = existing.model_dump()
            merged.update(data.model_dump(exclude_unset=True))
            if merged["status"] == "completed":
                merged["completed_at"] = self._clock()

            updated = AssessmentRead.model_validate(merged)
            self._assessments[assessment_id] = updated
        logger.debug("Updated assessment %s (status=%s)", assessment_id, updated.status)
        return updated.model_copy(deep=True)

"""Relational repository backed by SQLAlchemy.

Each operation runs in its own transaction: it either commits as a whole or
rolls back, so a failed update never leaves a record half merged.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator, Optional

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from sensory_tracker.database import create_tables, make_engine, make_session_factory
from sensory_tracker.errors import NotFoundError, UnexpectedError, ValidationError
from sensory_tracker.models import Assessment, Student, User
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


def _column_value(value):
    """Nested schemas are stored in JSON columns with their camelCase wire keys."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return value


class SqlRepository(Repository):
    def __init__(self, session_factory: sessionmaker, clock: Callable[[], datetime] = utcnow):
        self._session_factory = session_factory
        self._clock = clock

    @classmethod
    def from_url(cls, database_url: str, **kwargs) -> "SqlRepository":
        """Connect to ``database_url`` and create any missing tables."""
        engine = make_engine(database_url)
        create_tables(engine)
        return cls(make_session_factory(engine), **kwargs)

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ValidationError(f"Constraint violated: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Database error: %s", exc)
            raise UnexpectedError(f"Database error: {exc}") from exc
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # ==================== USERS ====================

    def create_user(self, data: UserCreate) -> UserRead:
        with self._transaction() as db:
            user = User(created_at=self._clock(), **data.model_dump())
            db.add(user)
            db.flush()
            result = UserRead.model_validate(user)
        logger.debug("Created user %s", result.id)
        return result

    def get_user(self, user_id: int) -> Optional[UserRead]:
        with self._transaction() as db:
            user = db.get(User, user_id)
            return UserRead.model_validate(user) if user else None

    def get_user_by_firebase_uid(self, firebase_uid: str) -> Optional[UserRead]:
        with self._transaction() as db:
            user = (
                db.query(User)
                .filter(User.firebase_uid == firebase_uid)
                .order_by(User.id)
                .first()
            )
            return UserRead.model_validate(user) if user else None

    # ==================== STUDENTS ====================

    def create_student(self, data: StudentCreate) -> StudentRead:
        with self._transaction() as db:
            student = Student(created_at=self._clock(), **data.model_dump())
            db.add(student)
            db.flush()
            result = StudentRead.model_validate(student)
        logger.debug("Created student %s", result.id)
        return result

    def get_student(self, student_id: int) -> Optional[StudentRead]:
        with self._transaction() as db:
            student = db.get(Student, student_id)
            return StudentRead.model_validate(student) if student else None

    # ==================== ASSESSMENTS ====================

    def create_assessment(self, data: AssessmentCreate) -> AssessmentRead:
        now = self._clock()
        status = data.status or "draft"
        with self._transaction() as db:
            assessment = Assessment(
                student_id=data.student_id,
                teacher_id=data.teacher_id,
                assessment_date=data.assessment_date,
                responses=_column_value(data.responses),
                scores=_column_value(data.scores),
                status=status,
                additional_notes=data.additional_notes,
                created_at=now,
                completed_at=now if status == "completed" else None,
            )
            db.add(assessment)
            db.flush()
            result = AssessmentRead.model_validate(assessment)
        logger.debug("Created assessment %s (status=%s)", result.id, result.status)
        return result

    def get_assessment(self, assessment_id: int) -> Optional[AssessmentRead]:
        with self._transaction() as db:
            assessment = db.get(Assessment, assessment_id)
            return AssessmentRead.model_validate(assessment) if assessment else None

    def get_assessments_by_teacher(self, teacher_id: int) -> list[AssessmentRead]:
        with self._transaction() as db:
            rows = db.query(Assessment).filter(Assessment.teacher_id == teacher_id).all()
            return [AssessmentRead.model_validate(a) for a in rows]

    def update_assessment(self, assessment_id: int, data: AssessmentUpdate) -> AssessmentRead:
        with self._transaction() as db:
            assessment = db.get(Assessment, assessment_id, with_for_update=True)
            if assessment is None:
                raise NotFoundError("Assessment not found")

            for field, value in data.changes().items():
                setattr(assessment, field, _column_value(value))
            if assessment.status == "completed":
                assessment.completed_at = self._clock()

            db.flush()
            result = AssessmentRead.model_validate(assessment)
        logger.debug("Updated assessment %s (status=%s)", assessment_id, result.status)
        return result

"""Assessment model."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from sensory_tracker.database import Base


class Assessment(Base):
    __tablename__ = "assessments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    teacher_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    assessment_date = Column(DateTime(timezone=True), nullable=False)
    responses = Column(JSON, nullable=False)
    scores = Column(JSON, nullable=False)
    status = Column(String(20), nullable=False, default="draft")  # draft | completed
    additional_notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    student = relationship("Student", back_populates="assessments")
    teacher = relationship("User", back_populates="assessments")

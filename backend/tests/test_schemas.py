"""Tests for the typed parse functions (no storage, no HTTP)."""

import os
import sys
from datetime import datetime, timezone

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sensory_tracker.errors import ValidationError
from sensory_tracker.schemas import (
    AssessmentCreate,
    parse_assessment_create,
    parse_assessment_responses,
    parse_assessment_update,
    parse_student_create,
    parse_user_create,
)

from conftest import assessment_payload, zero_scores


class TestUserParsing:
    """Parsing the user insert shape."""

    def test_camel_case_payload(self):
        result = parse_user_create({"email": "a@b.c", "firebaseUid": "uid-1", "name": "Ann"})
        assert result.ok
        assert result.value.firebase_uid == "uid-1"

    def test_snake_case_payload_accepted(self):
        result = parse_user_create({"email": "a@b.c", "firebase_uid": "uid-1", "name": "Ann"})
        assert result.ok

    def test_every_missing_field_is_listed(self):
        result = parse_user_create({"name": "Ann"})
        assert not result.ok
        assert len(result.error.violations) == 2
        assert "email" in result.error.message
        assert "firebaseUid" in result.error.message

    def test_wrong_primitive_type(self):
        result = parse_user_create({"email": "a@b.c", "firebaseUid": "uid-1", "name": 42})
        assert not result.ok
        assert result.error.message.startswith("name:")

    def test_non_object_input(self):
        result = parse_user_create(["not", "an", "object"])
        assert not result.ok
        assert result.error.message == "Expected object, received array"

    def test_null_input(self):
        assert parse_user_create(None).error.message == "Expected object, received null"

    def test_unknown_fields_ignored(self):
        result = parse_user_create(
            {"email": "a@b.c", "firebaseUid": "uid-1", "name": "Ann", "id": 99}
        )
        assert result.ok
        assert not hasattr(result.value, "id")

    def test_unwrap_raises_validation_error(self):
        with pytest.raises(ValidationError):
            parse_user_create({}).unwrap()


class TestStudentParsing:
    """Parsing the student insert shape."""

    def test_class_alias(self):
        result = parse_student_create({"name": "Ann", "school": "Oak", "class": "3B"})
        assert result.ok
        assert result.value.class_name == "3B"

    def test_dump_uses_wire_name(self):
        student = parse_student_create({"name": "Ann", "school": "Oak", "class": "3B"}).unwrap()
        assert student.model_dump(by_alias=True) == {"name": "Ann", "school": "Oak", "class": "3B"}

    def test_missing_class(self):
        result = parse_student_create({"name": "Ann", "school": "Oak"})
        assert not result.ok
        assert result.error.message.startswith("class:")


class TestAssessmentParsing:
    """Parsing assessment inserts and partial updates."""

    def test_valid_insert(self):
        result = parse_assessment_create(assessment_payload())
        assert result.ok
        assert result.value.status == "draft"
        assert result.value.assessment_date == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_status_may_be_omitted(self):
        payload = assessment_payload()
        del payload["status"]
        result = parse_assessment_create(payload)
        assert result.ok
        assert result.value.status is None

    def test_status_outside_enum(self):
        result = parse_assessment_create(assessment_payload(status="archived"))
        assert not result.ok
        assert result.error.message.startswith("status:")

    def test_incomplete_scores_rejected(self):
        scores = zero_scores()
        del scores["oralTotal"]
        result = parse_assessment_create(assessment_payload(scores=scores))
        assert not result.ok
        assert "scores.oralTotal" in result.error.message

    def test_negative_score_rejected(self):
        scores = zero_scores()
        scores["auditorySeekingScore"] = -1
        assert not parse_assessment_create(assessment_payload(scores=scores)).ok

    def test_fractional_score_accepted(self):
        scores = zero_scores()
        scores["auditorySeekingScore"] = 1.5
        scores["auditoryAvoidingScore"] = 2
        result = parse_assessment_create(assessment_payload(scores=scores))
        assert result.ok
        assert result.value.scores.auditory_seeking_score == 1.5
        assert isinstance(result.value.scores.auditory_avoiding_score, int)

    def test_nested_violation_path(self):
        responses = {"sections": [{"sectionId": "auditoryProcessing", "questions": [{"id": "q", "answer": "maybe"}]}]}
        result = parse_assessment_create(assessment_payload(responses=responses))
        assert not result.ok
        assert "responses.sections.0.questions.0.answer" in result.error.message

    def test_empty_update_is_valid(self):
        result = parse_assessment_update({})
        assert result.ok
        assert result.value.changes() == {}

    def test_update_only_reports_present_fields(self):
        update = parse_assessment_update({"status": "completed"}).unwrap()
        assert update.changes() == {"status": "completed"}

    def test_update_rejects_null_for_required_field(self):
        result = parse_assessment_update({"status": None})
        assert not result.ok
        assert result.error.message.startswith("status:")

    def test_update_allows_clearing_notes(self):
        update = parse_assessment_update({"additionalNotes": None}).unwrap()
        assert update.changes() == {"additional_notes": None}

    def test_update_validates_present_fields(self):
        assert not parse_assessment_update({"studentId": "abc"}).ok

    def test_round_trip(self):
        """Validate, serialize to wire format, validate again: equal values."""
        responses = {
            "sections": [
                {
                    "sectionId": "auditoryProcessing",
                    "questions": [
                        {"id": "auditory_seeking_1", "answer": "yes", "frequency": "often", "comments": "loud"},
                        {"id": "auditory_avoiding_1", "answer": "no"},
                    ],
                }
            ]
        }
        first = parse_assessment_create(
            assessment_payload(responses=responses, additionalNotes="calm afternoon")
        ).unwrap()
        wire = first.model_dump(mode="json", by_alias=True)
        second = AssessmentCreate.model_validate(wire)
        assert second == first


class TestResponsesParsing:
    """Parsing questionnaire responses on their own."""

    def test_empty_sections(self):
        assert parse_assessment_responses({"sections": []}).ok

    def test_missing_sections(self):
        result = parse_assessment_responses({})
        assert not result.ok
        assert result.error.message.startswith("sections:")

    def test_frequency_outside_enum(self):
        responses = {"sections": [{"sectionId": "x", "questions": [{"id": "q", "answer": "yes", "frequency": "always"}]}]}
        assert not parse_assessment_responses(responses).ok

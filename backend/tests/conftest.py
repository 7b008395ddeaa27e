"""Shared fixtures for the test suite."""

import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sensory_tracker.repositories import MemoryRepository, SqlRepository
from sensory_tracker.services.scoring import DOMAINS


class FakeClock:
    """Deterministic clock that moves forward one second per reading."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


def zero_scores() -> dict:
    """A complete score object in wire format, every value zero."""
    scores = {}
    for domain in DOMAINS:
        scores[f"{domain}SeekingScore"] = 0
        scores[f"{domain}AvoidingScore"] = 0
        scores[f"{domain}Total"] = 0
        scores[f"{domain}Percentage"] = 0.0
    scores.update(
        totalSeekingScore=0,
        totalAvoidingScore=0,
        overallScore=0,
        overallPercentage=0.0,
    )
    return scores


def assessment_payload(**overrides) -> dict:
    payload = {
        "studentId": 1,
        "teacherId": 1,
        "assessmentDate": "2024-01-01",
        "responses": {"sections": []},
        "scores": zero_scores(),
        "status": "draft",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(params=["memory", "sql"])
def repo(request, clock):
    """Every storage implementation, each starting empty."""
    if request.param == "memory":
        return MemoryRepository(clock=clock)
    return SqlRepository.from_url("sqlite://", clock=clock)

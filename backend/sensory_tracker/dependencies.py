"""FastAPI dependencies."""

from fastapi import Request

from sensory_tracker.repositories import Repository


def get_repository(request: Request) -> Repository:
    """The repository built once at startup and shared by every request."""
    return request.app.state.repository

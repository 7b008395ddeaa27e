"""Storage layer: one interface, in-memory and relational implementations."""

import logging

from sensory_tracker.config import Settings
from sensory_tracker.repositories.base import Repository
from sensory_tracker.repositories.memory import MemoryRepository
from sensory_tracker.repositories.sql import SqlRepository

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> Repository:
    """Pick the backing store from configuration."""
    if settings.DATABASE_URL:
        logger.info("Using relational storage")
        return SqlRepository.from_url(settings.DATABASE_URL)
    logger.info("Using in-memory storage")
    return MemoryRepository()


__all__ = [
    "Repository",
    "MemoryRepository",
    "SqlRepository",
    "build_repository",
]

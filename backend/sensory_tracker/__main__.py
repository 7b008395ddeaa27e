"""Run the API server: ``python -m sensory_tracker``."""

import logging

import uvicorn

from sensory_tracker.config import get_settings
from sensory_tracker.logging_config import configure_logging

logger = logging.getLogger("sensory_tracker")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Backend server running on port %s", settings.PORT)
    uvicorn.run(
        "sensory_tracker.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

"""Sensory Tracker: FastAPI Application Entry Point."""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from sensory_tracker import __version__
from sensory_tracker.config import Settings, get_settings
from sensory_tracker.errors import NotFoundError, UnexpectedError, ValidationError
from sensory_tracker.logging_config import configure_logging
from sensory_tracker.repositories import Repository, build_repository
from sensory_tracker.routers import assessments, students, users
from sensory_tracker.schemas import describe_error

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _preflight_headers(settings: Settings, request: Request) -> dict:
    # Credentialed requests cannot use "*", so echo the caller when no origin is configured
    origin = settings.FRONTEND_URL or request.headers.get("origin") or "*"
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
        "Vary": "Origin",
    }


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _error(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error(400, "; ".join(describe_error(err) for err in exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(UnexpectedError)
    async def unexpected_error_handler(request: Request, exc: UnexpectedError):
        logger.error("Unexpected error on %s %s: %s", request.method, request.url.path, exc.message)
        return _error(500, exc.message)


def create_app(
    repository: Optional[Repository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application around a single repository instance.

    Tests pass a fresh repository; the server builds one from configuration.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Sensory Tracker",
        description="Records students, teachers and sensory processing assessments.",
        version=__version__,
    )
    app.state.repository = repository if repository is not None else build_repository(settings)

    _register_error_handlers(app)

    # Innermost: anything the handlers above did not map becomes a 500 that
    # still passes back through CORS on its way out
    @app.middleware("http")
    async def catch_unexpected_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return _error(500, str(exc) or "Internal server error")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL] if settings.FRONTEND_URL else ["*"],
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    # Outermost: every OPTIONS request is answered 200, whatever its origin
    # or requested headers
    @app.middleware("http")
    async def short_circuit_options(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=_preflight_headers(settings, request))
        return await call_next(request)

    # Routers
    app.include_router(users.router)
    app.include_router(students.router)
    app.include_router(assessments.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from gym_api.core.config import get_settings
from gym_api.core.logging_config import setup_logging
from gym_api.core.utils import MonotonicClock, new_id
from gym_api.domain.errors import GymError
from gym_api.repositories import build_repository
from gym_api.routers import classes as classes_router
from gym_api.routers import members as members_router
from gym_api.routers import trainers as trainers_router
from gym_api.services import GymClassService, MemberService, TrainerService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (no sniffing, no framing, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _gym_error_response(request: Request, exc: GymError) -> JSONResponse:
    return JSONResponse(
        {"ok": False, "error": exc.code, "message": exc.message},
        status_code=exc.status_code,
    )


def create_app(
    repository=None,
    *,
    clock=None,
    id_factory: Optional[Callable[[], str]] = None,
) -> FastAPI:
    """Build the API around ``repository`` (defaults to the configured backend)."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    if repository is None:
        repository = build_repository(settings)
    logger.info("Using %s storage backend", repository.backend)

    clock = clock or MonotonicClock()
    id_factory = id_factory or new_id

    app = FastAPI(title="Gym Records API")
    app.state.repository = repository
    app.state.member_service = MemberService(repository, clock=clock, id_factory=id_factory)
    app.state.gym_class_service = GymClassService(repository, clock=clock, id_factory=id_factory)
    app.state.trainer_service = TrainerService(repository, clock=clock, id_factory=id_factory)

    app.add_exception_handler(GymError, _gym_error_response)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    @app.get("/health")
    def health():
        return {"ok": True, "backend": repository.backend}

    app.include_router(members_router.router)
    app.include_router(classes_router.router)
    app.include_router(trainers_router.router)
    return app

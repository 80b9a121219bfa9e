"""
profile_binding.api.app

FastAPI app factory for the management surface.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create the profile registry, processor and deployment service once per app.
"""

from __future__ import annotations

from fastapi import FastAPI

from profile_binding import __version__
from profile_binding.api.routers.deployments import router as deployments_router
from profile_binding.api.routers.health import router as health_router
from profile_binding.api.routers.profiles import router as profiles_router
from profile_binding.observability.logging import configure_logging, get_logger
from profile_binding.observability.middleware import RequestContextMiddleware
from profile_binding.processor.walker import LoggingProfileProcessor
from profile_binding.profiles.registry import InMemoryProfileRegistry, ProfileRegistry
from profile_binding.services.deployment_service import DeploymentService
from profile_binding.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, registry: ProfileRegistry | None = None) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        cache=settings.env != "test",
    )

    app = FastAPI(
        title="Logging Profile Binding",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )

    if registry is None:
        registry = InMemoryProfileRegistry.from_profiles(settings.profiles)
    processor = LoggingProfileProcessor(registry, attribute=settings.profile_attribute)

    app.state.settings = settings
    app.state.registry = registry
    app.state.deployments = DeploymentService(processor=processor)

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(profiles_router)
    app.include_router(deployments_router)

    log.info("app_created", env=settings.env, profile_attribute=settings.profile_attribute)
    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; tree processing lives in `processor`, lifecycle in
# `services`.

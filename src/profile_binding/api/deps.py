"""
profile_binding.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access patterns (settings, registry, deployment service).
"""

from __future__ import annotations

from fastapi import Request

from profile_binding.profiles.registry import ProfileRegistry
from profile_binding.services.deployment_service import DeploymentService
from profile_binding.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The settings the app was built with, not a fresh env read.
    return request.app.state.settings  # type: ignore[attr-defined]


def registry_dep(request: Request) -> ProfileRegistry:
    # Created once in `profile_binding.api.app.create_app`.
    return request.app.state.registry  # type: ignore[attr-defined]


def deployments_dep(request: Request) -> DeploymentService:
    return request.app.state.deployments  # type: ignore[attr-defined]

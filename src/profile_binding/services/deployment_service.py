"""
profile_binding.services.deployment_service

Deployment lifecycle service (in-memory).

Responsibilities:
- Run the logging profile phase when a deployment tree is registered.
- Keep deployed trees addressable by name for management reads.
- Remove trees on undeploy.
"""

from __future__ import annotations

from profile_binding.deployment.unit import DeploymentUnit
from profile_binding.observability.logging import get_logger
from profile_binding.processor.resources import (
    LoggingConfigurationResource,
    build_configuration_resources,
)
from profile_binding.processor.walker import LoggingProfileProcessor

log = get_logger(__name__)


class DeploymentExistsError(Exception):
    pass


class DeploymentNotFoundError(LookupError):
    pass


class DeploymentService:
    def __init__(self, *, processor: LoggingProfileProcessor) -> None:
        self._processor = processor
        self._deployments: dict[str, DeploymentUnit] = {}

    def deploy(self, unit: DeploymentUnit) -> list[LoggingConfigurationResource]:
        if unit.name in self._deployments:
            raise DeploymentExistsError(f"deployment {unit.name!r} already exists")

        self._processor.deploy(unit)
        self._deployments[unit.name] = unit
        resources = build_configuration_resources(unit)
        log.info("deployment_registered", deployment=unit.name, resources=len(resources))
        return resources

    def get(self, name: str) -> DeploymentUnit:
        unit = self._deployments.get(name)
        if unit is None:
            raise DeploymentNotFoundError(f"deployment {name!r} not found")
        return unit

    def names(self) -> list[str]:
        return sorted(self._deployments)

    def undeploy(self, name: str) -> None:
        if self._deployments.pop(name, None) is None:
            raise DeploymentNotFoundError(f"deployment {name!r} not found")
        log.info("deployment_removed", deployment=name)


# --- Module Notes -----------------------------------------------------------
# Requests are served on a single event loop and the service never awaits, so
# deploy/undeploy calls do not interleave.

"""
tests.conftest

Shared fixtures for processor and API tests.

Responsibilities:
- Provide a fake profile registry with a few known contexts.
- Build deployment units from compact declarations.
- Reset structlog between tests so app-level configuration does not leak.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from profile_binding.deployment.manifest import LOGGING_PROFILE, Manifest
from profile_binding.deployment.unit import DeploymentUnit, ResourceRoot
from profile_binding.processor.walker import LoggingProfileProcessor
from profile_binding.profiles.context import LogContext
from profile_binding.profiles.registry import ProfileRegistry


class FakeRegistry(ProfileRegistry):
    """
    Registry double that records every lookup.
    """

    def __init__(self, *names: str) -> None:
        self.contexts = {name: LogContext(name=name, properties={"level": "INFO"}) for name in names}
        self.lookups: list[tuple[str, str]] = []

    def exists(self, name: str) -> bool:
        self.lookups.append(("exists", name))
        return name in self.contexts

    def get(self, name: str) -> LogContext:
        self.lookups.append(("get", name))
        return self.contexts[name]


def make_unit(
    name: str,
    profile: str | None = None,
    *children: DeploymentUnit,
    root: bool = True,
) -> DeploymentUnit:
    resource = None
    if root:
        attributes = {LOGGING_PROFILE: profile} if profile is not None else {}
        resource = ResourceRoot(name=f"{name}.jar", manifest=Manifest(attributes))
    return DeploymentUnit(name=name, root=resource, children=list(children))


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry("alpha", "beta", "gamma")


@pytest.fixture
def processor(registry: FakeRegistry) -> LoggingProfileProcessor:
    return LoggingProfileProcessor(registry)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()

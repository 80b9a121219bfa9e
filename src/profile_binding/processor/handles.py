"""
profile_binding.processor.handles

Logging configuration handles consumed by the management model builder.

Responsibilities:
- Pair a context's configuration view with its `profile-<name>` label.
- Attach handles to units with first-write-wins semantics.
"""

from __future__ import annotations

from dataclasses import dataclass

from profile_binding.deployment.unit import DeploymentUnit
from profile_binding.profiles.context import ConfigurationView, LogContext

LABEL_PREFIX = "profile-"


@dataclass(frozen=True, slots=True)
class ConfigurationHandle:
    # One instance per profile resolution; shared read-only across the subtree.
    view: ConfigurationView
    label: str

    @property
    def context(self) -> LogContext:
        return self.view.context


def make_handle(context: LogContext, profile: str) -> ConfigurationHandle:
    return ConfigurationHandle(view=context.configuration_view(), label=LABEL_PREFIX + profile)


def attach_handle(unit: DeploymentUnit, handle: ConfigurationHandle) -> bool:
    # A unit that resolved its own profile keeps its own handle.
    if unit.has_configuration_handle:
        return False
    unit.configuration_handle = handle
    return True

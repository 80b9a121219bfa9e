"""
profile_binding.processor.resources

Management model builder for logging configuration handles.

Responsibilities:
- Read the configuration handle slot of every unit in a deployment tree.
- Materialize one management-visible resource per unit carrying a handle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from profile_binding.deployment.unit import DeploymentUnit


@dataclass(frozen=True, slots=True)
class LoggingConfigurationResource:
    deployment: str
    label: str
    log_context: str
    configuration: dict[str, Any]


def build_configuration_resources(unit: DeploymentUnit) -> list[LoggingConfigurationResource]:
    resources: list[LoggingConfigurationResource] = []
    for node in unit.walk():
        handle = node.configuration_handle
        if handle is None:
            continue
        resources.append(
            LoggingConfigurationResource(
                deployment=node.path,
                label=handle.label,
                log_context=handle.context.name,
                configuration=handle.view.describe(),
            )
        )
    return resources

"""
profile_binding.profiles.context

Resolved logging profile contexts.

Responsibilities:
- Define `LogContext`, the in-memory form of a resolved profile's configuration.
- Expose the read-only configuration view handed to management resources.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True, eq=False)
class LogContext:
    """
    Bound logging configuration for one profile.

    Contexts are owned by the profile registry and shared by reference with every
    deployment unit bound to them, so equality is identity.
    """

    name: str
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def configuration_view(self) -> ConfigurationView:
        return ConfigurationView(context=self)

    def as_attributes(self) -> dict[str, str]:
        return {"log_context": self.name}

    def __str__(self) -> str:
        return f"LogContext({self.name})"


@dataclass(frozen=True, slots=True)
class ConfigurationView:
    # Read-only persistence view over a context's configuration.
    context: LogContext

    def describe(self) -> dict[str, Any]:
        return {"context": self.context.name, "properties": dict(self.context.properties)}

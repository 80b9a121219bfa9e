"""
profile_binding.profiles.registry

Profile registry boundary.

Responsibilities:
- Define the lookup interface the processor depends on (`exists`/`get`).
- Provide an in-memory implementation for the API and tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from profile_binding.profiles.context import LogContext


class ProfileNotFoundError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"logging profile {self.name!r} is not registered"


class ProfileRegistry(ABC):
    """
    Read-only view of the logging profiles known to the server.

    Implementations are shared across deployments and synchronized by their owner;
    the processor only performs lookups.
    """

    @abstractmethod
    def exists(self, name: str) -> bool:
        ...

    @abstractmethod
    def get(self, name: str) -> LogContext:
        """
        Return the context for `name`; raises `ProfileNotFoundError` when absent.
        """
        ...


class InMemoryProfileRegistry(ProfileRegistry):
    """
    Static registry built from a fixed set of contexts.

    Usage:
        registry = InMemoryProfileRegistry([LogContext("audit")])
        registry = InMemoryProfileRegistry.from_profiles({"audit": {"level": "DEBUG"}})
    """

    def __init__(self, contexts: Iterable[LogContext] = ()) -> None:
        self._contexts = {c.name: c for c in contexts}

    @classmethod
    def from_profiles(cls, profiles: Mapping[str, Mapping[str, str]]) -> InMemoryProfileRegistry:
        return cls(LogContext(name=name, properties=props) for name, props in profiles.items())

    def exists(self, name: str) -> bool:
        return name in self._contexts

    def get(self, name: str) -> LogContext:
        try:
            return self._contexts[name]
        except KeyError:
            raise ProfileNotFoundError(name) from None

    def names(self) -> list[str]:
        return sorted(self._contexts)


# --- Module Notes -----------------------------------------------------------
# Profiles are created and removed by whoever owns the registry; nothing here
# mutates the set of contexts after construction.

"""
profile_binding.deployment.unit

Deployment unit tree.

Responsibilities:
- Model one deployable artifact (or sub-artifact) and its children.
- Hold the two slots later pipeline phases read: the bound log context and the
  logging configuration handle.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from profile_binding.deployment.manifest import Manifest

if TYPE_CHECKING:
    from profile_binding.processor.handles import ConfigurationHandle
    from profile_binding.profiles.context import LogContext


class DeploymentTreeError(Exception):
    pass


@dataclass(frozen=True, slots=True)
class ResourceRoot:
    # Source of the unit's packaging metadata (archive root).
    name: str
    manifest: Manifest | None = None

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class DeploymentUnit:
    """
    A node in the deployment tree.

    Children are owned by their parent; the parent is only referenced weakly.
    `log_context` and `configuration_handle` start empty and are filled at most
    once by the logging profile processor.
    """

    name: str
    root: ResourceRoot | None = None
    children: list[DeploymentUnit] = field(default_factory=list)
    log_context: LogContext | None = None
    configuration_handle: ConfigurationHandle | None = None
    _parent: weakref.ReferenceType[DeploymentUnit] | None = field(
        default=None, init=False, repr=False
    )

    def __post_init__(self) -> None:
        initial = list(self.children)
        self.children = []
        for child in initial:
            self.add_child(child)

    @property
    def parent(self) -> DeploymentUnit | None:
        return self._parent() if self._parent is not None else None

    def add_child(self, child: DeploymentUnit) -> DeploymentUnit:
        if child is self:
            raise DeploymentTreeError(f"deployment {self.name!r} cannot contain itself")
        if child.parent is not None:
            raise DeploymentTreeError(
                f"deployment {child.name!r} already belongs to {child.parent.name!r}"
            )
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    @property
    def has_log_context(self) -> bool:
        return self.log_context is not None

    @property
    def has_configuration_handle(self) -> bool:
        return self.configuration_handle is not None

    @property
    def path(self) -> str:
        names = []
        node: DeploymentUnit | None = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return "/".join(reversed(names))

    def walk(self) -> Iterator[DeploymentUnit]:
        # Parent-first, children in declaration order.
        yield self
        for child in self.children:
            yield from child.walk()

    def __str__(self) -> str:
        return self.path


# --- Module Notes -----------------------------------------------------------
# Units are created and discarded by the deployment pipeline; the processor only
# reads the tree and writes the two optional slots.

"""
profile_binding.processor.walker

Deployment tree walk that resolves declared logging profiles.

Responsibilities:
- Read each unit's declared profile and look it up in the profile registry.
- Bind the resolved context and attach its configuration handle to the unit.
- Propagate the nearest resolved ancestor's binding to units that declare nothing.

Precedence:
- Children are resolved before the parent's binding is offered to them, so a
  unit's own resolved profile always wins over an inherited one.
- A profile that is declared but not registered is reported and ends the walk for
  that branch: its descendants are not visited and inherit nothing.
"""

from __future__ import annotations

from dataclasses import dataclass

from profile_binding.deployment.manifest import LOGGING_PROFILE, declared_profile
from profile_binding.deployment.unit import DeploymentUnit
from profile_binding.observability.logging import deployment_scope, get_logger
from profile_binding.processor.binder import bind_context
from profile_binding.processor.handles import ConfigurationHandle, attach_handle, make_handle
from profile_binding.profiles.context import LogContext
from profile_binding.profiles.registry import ProfileRegistry

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class _Binding:
    # What a resolved unit hands down to its subtree.
    profile: str
    context: LogContext
    handle: ConfigurationHandle


class LoggingProfileProcessor:
    """
    Deployment phase that binds logging profile contexts onto a unit tree.

    The registry is injected so callers (and tests) decide where profiles live.
    One processor may serve any number of sequential deployments.
    """

    def __init__(self, registry: ProfileRegistry, *, attribute: str = LOGGING_PROFILE) -> None:
        self._registry = registry
        self._attribute = attribute

    def deploy(self, unit: DeploymentUnit) -> None:
        """
        Entry point for one top-level deployment.
        """

        if unit.root is None:
            log.debug("logging_profile_skipped", unit=unit.path, reason="no_resource_root")
            return
        with deployment_scope(unit.name):
            self.resolve(unit)

    def resolve(self, unit: DeploymentUnit) -> None:
        """
        Process `unit` and, transitively, its subtree.

        Never raises for profile outcomes; unresolved profiles are logged as warnings.
        """

        self._resolve(unit, inherited=None)

    def _resolve(self, unit: DeploymentUnit, *, inherited: _Binding | None) -> None:
        binding = inherited
        own_handle: ConfigurationHandle | None = None

        profile = self._declared_profile(unit)
        if profile is not None:
            if not self._registry.exists(profile):
                log.warning(
                    "logging_profile_not_found",
                    profile=profile,
                    resource=str(unit.root),
                    unit=unit.path,
                )
                return
            context = self._registry.get(profile)
            bind_context(unit, context, profile=profile)
            own_handle = make_handle(context, profile)
            binding = _Binding(profile=profile, context=context, handle=own_handle)

        for child in unit.children:
            # Only units with a resource root carry metadata worth reading.
            if child.root is not None:
                self._resolve(child, inherited=binding)
            if binding is not None:
                bind_context(child, binding.context, profile=binding.profile)
                attach_handle(child, binding.handle)

        if own_handle is not None:
            attach_handle(unit, own_handle)

    def _declared_profile(self, unit: DeploymentUnit) -> str | None:
        if unit.root is None:
            return None
        return declared_profile(unit.root, attribute=self._attribute)


# --- Module Notes -----------------------------------------------------------
# Deployment trees are processed one at a time by the surrounding pipeline; the
# processor keeps no per-walk state of its own beyond the recursion.

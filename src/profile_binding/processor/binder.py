"""
profile_binding.processor.binder

Log context binding for a single deployment unit.
"""

from __future__ import annotations

from profile_binding.deployment.unit import DeploymentUnit
from profile_binding.observability.logging import get_logger
from profile_binding.profiles.context import LogContext

log = get_logger(__name__)


def bind_context(unit: DeploymentUnit, context: LogContext, *, profile: str) -> bool:
    """
    Bind `context` to `unit` unless the unit is already bound.

    A bound unit is never rebound, whether its context came from its own profile or
    from an ancestor. Returns True when a binding was recorded.
    """

    if unit.has_log_context:
        return False
    unit.log_context = context
    log.debug(
        "log_context_registered",
        **context.as_attributes(),
        resource=str(unit.root) if unit.root is not None else None,
        unit=unit.path,
        profile=profile,
    )
    return True

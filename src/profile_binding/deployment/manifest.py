"""
profile_binding.deployment.manifest

Manifest metadata attached to a deployment's resource root.

Responsibilities:
- Hold main manifest attributes with case-insensitive names.
- Read the declared logging profile name for a resource root.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from profile_binding.observability.logging import get_logger

if TYPE_CHECKING:
    from profile_binding.deployment.unit import ResourceRoot

log = get_logger(__name__)

LOGGING_PROFILE = "Logging-Profile"


class Manifest(Mapping[str, str]):
    """
    Main attributes of a deployment manifest.

    Attribute names compare case-insensitively; the spelling as given is kept for
    iteration so the manifest can be echoed back unchanged.
    """

    def __init__(self, attributes: Mapping[str, str] | None = None) -> None:
        self._attributes: dict[str, tuple[str, str]] = {}
        for name, value in (attributes or {}).items():
            self._attributes[name.lower()] = (name, value)

    @classmethod
    def from_mapping(cls, attributes: Mapping[str, str]) -> Manifest:
        return cls(attributes)

    def __getitem__(self, name: str) -> str:
        return self._attributes[name.lower()][1]

    def __iter__(self) -> Iterator[str]:
        return (given for given, _ in self._attributes.values())

    def __len__(self) -> int:
        return len(self._attributes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._attributes

    def __repr__(self) -> str:
        return f"Manifest({dict(self.items())!r})"


def declared_profile(root: ResourceRoot, *, attribute: str = LOGGING_PROFILE) -> str | None:
    """
    Return the logging profile the resource root opts into, or None.

    The value is returned as written; a blank value is still a declaration and
    will not match any registered profile.
    """

    manifest = root.manifest
    if manifest is None:
        return None
    value = manifest.get(attribute)
    if value is None:
        return None
    log.debug("logging_profile_found", profile=value, resource=str(root))
    return value

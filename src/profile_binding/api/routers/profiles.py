"""
profile_binding.api.routers.profiles

Read-only view of the logging profiles available for binding.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from profile_binding.api.deps import registry_dep, settings_dep
from profile_binding.profiles.registry import InMemoryProfileRegistry, ProfileRegistry
from profile_binding.settings import Settings

router = APIRouter(prefix="/v1/profiles", tags=["profiles"])


class ProfileListResponse(BaseModel):
    # Manifest attribute deployments use to opt into one of `profiles`.
    attribute: str
    profiles: list[str]


@router.get("", response_model=ProfileListResponse)
async def list_profiles(
    registry: ProfileRegistry = Depends(registry_dep),
    settings: Settings = Depends(settings_dep),
) -> ProfileListResponse:
    # The lookup interface has no enumeration; only the bundled registry can list.
    if isinstance(registry, InMemoryProfileRegistry):
        names = registry.names()
    else:
        names = []
    return ProfileListResponse(attribute=settings.profile_attribute, profiles=names)

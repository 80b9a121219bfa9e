"""
profile_binding.api.routers.deployments

Management endpoints for deployment trees.

Responsibilities:
- Accept a deployment tree and run the logging profile phase over it.
- Expose per-unit bindings and the resulting logging configuration resources.
- Undeploy trees by name.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, model_validator
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from profile_binding.api.deps import deployments_dep
from profile_binding.deployment.manifest import Manifest
from profile_binding.deployment.unit import DeploymentUnit, ResourceRoot
from profile_binding.processor.resources import (
    LoggingConfigurationResource,
    build_configuration_resources,
)
from profile_binding.services.deployment_service import (
    DeploymentExistsError,
    DeploymentNotFoundError,
    DeploymentService,
)

router = APIRouter(prefix="/v1/deployments", tags=["deployments"])

# Bounds recursion in tree building and in the processor walk.
MAX_TREE_DEPTH = 32


class DeploymentUnitRequest(BaseModel):
    name: str = Field(min_length=1, max_length=256, pattern=r"^[^/]+$")
    # Null means the unit has no resource root (nothing to read metadata from).
    manifest: dict[str, str] | None = Field(default_factory=dict)
    children: list[DeploymentUnitRequest] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_depth(self) -> DeploymentUnitRequest:
        # Children are validated first, so each subtree is already within the limit.
        depth, stack = 0, [(self, 1)]
        while stack:
            node, level = stack.pop()
            depth = max(depth, level)
            stack.extend((child, level + 1) for child in node.children)
        if depth > MAX_TREE_DEPTH:
            raise ValueError(f"deployment tree deeper than {MAX_TREE_DEPTH} levels")
        return self

    def to_unit(self) -> DeploymentUnit:
        root = None
        if self.manifest is not None:
            root = ResourceRoot(name=self.name, manifest=Manifest.from_mapping(self.manifest))
        unit = DeploymentUnit(name=self.name, root=root)
        for child in self.children:
            unit.add_child(child.to_unit())
        return unit


DeploymentUnitRequest.model_rebuild()


class ConfigurationResourceResponse(BaseModel):
    deployment: str
    label: str
    log_context: str
    configuration: dict[str, Any]

    @classmethod
    def from_resource(cls, resource: LoggingConfigurationResource) -> ConfigurationResourceResponse:
        return cls(
            deployment=resource.deployment,
            label=resource.label,
            log_context=resource.log_context,
            configuration=resource.configuration,
        )


class UnitBindingResponse(BaseModel):
    deployment: str
    log_context: str | None
    configuration: str | None


@router.post(
    "",
    response_model=list[ConfigurationResourceResponse],
    status_code=HTTP_201_CREATED,
)
async def deploy(
    body: DeploymentUnitRequest,
    deployments: DeploymentService = Depends(deployments_dep),
) -> list[ConfigurationResourceResponse]:
    try:
        unit = body.to_unit()
        resources = deployments.deploy(unit)
    except DeploymentExistsError as e:
        raise HTTPException(status_code=HTTP_409_CONFLICT, detail=str(e)) from e
    return [ConfigurationResourceResponse.from_resource(r) for r in resources]


@router.get("/{name}", response_model=list[UnitBindingResponse])
async def get_bindings(
    name: str,
    deployments: DeploymentService = Depends(deployments_dep),
) -> list[UnitBindingResponse]:
    unit = _get_or_404(deployments, name)
    return [
        UnitBindingResponse(
            deployment=node.path,
            log_context=node.log_context.name if node.log_context is not None else None,
            configuration=(
                node.configuration_handle.label if node.configuration_handle is not None else None
            ),
        )
        for node in unit.walk()
    ]


@router.get("/{name}/logging-configuration", response_model=list[ConfigurationResourceResponse])
async def get_logging_configuration(
    name: str,
    deployments: DeploymentService = Depends(deployments_dep),
) -> list[ConfigurationResourceResponse]:
    unit = _get_or_404(deployments, name)
    return [ConfigurationResourceResponse.from_resource(r) for r in build_configuration_resources(unit)]


@router.delete("/{name}", status_code=HTTP_204_NO_CONTENT)
async def undeploy(
    name: str,
    deployments: DeploymentService = Depends(deployments_dep),
) -> None:
    try:
        deployments.undeploy(name)
    except DeploymentNotFoundError as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=str(e)) from e


def _get_or_404(deployments: DeploymentService, name: str) -> DeploymentUnit:
    try:
        return deployments.get(name)
    except DeploymentNotFoundError as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=str(e)) from e

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from src.commands.executor.command_executor import CommandExecutor
from src.config.dashboard import (
    add_command_from_request,
    get_command_executor,
    get_resource_catalog,
    register_resource,
)
from src.core.resources.catalog import ResourceCatalog
from src.core.resources.service_resource import ServiceResource
from src.models.requests import (
    HealthReportRequest,
    ResourceRequest,
    UrlCommandRequest,
)
from src.models.responses import (
    CommandDescriptorResponse,
    ExecuteCommandResponse,
    ResourceResponse,
)

logger = logging.getLogger(__name__)

# Initialize router
router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    responses={404: {"description": "Not found"}},
)


def _get_resource(catalog: ResourceCatalog, resource_name: str) -> ServiceResource:
    try:
        return catalog.get(resource_name)
    except KeyError:
        raise HTTPException(
            status_code=404, detail=f"Resource '{resource_name}' not found"
        )


def _to_response(resource: ServiceResource) -> ResourceResponse:
    return ResourceResponse(
        name=resource.name,
        health_status=resource.health_status,
        endpoints=resource.list_endpoints(),
        commands=[
            CommandDescriptorResponse(**info) for info in resource.describe_commands()
        ],
    )


@router.get("/resources", response_model=List[ResourceResponse])
async def list_resources(
    catalog: ResourceCatalog = Depends(get_resource_catalog),
) -> List[ResourceResponse]:
    return [_to_response(resource) for resource in catalog.list()]


@router.post("/resources", response_model=ResourceResponse, status_code=201)
async def create_resource(
    request: ResourceRequest,
    catalog: ResourceCatalog = Depends(get_resource_catalog),
) -> ResourceResponse:
    """Register a resource together with its URL commands"""
    try:
        resource = register_resource(catalog, request)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _to_response(resource)


@router.get(
    "/resources/{resource_name}/commands",
    response_model=List[CommandDescriptorResponse],
)
async def list_commands(
    resource_name: str,
    catalog: ResourceCatalog = Depends(get_resource_catalog),
) -> List[CommandDescriptorResponse]:
    """Commands of a resource with their state for the latest health report"""
    resource = _get_resource(catalog, resource_name)
    return [CommandDescriptorResponse(**info) for info in resource.describe_commands()]


@router.post(
    "/resources/{resource_name}/commands",
    response_model=List[CommandDescriptorResponse],
    status_code=201,
)
async def create_command(
    resource_name: str,
    request: UrlCommandRequest,
    catalog: ResourceCatalog = Depends(get_resource_catalog),
) -> List[CommandDescriptorResponse]:
    resource = _get_resource(catalog, resource_name)
    try:
        add_command_from_request(resource, request)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return [CommandDescriptorResponse(**info) for info in resource.describe_commands()]


@router.put("/resources/{resource_name}/health", response_model=ResourceResponse)
async def report_health(
    resource_name: str,
    request: HealthReportRequest,
    catalog: ResourceCatalog = Depends(get_resource_catalog),
) -> ResourceResponse:
    resource = _get_resource(catalog, resource_name)
    resource.report_health(request.health_status)
    return _to_response(resource)


@router.post(
    "/resources/{resource_name}/commands/{command_name}/execute",
    response_model=ExecuteCommandResponse,
)
async def execute_command(
    resource_name: str,
    command_name: str,
    catalog: ResourceCatalog = Depends(get_resource_catalog),
    executor: CommandExecutor = Depends(get_command_executor),
) -> ExecuteCommandResponse:
    """
    Run a resource command as if it was picked from the context menu.

    Command failures are part of the response body, not HTTP errors.
    """
    resource = _get_resource(catalog, resource_name)
    if resource.commands.find_command(command_name) is None:
        raise HTTPException(
            status_code=404,
            detail=f"Command '{command_name}' not found on resource '{resource_name}'",
        )

    result = await executor.execute_command(resource, command_name)
    return ExecuteCommandResponse(
        resource_name=resource_name,
        command_name=command_name,
        success=result.success,
        error_message=result.error_message,
    )

"""Routers: one CRUD router per collection plus service endpoints."""

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from catalog_service import __version__
from catalog_service.api.dependencies import get_handler, get_handlers
from catalog_service.api.resources import RESOURCES, ResourceBinding
from catalog_service.dto import ErrorResponse, HealthCheckResponse
from catalog_service.handlers import ResourceHandler


async def parse_body(request: Request, model: type[BaseModel]) -> BaseModel:
    """Validate the JSON body of ``request`` as ``model``.

    An empty body counts as ``{}``. Failures are raised as
    RequestValidationError so they render like any other bad body.
    """
    raw = await request.body()
    try:
        data = json.loads(raw) if raw.strip() else {}
    except ValueError as e:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body", 0), "msg": f"JSON decode error: {e}"}]
        ) from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [{**err, "loc": ("body", *err["loc"])} for err in e.errors()]
        raise RequestValidationError(errors) from e


def request_body_schema(model: type[BaseModel]) -> dict[str, Any]:
    """OpenAPI ``requestBody`` for routes that read the body themselves."""
    return {
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


def build_resource_router(binding: ResourceBinding) -> APIRouter:
    """Create the five CRUD routes of one collection.

    Args:
        binding: Schema and DTOs of the collection

    Returns:
        Router mounted at ``/{collection}``
    """
    label = binding.schema.label
    CreateModel = binding.create_model
    UpdateModel = binding.update_model
    ResponseModel = binding.response_model
    HandlerDep = Annotated[ResourceHandler, Depends(get_handler(binding.collection))]

    router = APIRouter(
        prefix=f"/{binding.collection}",
        tags=[binding.collection.capitalize()],
    )
    not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": f"{label} not found"}}
    bad_request = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Validation error"}}

    @router.get(
        "",
        response_model=list[ResponseModel],
        response_model_exclude_none=True,
        summary=f"List all {binding.collection}",
    )
    async def list_records(handler: HandlerDep):
        return await handler.list_records()

    @router.get(
        "/{record_id}",
        response_model=ResponseModel,
        response_model_exclude_none=True,
        responses=not_found,
        summary=f"Get a {label.lower()} by id",
    )
    async def get_record(record_id: str, handler: HandlerDep):
        return await handler.get_record(record_id)

    @router.post(
        "",
        response_model=ResponseModel,
        response_model_exclude_none=True,
        status_code=status.HTTP_201_CREATED,
        responses=bad_request,
        summary=f"Create a {label.lower()}",
    )
    async def create_record(payload: CreateModel, handler: HandlerDep):
        return await handler.create_record(payload)

    @router.patch(
        "/{record_id}",
        response_model=ResponseModel,
        response_model_exclude_none=True,
        responses={**not_found, **bad_request},
        summary=f"Update a {label.lower()}",
        openapi_extra=request_body_schema(UpdateModel),
    )
    async def update_record(record_id: str, request: Request, handler: HandlerDep):
        # Unknown ids answer 404 whatever the body holds
        await handler.get_record(record_id)
        payload = await parse_body(request, UpdateModel)
        return await handler.update_record(record_id, payload)

    @router.delete(
        "/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses=not_found,
        summary=f"Delete a {label.lower()}",
    )
    async def delete_record(record_id: str, handler: HandlerDep) -> Response:
        await handler.delete_record(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


def build_api_router() -> APIRouter:
    """Combine the routers of every collection."""
    router = APIRouter()
    for binding in RESOURCES:
        router.include_router(build_resource_router(binding))
    return router


service_router = APIRouter()


@service_router.get("/")
async def root(request: Request) -> dict[str, Any]:
    """Root endpoint with API information."""
    settings = request.app.state.settings
    return {
        "name": "Catalog Service",
        "version": __version__,
        "description": "In-memory product and user catalog",
        "endpoints": {
            binding.collection: f"{settings.api_prefix}/{binding.collection}"
            for binding in RESOURCES
        },
        "docs": settings.docs_url,
    }


@service_router.get("/health", response_model=HealthCheckResponse)
async def health(
    handlers: Annotated[dict[str, ResourceHandler], Depends(get_handlers)],
) -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(
        status="healthy",
        collections={name: handler.service.count() for name, handler in handlers.items()},
    )

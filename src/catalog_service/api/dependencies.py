"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Handlers stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from catalog_service.api.resources import RESOURCES
from catalog_service.config import Settings
from catalog_service.handlers import ResourceHandler
from catalog_service.seed_data import SAMPLES, seed
from catalog_service.services import ResourceService

logger = logging.getLogger(__name__)


def build_handlers(seed_data: bool = False) -> dict[str, ResourceHandler]:
    """Create one repository, service and handler per collection.

    Args:
        seed_data: Load the sample records into each collection

    Returns:
        Handlers keyed by collection name
    """
    handlers: dict[str, ResourceHandler] = {}
    for binding in RESOURCES:
        service = ResourceService.create(binding.schema)
        if seed_data:
            seed(service, SAMPLES.get(binding.collection, ()))
        handlers[binding.collection] = ResourceHandler(
            service=service,
            response_model=binding.response_model,
        )
    return handlers


def get_handler(collection: str) -> Callable[[Request], ResourceHandler]:
    """Build a dependency returning the handler of ``collection``.

    Args:
        collection: Collection name, e.g. ``products``

    Returns:
        A FastAPI dependency function

    Raises:
        RuntimeError: (from the dependency) if handlers are not initialized
    """

    def dependency(request: Request) -> ResourceHandler:
        handlers = getattr(request.app.state, "handlers", None)
        if handlers is None or collection not in handlers:
            raise RuntimeError(f"Handler for {collection!r} not initialized. Check lifespan setup.")
        return handlers[collection]

    dependency.__name__ = f"get_{collection}_handler"
    return dependency


def get_handlers(request: Request) -> dict[str, ResourceHandler]:
    """Dependency returning every collection handler from app.state."""
    handlers = getattr(request.app.state, "handlers", None)
    if handlers is None:
        raise RuntimeError("Handlers not initialized. Check lifespan setup.")
    return handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes every collection and stores the handlers in
    app.state.handlers; removes them on shutdown.

    Args:
        app: The FastAPI application instance (settings on app.state.settings)
    """
    settings: Settings = app.state.settings

    app.state.handlers = build_handlers(seed_data=settings.seed_data)

    for collection, handler in app.state.handlers.items():
        logger.info("✓ %s ready (%d records)", collection, handler.service.count())
    logger.info("✓ API prefix: %s, docs: %s", settings.api_prefix, settings.docs_url)

    yield

    del app.state.handlers
    logger.info("✓ Catalog service shut down")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_service import __version__
from catalog_service.api.dependencies import lifespan
from catalog_service.api.exception_handlers import register_exception_handlers
from catalog_service.api.middleware import RequestLoggingMiddleware
from catalog_service.api.routes import build_api_router, service_router
from catalog_service.config import Settings, settings as default_settings
from catalog_service.logging_setup import configure_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the catalog API.

    Collections are created fresh in the lifespan, so every app (and
    every TestClient context) starts from its own data.

    Args:
        settings: Settings to use. Defaults to the environment-loaded settings.

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Catalog Service API",
        description="In-memory CRUD service for products and users",
        version=__version__,
        lifespan=lifespan,
        docs_url=settings.docs_url,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(
        RequestLoggingMiddleware,  # type: ignore[arg-type]
        log_bodies=settings.log_request_bodies,
    )
    register_exception_handlers(app)

    app.include_router(service_router)
    app.include_router(build_api_router(), prefix=settings.api_prefix)
    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "catalog_service.api.app:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
    )


if __name__ == "__main__":
    main()

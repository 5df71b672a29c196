from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from carfinder.adapters.in_memory_car_catalog_repository import InMemoryCarCatalogRepository
from carfinder.adapters.in_memory_user_repository import InMemoryUserRepository
from carfinder.entrypoints.http.config import (
    SESSION_COOKIE,
    session_max_age_seconds,
    session_secret,
)
from carfinder.entrypoints.http.exception_handlers import register_exception_handlers
from carfinder.entrypoints.http.routes.auth import router as auth_router
from carfinder.entrypoints.http.routes.cars import router as cars_router
from carfinder.entrypoints.http.routes.health import router as health_router
from carfinder.infra.car_api.client import CarApiClient
from carfinder.infra.car_api.config import car_api_config
from carfinder.infra.car_api.response_cache import ResponseCache


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    app.state.car_api_client.close()


def init_state(app: FastAPI) -> None:
    """
    Build the per-application shared objects.

    The response cache and the upstream HTTP client are shared by every
    request. The in-memory repositories serve when no database is configured.
    """
    config = car_api_config()
    cache = ResponseCache(
        ttl_seconds=config.cache_ttl_seconds,
        max_entries=config.cache_max_entries,
    )
    app.state.response_cache = cache
    app.state.car_api_client = CarApiClient(config=config, cache=cache)
    app.state.car_catalog = InMemoryCarCatalogRepository()
    app.state.user_repository = InMemoryUserRepository()


def build_app() -> FastAPI:
    app = FastAPI(
        title="Carfinder API",
        description="""
        Car search API for browsing the catalog and managing user accounts.

        ## Features
        - Search the car catalog with text, filters, sorting and pagination
        - Get car details, brands, body types and models
        - Register, log in and manage your account

        ## Authentication
        Session cookie set by `/api/register` and `/api/login`.

        ## Catalog source
        Cars come from the upstream car provider by default. When it is
        unreachable a deterministic fallback catalog is served instead.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    init_state(app)

    app.add_middleware(
        SessionMiddleware,
        secret_key=session_secret(),
        session_cookie=SESSION_COOKIE,
        max_age=session_max_age_seconds(),
        same_site="lax",
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(cars_router, prefix="/api")
    app.include_router(auth_router, prefix="/api")

    return app


app = build_app()

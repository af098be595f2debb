"""
PromoCode Factory - FastAPI Application Entry Point

This module builds the FastAPI application with its middleware, routes,
exception handlers and in-memory repositories.

Run with:
    uvicorn promocode_factory.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from promocode_factory import __version__
from promocode_factory.api.v1 import employees, health, roles
from promocode_factory.core.config import Settings, settings
from promocode_factory.core.exceptions import EntityNotFoundError, EntityValidationError
from promocode_factory.core.logging_config import get_logger, log_with_context, setup_logging
from promocode_factory.data import fake_employees, fake_roles
from promocode_factory.middleware.logging import LoggingMiddleware
from promocode_factory.middleware.request_id import RequestIDMiddleware
from promocode_factory.models import Employee, Role
from promocode_factory.repositories.base import Repository
from promocode_factory.repositories.in_memory import InMemoryRepository


logger = get_logger(__name__)


async def validation_error_handler(request: Request, exc: EntityValidationError) -> JSONResponse:
    """Map EntityValidationError to 400."""
    log_with_context(
        logger,
        "warning",
        exc.message,
        request_id=getattr(request.state, "request_id", None),
        path=request.url.path,
        method=request.method,
        status_code=status.HTTP_400_BAD_REQUEST,
        fields=list(exc.fields),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    """Map EntityNotFoundError to 404."""
    log_with_context(
        logger,
        "warning",
        exc.message,
        request_id=getattr(request.state, "request_id", None),
        entity_id=str(exc.entity_id),
        path=request.url.path,
        method=request.method,
        status_code=status.HTTP_404_NOT_FOUND,
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message},
    )


async def body_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Map malformed request bodies to 400.

    Errors located in the body (wrong types, unparsable role ids) are
    reported like EntityValidationError. Path and query errors keep
    FastAPI's default 422 response.
    """
    body_errors = [error for error in exc.errors() if tuple(error.get("loc", ()))[:1] == ("body",)]
    if not body_errors:
        return await request_validation_exception_handler(request, exc)

    message = "Invalid request body: " + "; ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:]) or 'body'}: {error['msg']}"
        for error in body_errors
    )
    log_with_context(
        logger,
        "warning",
        message,
        request_id=getattr(request.state, "request_id", None),
        path=request.url.path,
        method=request.method,
        status_code=status.HTTP_400_BAD_REQUEST,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message},
    )


def create_app(
    app_settings: Optional[Settings] = None,
    employee_repository: Optional[Repository[Employee]] = None,
    role_repository: Optional[Repository[Role]] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the module-level settings)
        employee_repository: Employee store; an InMemoryRepository is created
            when omitted, seeded if settings.seed_data is set
        role_repository: Role store; same defaulting as employee_repository

    Returns:
        Configured FastAPI application. Repositories are available as
        app.state.employee_repository and app.state.role_repository.
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(level=app_settings.log_level, json_format=app_settings.log_json)
        logger.info(
            "Application started",
            extra={
                "employee_count": len(await app.state.employee_repository.get_all()),
                "role_count": len(await app.state.role_repository.get_all()),
            }
        )

        yield

        logger.info("Application stopped")

    app = FastAPI(
        title=app_settings.project_name,
        version=__version__,
        description="Employee management API backed by in-memory repositories",
        openapi_url=f"{app_settings.api_v1_prefix}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    if role_repository is None:
        role_repository = InMemoryRepository(
            fake_roles() if app_settings.seed_data else [],
            entity_name="Role",
        )
    if employee_repository is None:
        employee_repository = InMemoryRepository(
            fake_employees() if app_settings.seed_data else [],
            entity_name="Employee",
        )

    app.state.settings = app_settings
    app.state.employee_repository = employee_repository
    app.state.role_repository = role_repository

    app.add_exception_handler(EntityValidationError, validation_error_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, body_validation_error_handler)

    # Middleware is executed in reverse order of registration
    # (last registered = first executed)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix=app_settings.api_v1_prefix, tags=["health"])
    app.include_router(employees.router, prefix=app_settings.api_v1_prefix)
    app.include_router(roles.router, prefix=app_settings.api_v1_prefix)

    @app.get("/")
    async def root():
        """Root endpoint with basic API information."""
        return {
            "message": f"{app_settings.project_name} API",
            "version": __version__,
            "docs": "/docs",
        }

    return app


app = create_app()

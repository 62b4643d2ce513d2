# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# Builds the Employee Assessment API: middleware, exception handlers,
# the liveness route and the four mounted route groups.
#
# The database connection is made by app/server.py before the socket is
# bound; use that entry point in deployments:
#   employee-assessment-api
#   python -m app.server
#
# For local development without the startup database check:
#   uvicorn app.main:create_app --factory --reload
# =============================================================================

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth import routes as auth_routes
from app.config import Settings, get_settings
from app.cors import OriginPolicyMiddleware
from app.exceptions import ApiError, api_exception_handler
from app.middleware import (
    AccessLogMiddleware,
    BodySizeLimitMiddleware,
    ErrorTranslationMiddleware,
)
from app.routers import assessments, criteria, employees

LIVENESS_MESSAGE = "Employee Assessment API running"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once per process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create the FastAPI application for the given settings.

    Without explicit settings the cached environment settings are used.

    Middleware, outermost first:
    access log -> origin policy -> error translation -> body size limit
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Employee Assessment API",
        description="REST API for employees, assessment criteria and assessments.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "Auth", "description": "Sign-in and token verification"},
            {"name": "Employees", "description": "Employee records"},
            {"name": "Assessments", "description": "Employee assessments"},
            {"name": "Criteria", "description": "Assessment criteria"},
        ],
    )
    app.state.settings = settings

    # =========================================================================
    # Middleware
    # =========================================================================
    # add_middleware() wraps the current stack, so the last one added is the
    # outermost.

    app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.max_body_size_bytes)
    app.add_middleware(ErrorTranslationMiddleware)
    app.add_middleware(
        OriginPolicyMiddleware,
        allowed_origins=settings.cors_origins_list,
        preview_suffix=settings.CORS_PREVIEW_SUFFIX,
    )
    app.add_middleware(AccessLogMiddleware)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(ApiError, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, api_exception_handler)

    # =========================================================================
    # Routes
    # =========================================================================

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        """Liveness probe. Never touches the database."""
        return LIVENESS_MESSAGE

    app.include_router(auth_routes.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(employees.router, prefix="/api/employees", tags=["Employees"])
    app.include_router(assessments.router, prefix="/api/assessments", tags=["Assessments"])
    app.include_router(criteria.router, prefix="/api/criteria", tags=["Criteria"])

    return app

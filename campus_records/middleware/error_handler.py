"""
Error handling middleware for the application.

This module provides centralized error handling for the application,
ensuring consistent error responses across all endpoints.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from campus_records.exceptions import RecordNotFoundError, StoreError
from campus_records.utils.api_response import error_response

logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI) -> None:
    """
    Add error handlers to the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions."""
        logger.warning(f"HTTP exception: {exc.detail} (status_code={exc.status_code})")
        return JSONResponse(
            content=error_response(
                message=str(exc.detail),
                code="http_error"
            ),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors."""
        error_messages = []

        for error in exc.errors():
            loc = " -> ".join(str(loc_item) for loc_item in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        error_msg = "Validation error"
        logger.warning(f"{error_msg}: {', '.join(error_messages)}")

        return JSONResponse(
            content=error_response(
                message=error_msg,
                code="validation_error",
                details={"errors": error_messages}
            ),
            status_code=422
        )

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        """Handle lookups, updates and deletes that matched no row."""
        error_msg = str(exc) or "Record not found"
        logger.warning(f"{request.method} {request.url.path}: {error_msg}")

        return JSONResponse(
            content=error_response(
                message=error_msg,
                code="not_found"
            ),
            status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        """Handle database failures already logged by the repository."""
        return JSONResponse(
            content=error_response(
                message=str(exc) or "Database error occurred",
                code="database_error"
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Handle database errors raised outside a repository."""
        logger.error(f"Database error: {str(exc)}")

        return JSONResponse(
            content=error_response(
                message="Database error occurred",
                code="database_error"
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle all other exceptions."""
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)

        return JSONResponse(
            content=error_response(
                message="An unexpected error occurred",
                code="server_error",
                details={"type": type(exc).__name__}
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

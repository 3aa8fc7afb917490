"""Error Handlers: the single boundary that turns failures into HTTP responses.

Invariants:
    - InventoryError → its http_status (404 not-found, 500 database, 400 payload)
    - RequestValidationError → 400
    - Starlette HTTPException (unknown route, wrong method) → its own status
    - Exception (catch-all) → 500
    - Every body is {"error": "<message>"}; database messages pass through verbatim
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory.core.errors import (
    InventoryError, ErrorSeverity, PayloadValidationError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_inventory_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_inventory_error_handler(app: FastAPI) -> None:

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        """Handle domain and database errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "entity": exc.context.entity,
                "entity_id": exc.context.entity_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic body validation errors."""
        error = PayloadValidationError(_summarize_validation_errors(exc))
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or exc.__class__.__name__},
        )


def _summarize_validation_errors(exc: RequestValidationError) -> str:
    """Flatten Pydantic errors into one line: 'body.email: Field required; ...'."""
    parts = [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
    return "Invalid request data: " + "; ".join(parts)

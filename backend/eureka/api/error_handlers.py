"""Error Handlers — turn every exception into the {"error": {...}} envelope.

Invariants:
    - EurekaError → its own http_status and to_response() body
    - RequestValidationError (bad JSON body, bad query enum) → 400 VALIDATION_ERROR
      with one details entry per failing field
    - Anything else → 500 INTERNAL_ERROR, message fixed, traceback only in logs
    - 401 responses carry WWW-Authenticate: Bearer

Design Decisions:
    - Handlers are module-level coroutines registered with add_exception_handler:
      each can be unit-called without building an app
    - 4xx logged at WARNING (client mistakes), 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from eureka.core.errors import ErrorCategory, ErrorSeverity, EurekaError

logger = logging.getLogger(__name__)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


async def handle_eureka_error(request: Request, exc: EurekaError) -> JSONResponse:
    logger.log(
        logging.ERROR if exc.http_status >= 500 else logging.WARNING,
        f"{type(exc).__name__}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_response(),
        headers=BEARER_CHALLENGE if exc.http_status == 401 else None,
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"Rejected request data: {[d['field'] for d in details]}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.WARNING.value,
                "details": details,
            },
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EurekaError, handle_eureka_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

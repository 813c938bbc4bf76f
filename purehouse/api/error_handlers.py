"""Error Handlers — map failures on the posts API to the JSON error envelope.

Invariants:
    - PurehouseError → its own http_status and to_response() body
    - RequestValidationError → 400 VALIDATION_ERROR; `field` uses the wire
      name as the client sent it (coverImage.url, not body.coverImage.url)
    - A body that is not valid JSON is reported as such, not as a field error
    - Exception (catch-all) → 500 without internal details
    - Every log line carries the method, path and, on /posts/{id} routes,
      the raw post id the client sent

Design Decisions:
    - 4xx domain errors logged at WARNING (client mistakes), 5xx at ERROR
    - Handlers registered by function so tests can build a bare app with them
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from purehouse.core.errors import ErrorCategory, ErrorSeverity, PurehouseError

logger = logging.getLogger(__name__)

# Request-location prefixes FastAPI puts in front of field paths
_LOCATION_PREFIXES = ("body", "path", "query", "header")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(PurehouseError, purehouse_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def purehouse_error_handler(request: Request, exc: PurehouseError):
    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(
        level, exc.message,
        extra={"error_code": exc.code, **_request_extra(request)},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    details = [_detail(e) for e in errors]
    malformed = any(e["type"] == "json_invalid" for e in errors)
    message = "Malformed JSON body" if malformed else "Invalid request data"
    logger.warning(
        f"{message}: {[d['field'] for d in details]}",
        extra={"error_code": "VALIDATION_ERROR", **_request_extra(request)},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": message,
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": details,
            },
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception: {exc}", exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", **_request_extra(request)},
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


def _detail(error: dict) -> dict:
    loc = list(error["loc"])
    if error["type"] == "json_invalid":
        # loc holds the decoder offset, not a field
        loc = []
    elif loc and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    return {
        "field": ".".join(str(part) for part in loc) or "body",
        "message": error["msg"],
        "type": error["type"],
    }


def _request_extra(request: Request) -> dict:
    extra = {"method": request.method, "path": request.url.path}
    post_id = request.path_params.get("post_id")
    if post_id is not None:
        extra["post_id"] = post_id
    return extra

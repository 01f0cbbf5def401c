"""
API error contract.

Every failure leaves the service as `{"error": "<message>"}` with the status
carried by `ApiError`. FastAPI's own body validation (422) is folded into the
same 400 contract.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "Invalid JSON payload"
MISSING_FIELDS = "Product name or price missing in the request"
MISSING_ID = "Product ID is missing in the request"
INVALID_ID = "Invalid product ID"
NOT_FOUND = "Product not found"
PREPARE_FAILED = "Failed to prepare statement"


class ApiError(Exception):
    """An error that maps one-to-one onto an HTTP response."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _validation_message(exc: RequestValidationError) -> str:
    # A body that is absent, not JSON, or not an object is a bad payload;
    # an object lacking one of the product fields is a missing-field error.
    for err in exc.errors():
        loc = tuple(err.get("loc") or ())
        if err.get("type") == "json_invalid" or loc == ("body",):
            return INVALID_PAYLOAD
    if all(err.get("type") == "missing" for err in exc.errors()):
        return MISSING_FIELDS
    return INVALID_PAYLOAD


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

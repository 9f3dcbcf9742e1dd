"""HTTP middleware for the catalog API.

Two layers wrap every request: request-ID correlation on the outside
and a last-resort error catcher inside it.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.api.schemas import ErrorResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


# ============================================================================
# Request ID
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log one line when it finishes.

    A client-supplied ``X-Request-ID`` is reused, otherwise a UUID is
    generated. The ID is stored on ``request.state``, bound into the
    structlog context for the duration of the request and echoed back
    in the response headers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# ============================================================================
# Unhandled Errors
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn exceptions that escaped the route handlers into a 500 body."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(exc),
            )
            body = ErrorResponse(
                error_code="INTERNAL_ERROR",
                message="An internal error occurred",
                request_id=getattr(request.state, "request_id", None),
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=body.model_dump(),
            )


def setup_middleware(app: FastAPI) -> None:
    """Install the catalog middleware on ``app``.

    Starlette runs the last added middleware first, so the request-ID
    layer is added last and error responses still carry the ID.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)

# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches any error nobody else handled and turns it into a short, friendly message
# instead of a crash, and stamps every response with a tracking number.
# 🧪 Purpose (Technical Summary):
# Outermost middleware: assigns the request correlation id, binds it to the logging
# context, adds X-Request-ID/X-Response-Time headers and converts unhandled exceptions
# into a 500 ``{"error": ...}`` response. Application exceptions are translated by the
# handlers registered in app.main before they reach this layer.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, app.shared.utils (logging, helpers)
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import logging
import uuid

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.shared.utils.helpers import Timer
from app.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."
REQUEST_ID_HEADER = "X-Request-ID"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the care API.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        with log_context(request_id=request_id), Timer() as timer:
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.error(
                    f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
                    exc_info=True
                )
                response = JSONResponse(status_code=500, content={"error": UNEXPECTED_ERROR_MESSAGE})

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{timer.duration:.3f}s"
        return response

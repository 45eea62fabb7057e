# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the care app: what was asked for, who asked,
# how long it took and how it ended.
# 🧪 Purpose (Technical Summary):
# Access-log middleware writing one structured line per request with sensitive query
# parameters masked and a warning above the slow-request threshold.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, app.shared.utils (logging, helpers)
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration, skipped under test)

from typing import Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from . import get_middleware_config, should_exclude_path
from app.shared.utils.helpers import Timer, mask_sensitive_data
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

SENSITIVE_PARAMS = {"password", "token", "access_token", "code", "secret"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.slow_request_threshold = get_middleware_config("logging").get("slow_request_threshold", 2.0)

    async def dispatch(self, request: Request, call_next) -> Response:
        if should_exclude_path("logging", request.url.path):
            return await call_next(request)

        with Timer(f"{request.method} {request.url.path}") as timer:
            response = await call_next(request)

        log_data = {
            "method": request.method,
            "path": request.url.path,
            "query": self._filter_query_params(request),
            "status_code": response.status_code,
            "duration_ms": round(timer.duration * 1000, 2),
            "client_ip": request.client.host if request.client else None,
            "user_id": getattr(request.state, "user_id", None),
        }
        message = f"{request.method} {request.url.path} -> {response.status_code}"

        if timer.duration > self.slow_request_threshold:
            logger.warning(f"Slow request: {message}", extra=log_data)
        elif response.status_code >= 500:
            logger.error(message, extra=log_data)
        else:
            logger.info(message, extra=log_data)

        return response

    def _filter_query_params(self, request: Request) -> Dict[str, str]:
        return {
            key: "***" if key.lower() in SENSITIVE_PARAMS else mask_sensitive_data(value)
            for key, value in request.query_params.items()
        }

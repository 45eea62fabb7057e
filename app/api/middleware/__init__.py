# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the helpers that wrap every request: logging what happened and catching
# errors nobody else handled.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware with shared path-exclusion configuration.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.main.py, middleware modules

"""
Middleware Stack Order (outermost first):
    1. ErrorHandlingMiddleware (request id, unhandled errors)
    2. RequestLoggingMiddleware (access log)
    3. CORSMiddleware
    4. Application Routes
"""

from typing import Any, Dict

MIDDLEWARE_CONFIG = {
    "logging": {
        "enabled": True,
        "exclude_paths": [
            "/api/v1/health",
            "/docs",
            "/redoc",
            "/openapi.json",
        ],
        "slow_request_threshold": 2.0,
    },
}


def get_middleware_config(middleware_name: str) -> Dict[str, Any]:
    return MIDDLEWARE_CONFIG.get(middleware_name, {})


def should_exclude_path(middleware_name: str, path: str) -> bool:
    """
    Check if a path should be excluded from middleware processing.

    Matches exact paths and anything below them.
    """
    exclude_paths = get_middleware_config(middleware_name).get("exclude_paths", [])
    return any(path == excluded or path.startswith(f"{excluded}/") for excluded in exclude_paths)


from .error_handling import ErrorHandlingMiddleware  # noqa: E402
from .logging import RequestLoggingMiddleware  # noqa: E402

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "get_middleware_config",
    "should_exclude_path",
]

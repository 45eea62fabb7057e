"""
Core package for the care application.
Provides exceptions, request dependencies and the uniform action result.
"""

from .actions import ActionResult, exception_to_action_result
from .dependencies import AuthContext, PaginationParams, extract_access_token, get_pagination_params
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolationError,
    CareAppException,
    DatabaseError,
    DuplicateResourceError,
    ExternalServiceError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)

__all__ = [
    "ActionResult",
    "exception_to_action_result",
    "AuthContext",
    "PaginationParams",
    "extract_access_token",
    "get_pagination_params",
    "AuthenticationError",
    "AuthorizationError",
    "BusinessRuleViolationError",
    "CareAppException",
    "DatabaseError",
    "DuplicateResourceError",
    "ExternalServiceError",
    "NotFoundError",
    "RepositoryError",
    "ValidationError",
]

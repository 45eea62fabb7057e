"""
Common FastAPI dependencies for the care application.
Provides the authorization context, bearer-token extraction and pagination utilities.
"""

from typing import Optional

from fastapi import Query, Request

from ..config.settings import get_settings


class AuthContext:
    """
    Resolved identity of the caller, passed explicitly into every registry call.

    ``user_id`` is the internal numeric id from the ``users`` table; ``supabase_id`` is
    the external auth subject. ``access_level`` is filled in only by operations that
    resolve a caregiver link for the caller.
    """

    def __init__(
        self,
        user_id: int,
        supabase_id: str,
        email: Optional[str] = None,
        access_level: Optional[str] = None
    ):
        self.user_id = user_id
        self.supabase_id = supabase_id
        self.email = email
        self.access_level = access_level

    def with_access_level(self, access_level: str) -> "AuthContext":
        """Copy of this context carrying a resolved access level."""
        return AuthContext(
            user_id=self.user_id,
            supabase_id=self.supabase_id,
            email=self.email,
            access_level=access_level,
        )



def extract_access_token(request: Request) -> Optional[str]:
    """
    Extract the access token from the request.

    Checked in order: ``Authorization: Bearer``, ``X-Access-Token`` header, session cookie.
    """
    auth_header = request.headers.get("Authorization")
    if auth_header:
        scheme, _, credentials = auth_header.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()

    access_token = request.headers.get("X-Access-Token")
    if access_token:
        return access_token

    token_cookie = request.cookies.get(get_settings().AUTH_COOKIE_NAME)
    if token_cookie:
        return token_cookie

    return None


class PaginationParams:
    """Page-number pagination for list endpoints."""

    def __init__(self, page: int = 1, page_size: Optional[int] = None):
        self.page = max(1, page)
        self.page_size = page_size or get_settings().REMINDERS_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def total_pages(self, total: int) -> int:
        return (total + self.page_size - 1) // self.page_size

def get_pagination_params(
    page: int = Query(1, ge=1, description="1-based page number"),
) -> PaginationParams:
    """
    Dependency for pagination parameters.
    """
    return PaginationParams(page=page)

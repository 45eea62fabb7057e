# 📄 File: app/modules/identity/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Describes the person using the app: the account kept by the sign-in service and the
# matching row we keep in our own database.
# 🧪 Purpose (Technical Summary):
# Domain models for the application user, the external auth user returned by Supabase
# and the session produced by a successful sign-in or code exchange.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# identity_service.py, user_repository.py, supabase_auth.py, presentation dependencies

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthUser(BaseModel):
    """
    User as known to the hosted auth service.

    ``id`` is the external subject; ``user_metadata`` carries provider data such as ``full_name``.
    """

    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return str(self.user_metadata.get("full_name") or "").strip()


class AuthSession(BaseModel):
    """Session issued by the auth service."""

    access_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    user: AuthUser


class OAuthStart(BaseModel):
    """Provider URL plus the PKCE verifier the callback must present for this flow."""

    url: str
    code_verifier: str


class User(BaseModel):
    """
    Application user row, keyed internally by an integer id and externally by ``supabase_id``.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    supabase_id: str
    first_name: str
    last_name: str = ""
    email: str = ""
    phone_number: str = "+1"
    timezone: str = "America/New_York"
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_auth_user(
        cls,
        auth_user: AuthUser,
        phone_number: str,
        timezone: str
    ) -> "User":
        """
        Build the first-login profile for an auth user.

        The first token of ``full_name`` becomes the first name and the rest the last name.
        """
        name_parts = auth_user.full_name.split()
        return cls(
            supabase_id=auth_user.id,
            first_name=name_parts[0] if name_parts else "User",
            last_name=" ".join(name_parts[1:]),
            email=auth_user.email or "",
            phone_number=phone_number,
            timezone=timezone,
        )

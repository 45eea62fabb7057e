# 📄 File: app/modules/identity/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the sign-in forms send and what the account endpoint returns.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the auth endpoints. Required-field checks
# happen in IdentityService so the form messages stay exact.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/auth.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SignInRequest(BaseModel):
    """Email/password credentials."""
    email: Optional[str] = Field(default=None, description="Account email")
    password: Optional[str] = Field(default=None, description="Account password")


class SignUpRequest(SignInRequest):
    pass


class MagicLinkRequest(BaseModel):
    email: Optional[str] = Field(default=None, description="Email to send the sign-in link to")


class PasswordResetRequest(BaseModel):
    email: Optional[str] = Field(default=None, description="Email to send the reset link to")


class UpdatePasswordRequest(BaseModel):
    """New password typed twice on the reset page."""
    password: Optional[str] = Field(default=None, description="New password")
    confirm_password: Optional[str] = Field(default=None, description="New password, repeated")


class OAuthUrlData(BaseModel):
    url: str


class SessionData(BaseModel):
    """Session returned after sign-in or callback."""
    access_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    user_id: str
    email: Optional[str] = None


class CurrentUserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    supabase_id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str
    timezone: str
    created_at: Optional[datetime] = None

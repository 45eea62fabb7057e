# 📄 File: app/modules/identity/domain/services/identity_service.py
# 🧭 Purpose (Layman Explanation):
# Decides who the caller is, creates their account record the first time they sign in,
# and runs the sign-in, sign-up, magic-link, password and sign-out steps.
# 🧪 Purpose (Technical Summary):
# Domain service for identity: token resolution into an AuthContext, soft-fail
# first-login provisioning of the users row, and validated auth actions delegated
# to the Supabase adapter.
# 🔗 Dependencies:
# UserRepository, SupabaseAuthService, app.shared.core (AuthContext, exceptions)
# 🔄 Connected Modules / Calls From:
# presentation/dependencies.py (get_auth_context), presentation/api/v1/auth.py

import logging
from typing import Optional

from fastapi import Depends

from ..models.user import AuthSession, AuthUser, OAuthStart, User
from ..repositories.user_repository import UserRepository
from app.modules.identity.infrastructure.external.supabase_auth import (
    SupabaseAuthService,
    get_supabase_auth_service,
)
from app.shared.config.settings import get_settings
from app.shared.core.dependencies import AuthContext
from app.shared.core.exceptions import (
    AuthenticationError,
    CareAppException,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)
from app.shared.utils.validators import missing_fields

logger = logging.getLogger(__name__)

UNABLE_TO_AUTHENTICATE = "Unable to authenticate. Please try again."

# Email link types Supabase issues for sign-in, confirmation and recovery
EMAIL_LINK_TYPES = ("magiclink", "signup", "invite", "recovery", "email_change", "email")


class IdentityService:
    """
    Domain service for identity resolution and authentication actions.
    """

    def __init__(
        self,
        user_repository: UserRepository = Depends(),
        auth_service: SupabaseAuthService = Depends(get_supabase_auth_service),
    ):
        self.user_repository = user_repository
        self.auth_service = auth_service
        self.settings = get_settings()

    # =========================================================================
    # IDENTITY RESOLUTION
    # =========================================================================

    async def resolve_identity(self, token: Optional[str]) -> AuthUser:
        """Return the auth user behind ``token`` or raise ``AuthenticationError``."""
        if not token:
            raise AuthenticationError()
        return await self.auth_service.verify_access_token(token)

    async def get_auth_context(self, token: Optional[str]) -> AuthContext:
        """
        Resolve the caller into an AuthContext carrying the internal user id.

        Raises:
            AuthenticationError: No valid session
            NotFoundError: Authenticated but no users row exists
        """
        auth_user = await self.resolve_identity(token)

        user = await self.user_repository.get_by_supabase_id(auth_user.id)
        if user is None:
            logger.warning(f"No user row for authenticated subject {auth_user.id}")
            raise NotFoundError("User data not found", resource_type="user", resource_id=auth_user.id)

        return AuthContext(
            user_id=user.id,
            supabase_id=user.supabase_id,
            email=auth_user.email or user.email,
        )

    async def get_current_user(self, ctx: AuthContext) -> User:
        user = await self.user_repository.get_by_id(ctx.user_id)
        if user is None:
            raise NotFoundError("User data not found", resource_type="user", resource_id=ctx.user_id)
        return user

    async def ensure_user_profile(self, auth_user: AuthUser) -> Optional[User]:
        """
        Create the users row on first login.

        Never raises: a provisioning failure is logged and authentication proceeds.
        """
        try:
            existing = await self.user_repository.get_by_supabase_id(auth_user.id)
            if existing is not None:
                return existing

            user = User.from_auth_user(
                auth_user,
                phone_number=self.settings.DEFAULT_USER_PHONE,
                timezone=self.settings.DEFAULT_USER_TIMEZONE,
            )
            created = await self.user_repository.create(user)
            logger.info(f"Provisioned user profile {created.id} for subject {auth_user.id}")
            return created

        except CareAppException as e:
            logger.error(f"Error creating user profile for {auth_user.id}: {e.message}")
            return None

    # =========================================================================
    # AUTH ACTIONS
    # =========================================================================

    async def sign_in(self, email: Optional[str], password: Optional[str]) -> AuthSession:
        if missing_fields({"email": email, "password": password}):
            raise ValidationError("Email and password are required")

        session = await self.auth_service.sign_in_with_password(email.strip(), password)
        await self.ensure_user_profile(session.user)
        return session

    async def sign_up(self, email: Optional[str], password: Optional[str]) -> None:
        if missing_fields({"email": email, "password": password}):
            raise ValidationError("Email and password are required")

        await self.auth_service.sign_up(
            email.strip(), password, redirect_to=self.settings.auth_redirect_url
        )

    async def send_magic_link(self, email: Optional[str]) -> None:
        if missing_fields({"email": email}):
            raise ValidationError("Email is required", field="email")

        await self.auth_service.send_magic_link(
            email.strip(), redirect_to=self.settings.auth_redirect_url
        )

    async def get_oauth_url(self, provider: str = "google") -> OAuthStart:
        return await self.auth_service.get_oauth_url(
            provider, redirect_to=self.settings.auth_redirect_url
        )

    async def complete_callback(
        self,
        code: Optional[str] = None,
        code_verifier: Optional[str] = None,
        token_hash: Optional[str] = None,
        otp_type: Optional[str] = None,
    ) -> AuthSession:
        """
        Finish an email-link or OAuth sign-in, provisioning the profile on first login.

        Email links arrive with ``token_hash`` and ``type``; OAuth redirects arrive with
        ``code`` and need the verifier issued when that flow started.
        """
        try:
            if token_hash and otp_type in EMAIL_LINK_TYPES:
                session = await self.auth_service.verify_email_token(token_hash, otp_type)
            elif code and code_verifier:
                session = await self.auth_service.exchange_code_for_session(code, code_verifier)
            else:
                raise AuthenticationError(UNABLE_TO_AUTHENTICATE)
        except ExternalServiceError as e:
            logger.warning(f"Auth callback rejected: {e.message}")
            raise AuthenticationError(UNABLE_TO_AUTHENTICATE) from e

        if session is None:
            raise AuthenticationError(UNABLE_TO_AUTHENTICATE)

        await self.ensure_user_profile(session.user)
        return session

    async def request_password_reset(self, email: Optional[str]) -> None:
        if missing_fields({"email": email}):
            raise ValidationError("Email is required", field="email")

        await self.auth_service.send_password_reset(
            email.strip(), redirect_to=self.settings.password_reset_redirect_url
        )

    async def update_password(
        self,
        token: Optional[str],
        password: Optional[str],
        confirm_password: Optional[str],
    ) -> AuthUser:
        """
        Set a new password for the signed-in caller.

        Raises:
            AuthenticationError: No valid session
            ValidationError: Password missing, mismatched or too short
        """
        auth_user = await self.resolve_identity(token)

        if missing_fields({"password": password}):
            raise ValidationError("Password is required", field="password")
        if password != confirm_password:
            raise ValidationError("Passwords do not match", field="confirm_password")
        if len(password) < self.settings.PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Password must be at least {self.settings.PASSWORD_MIN_LENGTH} characters long",
                field="password"
            )

        await self.auth_service.update_password(token, password)
        return auth_user

    async def sign_out(self, token: Optional[str]) -> None:
        if token:
            await self.auth_service.sign_out(token)

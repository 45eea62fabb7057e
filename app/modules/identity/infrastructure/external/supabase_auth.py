# 📄 File: app/modules/identity/infrastructure/external/supabase_auth.py
# 🧭 Purpose (Layman Explanation):
# Talks to Supabase, the service that actually checks passwords, sends magic-link emails
# and signs people in with Google.
# 🧪 Purpose (Technical Summary):
# Adapter over the supabase-py auth client. Verifies access tokens locally with python-jose
# when the project JWT secret is configured, otherwise asks Supabase. Blocking client calls
# run in the threadpool; Supabase auth errors keep their message. Each OAuth flow gets its
# own PKCE verifier, handed back to the router instead of living on the shared client.
# 🔗 Dependencies:
# supabase, python-jose, fastapi.concurrency, app.shared.config
# 🔄 Connected Modules / Calls From:
# identity_service.py, presentation/dependencies.py, presentation/api/v1/auth.py

import logging
from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool
from jose import ExpiredSignatureError, JWTError, jwt
from supabase import AuthError
from supabase_auth.helpers import generate_pkce_challenge, generate_pkce_verifier

from app.modules.identity.domain.models.user import AuthSession, AuthUser, OAuthStart
from app.shared.config.settings import Settings, get_settings
from app.shared.config.supabase import create_auth_client, get_supabase_auth
from app.shared.core.exceptions import AuthenticationError, ExternalServiceError

logger = logging.getLogger(__name__)

SUPABASE_SERVICE = "supabase_auth"


class SupabaseAuthService:
    """
    Supabase authentication service.

    Every method raises ``ExternalServiceError`` carrying Supabase's own message when the
    auth API rejects a call, and ``AuthenticationError`` when a token cannot be trusted.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def _auth(self):
        return get_supabase_auth()

    # =========================================================================
    # TOKEN VERIFICATION
    # =========================================================================

    async def verify_access_token(self, token: str) -> AuthUser:
        """
        Resolve the auth user behind an access token.

        Raises:
            AuthenticationError: If the token is missing, expired or rejected
        """
        if not token:
            raise AuthenticationError()

        if self.settings.SUPABASE_JWT_SECRET:
            return self._decode_locally(token)

        try:
            response = await run_in_threadpool(self._auth.get_user, token)
        except AuthError as e:
            logger.warning(f"Supabase rejected access token: {e.message}")
            raise AuthenticationError() from e

        if response is None or response.user is None:
            raise AuthenticationError()

        return self._to_auth_user(response.user)

    def _decode_locally(self, token: str) -> AuthUser:
        try:
            payload = jwt.decode(
                token,
                self.settings.SUPABASE_JWT_SECRET,
                algorithms=["HS256"],
                audience=self.settings.SUPABASE_JWT_AUDIENCE,
            )
        except ExpiredSignatureError as e:
            logger.info("Access token expired")
            raise AuthenticationError() from e
        except JWTError as e:
            logger.warning(f"Invalid access token: {e}")
            raise AuthenticationError() from e

        subject = payload.get("sub")
        if not subject:
            raise AuthenticationError()

        return AuthUser(
            id=subject,
            email=payload.get("email"),
            user_metadata=payload.get("user_metadata") or {},
        )

    # =========================================================================
    # SIGN-IN FLOWS
    # =========================================================================

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        response = await self._call(
            "sign_in_with_password",
            {"email": email, "password": password},
        )
        session = self._to_auth_session(response)
        if session is None:
            raise ExternalServiceError(
                "Unable to authenticate. Please try again.",
                service=SUPABASE_SERVICE,
                status_code=401
            )
        return session

    async def sign_up(self, email: str, password: str, redirect_to: str) -> None:
        await self._call(
            "sign_up",
            {
                "email": email,
                "password": password,
                "options": {"email_redirect_to": redirect_to},
            },
        )

    async def send_magic_link(self, email: str, redirect_to: str) -> None:
        await self._call(
            "sign_in_with_otp",
            {
                "email": email,
                "options": {"email_redirect_to": redirect_to},
            },
        )

    async def get_oauth_url(self, provider: str, redirect_to: str) -> OAuthStart:
        """
        Start a provider sign-in with a fresh PKCE pair.

        The verifier is returned to the caller instead of being kept on the shared
        client, so concurrent flows never overwrite each other.
        """
        code_verifier = generate_pkce_verifier()
        response = await self._call(
            "sign_in_with_oauth",
            {
                "provider": provider,
                "options": {
                    "redirect_to": redirect_to,
                    "query_params": {
                        "code_challenge": generate_pkce_challenge(code_verifier),
                        "code_challenge_method": "s256",
                    },
                },
            },
        )
        return OAuthStart(url=response.url, code_verifier=code_verifier)

    async def exchange_code_for_session(self, code: str, code_verifier: str) -> Optional[AuthSession]:
        """Exchange an OAuth code for a session; ``None`` when no session was issued."""
        response = await self._call(
            "exchange_code_for_session",
            {"auth_code": code, "code_verifier": code_verifier},
        )
        return self._to_auth_session(response)

    async def verify_email_token(self, token_hash: str, otp_type: str) -> Optional[AuthSession]:
        """Verify the token carried by a magic-link, confirmation or recovery email."""
        response = await self._call(
            "verify_otp",
            {"token_hash": token_hash, "type": otp_type},
        )
        return self._to_auth_session(response)

    async def send_password_reset(self, email: str, redirect_to: str) -> None:
        await self._call("reset_password_for_email", email, {"redirect_to": redirect_to})

    async def update_password(self, access_token: str, password: str) -> None:
        """Set a new password for the user behind ``access_token``."""
        client = create_auth_client()
        await self._call("set_session", access_token, "", client=client)
        await self._call("update_user", {"password": password}, client=client)

    async def sign_out(self, token: str) -> None:
        """Revoke the session behind ``token``. Failures are logged only."""
        try:
            await run_in_threadpool(self._auth.admin.sign_out, token)
        except AuthError as e:
            logger.warning(f"Supabase sign-out failed: {e.message}")

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _call(self, method_name: str, *args: Any, client: Any = None) -> Any:
        method = getattr(client or self._auth, method_name)
        try:
            return await run_in_threadpool(method, *args)
        except AuthError as e:
            logger.warning(f"Supabase {method_name} failed: {e.message}")
            raise ExternalServiceError(
                e.message,
                service=SUPABASE_SERVICE,
                details={"operation": method_name},
                status_code=400
            ) from e


    def _to_auth_user(self, supabase_user: Any) -> AuthUser:
        return AuthUser(
            id=str(supabase_user.id),
            email=supabase_user.email,
            user_metadata=supabase_user.user_metadata or {},
        )

    def _to_auth_session(self, response: Any) -> Optional[AuthSession]:
        session = getattr(response, "session", None)
        if session is None or response.user is None:
            return None

        return AuthSession(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_in=session.expires_in,
            user=self._to_auth_user(response.user),
        )


def get_supabase_auth_service() -> SupabaseAuthService:
    """FastAPI dependency for the Supabase auth adapter."""
    return SupabaseAuthService()

# 📄 File: app/modules/identity/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# The sign-in doors of the app: password, sign-up, magic link, Google, the return
# address after email/Google sign-in, password reset and signing out.
#
# 🧪 Purpose (Technical Summary):
# FastAPI auth endpoints returning the uniform action result. Successful sign-in and
# callback set the session cookie read by the identity dependency; sign-out clears it.
#
# 🔗 Dependencies:
# - FastAPI router, Response
# - IdentityService, auth schemas
# - app.shared.core.actions (ActionResult)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /auth)

"""
Authentication API Endpoints

Endpoints:
- POST /sign-in: Email/password sign-in
- POST /sign-up: Account creation with email confirmation
- POST /magic-link: Passwordless email sign-in
- POST /oauth/google: Google authorization URL
- GET /callback: Email-link verification or OAuth code exchange
- POST /password-reset: Email a password reset link
- POST /update-password: Set a new password for the signed-in caller
- POST /sign-out: End the session
- GET /me: Current user row
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from app.modules.identity.domain.models.user import AuthSession
from app.modules.identity.domain.services.identity_service import IdentityService
from app.modules.identity.presentation.api.schemas.auth_schemas import (
    CurrentUserResponse,
    MagicLinkRequest,
    OAuthUrlData,
    PasswordResetRequest,
    SessionData,
    SignInRequest,
    SignUpRequest,
    UpdatePasswordRequest,
)
from app.modules.identity.presentation.dependencies import get_access_token, get_auth_context
from app.shared.config.settings import get_settings
from app.shared.core.actions import ActionResult
from app.shared.core.dependencies import AuthContext
from app.shared.utils.logging import get_logger

audit_logger = get_logger(__name__)

auth_router = APIRouter()


def _set_session_cookie(response: Response, session: AuthSession) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=session.access_token,
        max_age=session.expires_in or settings.AUTH_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="lax",
    )


def _session_data(session: AuthSession) -> Dict[str, Any]:
    return SessionData(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_in=session.expires_in,
        user_id=session.user.id,
        email=session.user.email,
    ).model_dump()


@auth_router.post(
    "/sign-in",
    summary="Sign in with email and password",
    responses={
        200: {"description": "Signed in, session cookie set"},
        400: {"description": "Rejected by the auth service"},
        422: {"description": "Email and password are required"},
    }
)
async def sign_in(
    payload: SignInRequest,
    response: Response,
    identity_service: IdentityService = Depends(),
) -> Dict[str, Any]:
    session = await identity_service.sign_in(payload.email, payload.password)
    _set_session_cookie(response, session)
    audit_logger.log_user_action("sign_in", user_id=session.user.id)
    return ActionResult.ok("Signed in successfully", data=_session_data(session)).to_response()


@auth_router.post(
    "/sign-up",
    summary="Create an account",
    description="Creates the account and sends a confirmation email.",
)
async def sign_up(
    payload: SignUpRequest,
    identity_service: IdentityService = Depends(),
) -> Dict[str, Any]:
    await identity_service.sign_up(payload.email, payload.password)
    return ActionResult.ok("Check your email to confirm your account.").to_response()


@auth_router.post("/magic-link", summary="Send a magic sign-in link")
async def send_magic_link(
    payload: MagicLinkRequest,
    identity_service: IdentityService = Depends(),
) -> Dict[str, Any]:
    await identity_service.send_magic_link(payload.email)
    return ActionResult.ok("Magic link sent! Check your email to sign in.").to_response()


@auth_router.post(
    "/oauth/google",
    summary="Start Google sign-in",
    description="Returns the provider URL and sets the short-lived PKCE verifier cookie for this flow.",
)
async def google_sign_in(
    response: Response,
    identity_service: IdentityService = Depends(),
) -> Dict[str, Any]:
    oauth = await identity_service.get_oauth_url("google")
    settings = get_settings()
    response.set_cookie(
        key=settings.AUTH_VERIFIER_COOKIE_NAME,
        value=oauth.code_verifier,
        max_age=settings.AUTH_VERIFIER_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="lax",
    )
    return ActionResult.ok(
        "Redirecting to Google", data=OAuthUrlData(url=oauth.url).model_dump()
    ).to_response()


@auth_router.get(
    "/callback",
    summary="Complete email or OAuth sign-in",
    responses={401: {"description": "Unable to authenticate"}},
)
async def auth_callback(
    request: Request,
    response: Response,
    code: Optional[str] = Query(None, description="OAuth authorization code"),
    token_hash: Optional[str] = Query(None, description="Token from an email link"),
    otp_type: Optional[str] = Query(None, alias="type", description="Email link type"),
    identity_service: IdentityService = Depends(),
) -> Dict[str, Any]:
    settings = get_settings()
    session = await identity_service.complete_callback(
        code=code,
        code_verifier=request.cookies.get(settings.AUTH_VERIFIER_COOKIE_NAME),
        token_hash=token_hash,
        otp_type=otp_type,
    )
    _set_session_cookie(response, session)
    response.delete_cookie(settings.AUTH_VERIFIER_COOKIE_NAME)
    audit_logger.log_user_action("auth_callback", user_id=session.user.id, resource=otp_type or "oauth")
    return ActionResult.ok("Signed in successfully", data=_session_data(session)).to_response()


@auth_router.post("/password-reset", summary="Email a password reset link")
async def request_password_reset(
    payload: PasswordResetRequest,
    identity_service: IdentityService = Depends(),
) -> Dict[str, Any]:
    await identity_service.request_password_reset(payload.email)
    return ActionResult.ok("Check your email for a password reset link.").to_response()


@auth_router.post(
    "/update-password",
    summary="Set a new password",
    responses={
        401: {"description": "No valid session"},
        422: {"description": "Passwords missing, mismatched or too short"},
    }
)
async def update_password(
    payload: UpdatePasswordRequest,
    token: Optional[str] = Depends(get_access_token),
    identity_service: IdentityService = Depends(),
) -> Dict[str, Any]:
    auth_user = await identity_service.update_password(
        token, payload.password, payload.confirm_password
    )
    audit_logger.log_user_action("update_password", user_id=auth_user.id)
    return ActionResult.ok("Password updated successfully!").to_response()


@auth_router.post("/sign-out", summary="Sign out")
async def sign_out(
    response: Response,
    token: Optional[str] = Depends(get_access_token),
    identity_service: IdentityService = Depends(),
) -> Dict[str, Any]:
    await identity_service.sign_out(token)
    response.delete_cookie(get_settings().AUTH_COOKIE_NAME)
    return ActionResult.ok("Signed out").to_response()


@auth_router.get(
    "/me",
    response_model=CurrentUserResponse,
    summary="Get current user information",
)
async def get_me(
    ctx: AuthContext = Depends(get_auth_context),
    identity_service: IdentityService = Depends(),
) -> CurrentUserResponse:
    user = await identity_service.get_current_user(ctx)
    return CurrentUserResponse.model_validate(user)

"""
Helpers shared by the test modules: token minting, a local Supabase auth client and
direct database access.
"""
import os
import time
from types import SimpleNamespace
from urllib.parse import urlencode

from jose import jwt
from sqlalchemy import select
from supabase import AuthApiError
from supabase_auth.helpers import generate_pkce_challenge

from app.modules.care_recipients.infrastructure.database.models import ParentModel
from app.modules.identity.infrastructure.database.models import UserModel
from app.shared.infrastructure.database import database_session


def make_token(supabase_id: str, email: str = "family@example.com", expires_in: int = 3600) -> str:
    """Mint an access token the way Supabase signs them."""
    return jwt.encode(
        {
            "sub": supabase_id,
            "email": email,
            "aud": "authenticated",
            "exp": int(time.time()) + expires_in,
            "user_metadata": {"full_name": "Jamie Rivera"},
        },
        os.environ["SUPABASE_JWT_SECRET"],
        algorithm="HS256",
    )


def auth_headers(supabase_id: str, email: str = "family@example.com") -> dict:
    return {"Authorization": f"Bearer {make_token(supabase_id, email)}"}


class FakeGoTrueClient:
    """
    Stand-in for the supabase-py auth client: same method names and response shapes,
    answered locally. Codes are only exchangeable with the verifier whose challenge
    they were issued for, as on the real auth server.
    """

    def __init__(self):
        self.calls = []
        self.spawned = []
        self.session_token = None
        self._challenges = {}
        self.admin = SimpleNamespace(sign_out=self._admin_sign_out)

    def spawn(self) -> "FakeGoTrueClient":
        """Client handed out for a single request; its calls are recorded on this one."""
        child = FakeGoTrueClient()
        child.calls = self.calls
        self.spawned.append(child)
        return child

    def issue_code(self, code_challenge: str) -> str:
        """Simulate the provider redirect for the flow that sent ``code_challenge``."""
        code = f"code-{len(self._challenges) + 1}"
        self._challenges[code] = code_challenge
        return code

    def _response(self, supabase_id: str, email: str, with_session: bool = True):
        user = SimpleNamespace(id=supabase_id, email=email, user_metadata={"full_name": "Jamie Rivera"})
        session = SimpleNamespace(
            access_token=make_token(supabase_id, email),
            refresh_token="refresh-token",
            expires_in=3600,
        ) if with_session else None
        return SimpleNamespace(user=user, session=session)

    def sign_in_with_password(self, credentials):
        email = credentials["email"]
        self.calls.append(("sign_in_with_password", email))
        if credentials["password"] != "correct-horse":
            raise AuthApiError("Invalid login credentials", 400, "invalid_credentials")
        if email == "unconfirmed@example.com":
            return self._response("supabase-unconfirmed", email, with_session=False)
        return self._response("supabase-signed-in", email)

    def sign_up(self, credentials):
        self.calls.append(("sign_up", credentials["email"], credentials["options"]["email_redirect_to"]))

    def sign_in_with_otp(self, credentials):
        self.calls.append(("sign_in_with_otp", credentials["email"], credentials["options"]["email_redirect_to"]))

    def sign_in_with_oauth(self, credentials):
        options = credentials["options"]
        self.calls.append(("sign_in_with_oauth", credentials["provider"], options["redirect_to"]))
        query = urlencode({
            **options.get("query_params", {}),
            "redirect_to": options["redirect_to"],
            "provider": credentials["provider"],
        })
        return SimpleNamespace(
            provider=credentials["provider"],
            url=f"https://test-project.supabase.co/auth/v1/authorize?{query}",
        )

    def exchange_code_for_session(self, params):
        self.calls.append(("exchange_code_for_session", params["auth_code"]))
        challenge = self._challenges.get(params["auth_code"])
        if challenge is None or generate_pkce_challenge(params["code_verifier"]) != challenge:
            raise AuthApiError("invalid flow state, no valid flow state found", 404, "flow_state_not_found")
        return self._response("supabase-oauth", "oauth@example.com")

    def verify_otp(self, params):
        self.calls.append(("verify_otp", params["token_hash"], params["type"]))
        if params["token_hash"] != "valid-token-hash":
            raise AuthApiError("Email link is invalid or has expired", 403, "otp_expired")
        return self._response("supabase-magic", "magic@example.com")

    def reset_password_for_email(self, email, options):
        self.calls.append(("reset_password_for_email", email, options["redirect_to"]))

    def set_session(self, access_token, refresh_token):
        self.calls.append(("set_session", access_token))
        self.session_token = access_token

    def update_user(self, attributes):
        if self.session_token is None:
            raise AuthApiError("Auth session missing!", 400, "session_missing")
        if attributes["password"] == "correct-horse":
            raise AuthApiError("New password should be different from the old password.", 422, "same_password")
        self.calls.append(("update_user", self.session_token))

    def _admin_sign_out(self, jwt):
        self.calls.append(("sign_out", jwt))


async def create_user(supabase_id: str, email: str, first_name: str = "Jamie") -> int:
    async with database_session() as session:
        user = UserModel(supabase_id=supabase_id, first_name=first_name, email=email)
        session.add(user)
        await session.flush()
        return user.id


async def add_rows(*rows) -> None:
    async with database_session() as session:
        session.add_all(rows)


async def fetch_all(model):
    async with database_session() as session:
        result = await session.execute(select(model))
        return list(result.scalars().all())


async def fetch_parent(recipient_id: int) -> ParentModel:
    async with database_session() as session:
        return await session.get(ParentModel, recipient_id)

"""
Tests for authentication endpoints and identity resolution.
"""
from urllib.parse import parse_qs, urlparse

import httpx
from supabase_auth.helpers import generate_pkce_challenge

from app.modules.identity.infrastructure.database.models import UserModel
from app.modules.identity.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.modules.identity.infrastructure.external.supabase_auth import SupabaseAuthService
from app.shared.config.settings import get_settings
from app.shared.config.supabase import cleanup_supabase
from app.shared.core.exceptions import RepositoryError
from tests.support import auth_headers, fetch_all, make_token


def _challenge(start_response) -> str:
    url = start_response.json()["data"]["url"]
    return parse_qs(urlparse(url).query)["code_challenge"][0]


def _browser(application) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=application), base_url="http://testserver")


class TestIdentityResolution:
    """Protected endpoints resolve the caller from a bearer token or the session cookie."""

    async def test_missing_token_is_rejected(self, client):
        response = await client.get("/api/v1/recipients")
        assert response.status_code == 401
        assert response.json() == {"error": "User not authenticated"}

    async def test_expired_token_is_rejected(self, client, user):
        token = make_token("supabase-owner", "owner@example.com", expires_in=-60)
        response = await client.get("/api/v1/recipients", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    async def test_token_with_wrong_signature_is_rejected(self, client, user):
        response = await client.get("/api/v1/recipients", headers={"Authorization": "Bearer not.a.jwt"})
        assert response.status_code == 401

    async def test_authenticated_without_user_row(self, client, database):
        response = await client.get("/api/v1/auth/me", headers=auth_headers("supabase-nobody"))
        assert response.status_code == 404
        assert response.json() == {"error": "User data not found"}

    async def test_me_returns_user_row(self, client, user):
        response = await client.get("/api/v1/auth/me", headers=user["headers"])
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == user["id"]
        assert body["email"] == "owner@example.com"
        assert body["supabase_id"] == "supabase-owner"

    async def test_session_cookie_is_accepted(self, client, user):
        client.cookies.set(get_settings().AUTH_COOKIE_NAME, make_token("supabase-owner", "owner@example.com"))
        response = await client.get("/api/v1/recipients")
        assert response.status_code == 200
        assert response.json() == []


class TestSignIn:
    async def test_sign_in_sets_cookie_and_provisions_user(self, client, fake_auth):
        response = await client.post(
            "/api/v1/auth/sign-in",
            json={"email": "new@example.com", "password": "correct-horse"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] == "Signed in successfully"
        assert body["data"]["user_id"] == "supabase-signed-in"
        assert body["data"]["refresh_token"] == "refresh-token"
        assert get_settings().AUTH_COOKIE_NAME in response.cookies

        users = await fetch_all(UserModel)
        assert [(u.supabase_id, u.email) for u in users] == [("supabase-signed-in", "new@example.com")]
        assert users[0].first_name == "Jamie"
        assert users[0].last_name == "Rivera"

    async def test_second_sign_in_reuses_user(self, client, fake_auth):
        payload = {"email": "new@example.com", "password": "correct-horse"}
        await client.post("/api/v1/auth/sign-in", json=payload)
        await client.post("/api/v1/auth/sign-in", json=payload)

        assert len(await fetch_all(UserModel)) == 1

    async def test_wrong_password_passes_through_auth_error(self, client, fake_auth):
        response = await client.post(
            "/api/v1/auth/sign-in",
            json={"email": "new@example.com", "password": "wrong"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid login credentials"}
        assert await fetch_all(UserModel) == []

    async def test_sign_in_without_session(self, client, fake_auth):
        response = await client.post(
            "/api/v1/auth/sign-in",
            json={"email": "unconfirmed@example.com", "password": "correct-horse"},
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Unable to authenticate. Please try again."}
        assert await fetch_all(UserModel) == []

    async def test_profile_failure_does_not_block_sign_in(self, client, fake_auth, monkeypatch):
        async def failing_create(self, user):
            raise RepositoryError("Failed to create user", operation="create", entity="user")

        monkeypatch.setattr(UserRepositoryImpl, "create", failing_create)

        response = await client.post(
            "/api/v1/auth/sign-in",
            json={"email": "new@example.com", "password": "correct-horse"},
        )

        assert response.status_code == 200
        assert response.json()["success"] == "Signed in successfully"
        assert get_settings().AUTH_COOKIE_NAME in response.cookies
        assert await fetch_all(UserModel) == []

    async def test_missing_credentials(self, client, fake_auth):
        response = await client.post("/api/v1/auth/sign-in", json={"email": "new@example.com"})
        assert response.status_code == 422
        assert response.json() == {"error": "Email and password are required"}
        assert fake_auth.calls == []


class TestSignUpAndMagicLink:
    async def test_sign_up_sends_confirmation(self, client, fake_auth):
        response = await client.post(
            "/api/v1/auth/sign-up",
            json={"email": " new@example.com ", "password": "secret-pass"},
        )
        assert response.status_code == 200
        assert response.json() == {"success": "Check your email to confirm your account."}
        assert fake_auth.calls == [("sign_up", "new@example.com", get_settings().auth_redirect_url)]

    async def test_sign_up_requires_password(self, client, fake_auth):
        response = await client.post("/api/v1/auth/sign-up", json={"email": "new@example.com", "password": " "})
        assert response.status_code == 422
        assert response.json() == {"error": "Email and password are required"}

    async def test_magic_link(self, client, fake_auth):
        response = await client.post("/api/v1/auth/magic-link", json={"email": "new@example.com"})
        assert response.status_code == 200
        assert response.json() == {"success": "Magic link sent! Check your email to sign in."}
        assert fake_auth.calls == [("sign_in_with_otp", "new@example.com", get_settings().auth_redirect_url)]

    async def test_magic_link_requires_email(self, client, fake_auth):
        response = await client.post("/api/v1/auth/magic-link", json={})
        assert response.status_code == 422
        assert response.json() == {"error": "Email is required"}


class TestEmailLinkCallback:
    """Magic-link, confirmation and recovery emails return with a token hash."""

    async def test_magic_link_token_signs_in(self, client, fake_auth):
        response = await client.get(
            "/api/v1/auth/callback",
            params={"token_hash": "valid-token-hash", "type": "magiclink"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["user_id"] == "supabase-magic"
        assert get_settings().AUTH_COOKIE_NAME in response.cookies
        assert fake_auth.calls == [("verify_otp", "valid-token-hash", "magiclink")]
        users = await fetch_all(UserModel)
        assert [u.email for u in users] == ["magic@example.com"]

    async def test_expired_link(self, client, fake_auth):
        response = await client.get(
            "/api/v1/auth/callback",
            params={"token_hash": "used-token-hash", "type": "magiclink"},
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Unable to authenticate. Please try again."}
        assert await fetch_all(UserModel) == []

    async def test_unknown_link_type(self, client, fake_auth):
        response = await client.get(
            "/api/v1/auth/callback",
            params={"token_hash": "valid-token-hash", "type": "bogus"},
        )
        assert response.status_code == 401
        assert fake_auth.calls == []


class TestOAuthAndCallback:
    async def test_google_flow_sets_verifier_cookie(self, client, fake_auth):
        response = await client.post("/api/v1/auth/oauth/google")

        assert response.status_code == 200
        query = parse_qs(urlparse(response.json()["data"]["url"]).query)
        assert query["provider"] == ["google"]
        assert query["redirect_to"] == [get_settings().auth_redirect_url]
        assert query["code_challenge_method"] == ["s256"]

        verifier = response.cookies[get_settings().AUTH_VERIFIER_COOKIE_NAME]
        assert query["code_challenge"] == [generate_pkce_challenge(verifier)]
        assert verifier not in response.text

    async def test_callback_without_code(self, client, fake_auth):
        response = await client.get("/api/v1/auth/callback")
        assert response.status_code == 401
        assert response.json() == {"error": "Unable to authenticate. Please try again."}

    async def test_callback_without_verifier_cookie(self, client, fake_auth):
        code = fake_auth.issue_code("challenge-from-elsewhere")
        response = await client.get("/api/v1/auth/callback", params={"code": code})
        assert response.status_code == 401
        assert fake_auth.calls == []

    async def test_callback_provisions_user(self, client, fake_auth):
        started = await client.post("/api/v1/auth/oauth/google")
        code = fake_auth.issue_code(_challenge(started))

        response = await client.get("/api/v1/auth/callback", params={"code": code})

        assert response.status_code == 200
        assert get_settings().AUTH_COOKIE_NAME in response.cookies
        assert get_settings().AUTH_VERIFIER_COOKIE_NAME not in client.cookies
        users = await fetch_all(UserModel)
        assert [u.supabase_id for u in users] == ["supabase-oauth"]

    async def test_overlapping_flows_keep_their_own_verifier(self, application, fake_auth):
        async with _browser(application) as first, _browser(application) as second:
            started_first = await first.post("/api/v1/auth/oauth/google")
            started_second = await second.post("/api/v1/auth/oauth/google")
            assert _challenge(started_first) != _challenge(started_second)

            first_code = fake_auth.issue_code(_challenge(started_first))
            second_code = fake_auth.issue_code(_challenge(started_second))

            # The first browser returns after the second flow has started
            finished_first = await first.get("/api/v1/auth/callback", params={"code": first_code})
            finished_second = await second.get("/api/v1/auth/callback", params={"code": second_code})

        assert finished_first.status_code == 200
        assert finished_second.status_code == 200

    async def test_code_from_another_flow_is_rejected(self, application, fake_auth):
        async with _browser(application) as first, _browser(application) as second:
            await first.post("/api/v1/auth/oauth/google")
            started_second = await second.post("/api/v1/auth/oauth/google")
            second_code = fake_auth.issue_code(_challenge(started_second))

            response = await first.get("/api/v1/auth/callback", params={"code": second_code})

        assert response.status_code == 401
        assert response.json() == {"error": "Unable to authenticate. Please try again."}
        assert await fetch_all(UserModel) == []


class TestPasswordReset:
    async def test_reset_email_points_to_reset_page(self, client, fake_auth):
        response = await client.post("/api/v1/auth/password-reset", json={"email": " family@example.com "})

        assert response.status_code == 200
        assert response.json() == {"success": "Check your email for a password reset link."}
        assert fake_auth.calls == [
            ("reset_password_for_email", "family@example.com", get_settings().password_reset_redirect_url)
        ]

    async def test_reset_requires_email(self, client, fake_auth):
        response = await client.post("/api/v1/auth/password-reset", json={"email": ""})
        assert response.status_code == 422
        assert response.json() == {"error": "Email is required"}

    async def test_update_password_uses_request_scoped_client(self, client, fake_auth):
        headers = auth_headers("supabase-owner")
        token = headers["Authorization"].split(" ", 1)[1]

        response = await client.post(
            "/api/v1/auth/update-password",
            json={"password": "new-secret", "confirm_password": "new-secret"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json() == {"success": "Password updated successfully!"}
        assert fake_auth.calls == [("set_session", token), ("update_user", token)]
        assert len(fake_auth.spawned) == 1
        assert fake_auth.session_token is None

    async def test_passwords_must_match(self, client, fake_auth):
        response = await client.post(
            "/api/v1/auth/update-password",
            json={"password": "new-secret", "confirm_password": "new-secrets"},
            headers=auth_headers("supabase-owner"),
        )
        assert response.status_code == 422
        assert response.json() == {"error": "Passwords do not match"}
        assert fake_auth.calls == []

    async def test_password_minimum_length(self, client, fake_auth):
        response = await client.post(
            "/api/v1/auth/update-password",
            json={"password": "abc12", "confirm_password": "abc12"},
            headers=auth_headers("supabase-owner"),
        )
        assert response.status_code == 422
        assert response.json() == {"error": "Password must be at least 6 characters long"}

    async def test_update_password_requires_session(self, client, fake_auth):
        response = await client.post(
            "/api/v1/auth/update-password",
            json={"password": "new-secret", "confirm_password": "new-secret"},
        )
        assert response.status_code == 401
        assert fake_auth.calls == []

    async def test_auth_service_rejection_passes_through(self, client, fake_auth):
        response = await client.post(
            "/api/v1/auth/update-password",
            json={"password": "correct-horse", "confirm_password": "correct-horse"},
            headers=auth_headers("supabase-owner"),
        )
        assert response.status_code == 400
        assert response.json() == {"error": "New password should be different from the old password."}


class TestSupabaseClientFlows:
    """The real supabase-py client builds provider URLs without network access."""

    async def test_each_oauth_flow_gets_its_own_challenge(self):
        adapter = SupabaseAuthService()
        redirect_to = get_settings().auth_redirect_url

        try:
            first = await adapter.get_oauth_url("google", redirect_to)
            second = await adapter.get_oauth_url("google", redirect_to)
        finally:
            await cleanup_supabase()

        assert first.code_verifier != second.code_verifier
        for flow in (first, second):
            query = parse_qs(urlparse(flow.url).query)
            assert query["code_challenge"] == [generate_pkce_challenge(flow.code_verifier)]
            assert query["code_challenge_method"] == ["s256"]
            assert query["provider"] == ["google"]


class TestSignOut:
    async def test_sign_out_revokes_and_clears_cookie(self, client, user, fake_auth):
        response = await client.post("/api/v1/auth/sign-out", headers=user["headers"])

        assert response.status_code == 200
        assert response.json() == {"success": "Signed out"}
        token = user["headers"]["Authorization"].split(" ", 1)[1]
        assert fake_auth.calls == [("sign_out", token)]

    async def test_sign_out_without_session(self, client, fake_auth):
        response = await client.post("/api/v1/auth/sign-out")
        assert response.status_code == 200
        assert fake_auth.calls == []

# 📄 File: app/modules/identity/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# The check every protected page runs first: who is calling, and do we know them?
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies that extract the access token and resolve it into the
# AuthContext passed explicitly into every registry call.
# 🔗 Dependencies:
# FastAPI, IdentityService, app.shared.core.dependencies, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# Routers of every module

import logging
from typing import Optional

from fastapi import Depends, Request

from app.modules.identity.domain.services.identity_service import IdentityService
from app.shared.core.dependencies import AuthContext, extract_access_token
from app.shared.utils.logging import bind_user

logger = logging.getLogger(__name__)


def get_access_token(request: Request) -> Optional[str]:
    return extract_access_token(request)


async def get_auth_context(
    request: Request,
    token: Optional[str] = Depends(get_access_token),
    identity_service: IdentityService = Depends(),
) -> AuthContext:
    """
    Resolve the authenticated caller.

    Raises ``AuthenticationError`` (401) without a valid session and
    ``NotFoundError`` (404) when the users row is missing.
    """
    ctx = await identity_service.get_auth_context(token)
    request.state.user_id = ctx.user_id
    bind_user(ctx.user_id)
    return ctx

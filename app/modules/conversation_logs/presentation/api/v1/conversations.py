# 📄 File: app/modules/conversation_logs/presentation/api/v1/conversations.py
# 🧭 Purpose (Layman Explanation):
# The web endpoint for a recipient's recent call and text transcripts.
#
# 🔗 Dependencies:
# - FastAPI router, ConversationService, get_auth_context
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /recipients)

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.modules.conversation_logs.domain.services.conversation_service import ConversationService
from app.modules.conversation_logs.presentation.api.schemas.conversation_schemas import ConversationLogResponse
from app.modules.identity.presentation.dependencies import get_auth_context
from app.shared.core.dependencies import AuthContext

conversations_router = APIRouter()


@conversations_router.get(
    "/{recipient_id}/conversations",
    response_model=ConversationLogResponse,
    summary="Recent conversations",
    description="Answered calls and texts for one recipient, newest first",
    responses={404: {"description": "Recipient not found"}},
)
async def list_conversations(
    recipient_id: int,
    limit: Optional[int] = Query(None, ge=1, le=100, description="Entries per channel"),
    ctx: AuthContext = Depends(get_auth_context),
    conversation_service: ConversationService = Depends(),
) -> ConversationLogResponse:
    log = await conversation_service.list_conversations(ctx, recipient_id, limit)
    return ConversationLogResponse.from_domain(log)

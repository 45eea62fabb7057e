# 📄 File: app/modules/conversation_logs/domain/services/conversation_service.py
# 🧭 Purpose (Layman Explanation):
# Shows a recipient's recent calls and texts, but only to the family member who owns them.
# 🧪 Purpose (Technical Summary):
# Ownership check through RecipientRepository, then the two channel listings.
# 🔗 Dependencies:
# ConversationRepository, RecipientRepository
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/conversations.py

from typing import Optional

from fastapi import Depends

from ..models.conversation import ConversationLog
from ..repositories.conversation_repository import ConversationRepository
from app.modules.care_recipients.domain.repositories.recipient_repository import RecipientRepository
from app.shared.config.settings import get_settings
from app.shared.core.dependencies import AuthContext
from app.shared.core.exceptions import NotFoundError


class ConversationService:
    def __init__(
        self,
        conversation_repository: ConversationRepository = Depends(),
        recipient_repository: RecipientRepository = Depends(),
    ):
        self.conversation_repository = conversation_repository
        self.recipient_repository = recipient_repository

    async def list_conversations(
        self,
        ctx: AuthContext,
        recipient_id: int,
        limit: Optional[int] = None
    ) -> ConversationLog:
        recipient = await self.recipient_repository.get_for_user(recipient_id, ctx.user_id)
        if recipient is None:
            raise NotFoundError("Recipient not found", resource_type="recipient", resource_id=recipient_id)

        limit = limit or get_settings().CONVERSATION_LOG_LIMIT
        return ConversationLog(
            calls=await self.conversation_repository.list_calls(recipient_id, limit),
            texts=await self.conversation_repository.list_texts(recipient_id, limit),
        )

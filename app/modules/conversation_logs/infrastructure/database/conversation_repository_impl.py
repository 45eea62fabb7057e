# 📄 File: app/modules/conversation_logs/infrastructure/database/conversation_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads the most recent answered calls and texts for a recipient.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ConversationRepository joining each row to its reminder.
#
# 🔗 Dependencies:
# - ConversationRepository interface, scheduled message models, ReminderModel
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - conversation_service.py (via dependency override)

import logging
from typing import List, Type, Union

from fastapi import Depends
from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.conversation_logs.domain.models.conversation import ConversationEntry, ReminderSummary
from app.modules.conversation_logs.domain.repositories.conversation_repository import ConversationRepository
from app.modules.conversation_logs.infrastructure.database.models import ScheduledCallModel, ScheduledTextModel
from app.modules.reminders.infrastructure.database.models import ReminderModel
from app.shared.core.exceptions import RepositoryError
from app.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

ScheduledModel = Union[Type[ScheduledCallModel], Type[ScheduledTextModel]]


class ConversationRepositoryImpl(ConversationRepository):
    """
    SQLAlchemy implementation of the ConversationRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def list_calls(self, parent_id: int, limit: int) -> List[ConversationEntry]:
        return await self._list(ScheduledCallModel, parent_id, limit, "call")

    async def list_texts(self, parent_id: int, limit: int) -> List[ConversationEntry]:
        return await self._list(ScheduledTextModel, parent_id, limit, "text")

    async def _list(self, model: ScheduledModel, parent_id: int, limit: int, kind: str) -> List[ConversationEntry]:
        try:
            stmt = (
                select(model, ReminderModel)
                .outerjoin(ReminderModel, ReminderModel.id == model.reminder_id)
                .where(and_(model.parent_id == parent_id, model.ai_agent_response.isnot(None)))
                .order_by(model.scheduled_time.desc())
                .limit(limit)
            )
            result = await self._session.execute(stmt)

            entries = []
            for row, reminder in result.all():
                entry = ConversationEntry.model_validate(row)
                if reminder is not None:
                    entry.reminder = ReminderSummary.model_validate(reminder)
                entries.append(entry)
            return entries

        except SQLAlchemyError as e:
            logger.error(f"Database error listing {kind} conversations for recipient {parent_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to list {kind} conversations: {str(e)}",
                operation=f"list_{kind}s",
                entity="conversation"
            ) from e

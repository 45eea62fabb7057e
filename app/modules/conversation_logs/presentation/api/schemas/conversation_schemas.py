# 📄 File: app/modules/conversation_logs/presentation/api/schemas/conversation_schemas.py
# 🧭 Purpose (Layman Explanation):
# How past calls and texts are shown.
# 🔗 Dependencies:
# pydantic, conversation domain models
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/conversations.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from app.modules.conversation_logs.domain.models.conversation import (
    ConversationEntry,
    ConversationLog,
    ReminderSummary,
)


class ConversationEntryResponse(BaseModel):
    id: int
    reminder_id: Optional[int] = None
    scheduled_time: datetime
    last_attempt_time: Optional[datetime] = None
    display_time: datetime
    status: Optional[str] = None
    ai_agent_response: str
    reminder: Optional[ReminderSummary] = None

    @classmethod
    def from_domain(cls, entry: ConversationEntry) -> "ConversationEntryResponse":
        return cls(
            **entry.model_dump(exclude={"parent_id"}),
            display_time=entry.display_time,
        )


class ConversationLogResponse(BaseModel):
    calls: List[ConversationEntryResponse]
    texts: List[ConversationEntryResponse]

    @classmethod
    def from_domain(cls, log: ConversationLog) -> "ConversationLogResponse":
        return cls(
            calls=[ConversationEntryResponse.from_domain(entry) for entry in log.calls],
            texts=[ConversationEntryResponse.from_domain(entry) for entry in log.texts],
        )

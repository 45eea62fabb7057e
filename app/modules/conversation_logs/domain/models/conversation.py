# 📄 File: app/modules/conversation_logs/domain/models/conversation.py
# 🧭 Purpose (Layman Explanation):
# One past reminder call or text and what the assistant said on it.
# 🧪 Purpose (Technical Summary):
# Conversation entry read from the scheduled call/text tables with its reminder summary.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# conversation repositories, conversation_service.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ReminderSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    category: str
    delivery_method: str


class ConversationEntry(BaseModel):
    """A delivered call or text with the assistant's transcript."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    parent_id: int
    reminder_id: Optional[int] = None
    scheduled_time: datetime
    last_attempt_time: Optional[datetime] = None
    status: Optional[str] = None
    ai_agent_response: str
    reminder: Optional[ReminderSummary] = None

    @property
    def display_time(self) -> datetime:
        return self.last_attempt_time or self.scheduled_time


class ConversationLog(BaseModel):
    calls: List[ConversationEntry]
    texts: List[ConversationEntry]

# 📄 File: app/modules/conversation_logs/domain/repositories/conversation_repository.py
# 🧭 Purpose (Layman Explanation):
# The contract for reading past calls and texts.
# 🧪 Purpose (Technical Summary):
# Read-only repository interface over the scheduled call and text tables.
# 🔗 Dependencies:
# Domain models, abc
# 🔄 Connected Modules / Calls From:
# conversation_service.py, conversation_repository_impl.py

from abc import ABC, abstractmethod
from typing import List

from ..models.conversation import ConversationEntry


class ConversationRepository(ABC):
    """
    Repository interface for delivered call and text conversations.

    Only rows with an assistant response are returned, newest ``scheduled_time`` first.
    """

    @abstractmethod
    async def list_calls(self, parent_id: int, limit: int) -> List[ConversationEntry]:
        pass

    @abstractmethod
    async def list_texts(self, parent_id: int, limit: int) -> List[ConversationEntry]:
        pass

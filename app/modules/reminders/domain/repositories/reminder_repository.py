# 📄 File: app/modules/reminders/domain/repositories/reminder_repository.py
# 🧭 Purpose (Layman Explanation):
# The contract for storing and finding reminders.
# 🧪 Purpose (Technical Summary):
# Repository interface for Reminder entities, with owner-scoped reads through the
# recipient's user id.
# 🔗 Dependencies:
# Domain models, abc
# 🔄 Connected Modules / Calls From:
# reminder_service.py, calendar_service.py, reminder_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.reminder import Reminder, ReminderWithRecipient


class ReminderRepository(ABC):
    """
    Repository interface for Reminder entity data access operations.
    """

    @abstractmethod
    async def get_for_user(self, reminder_id: int, user_id: int) -> Optional[Reminder]:
        """Get a reminder only if its recipient belongs to ``user_id``."""
        pass

    @abstractmethod
    async def list_for_recipient(self, parent_id: int) -> List[Reminder]:
        pass

    @abstractmethod
    async def list_for_user(
        self,
        user_id: int,
        delivery_method: Optional[str] = None,
        parent_id: Optional[int] = None,
    ) -> List[ReminderWithRecipient]:
        """Reminders across all of the user's recipients, optionally filtered."""
        pass

    @abstractmethod
    async def create(self, reminder: Reminder) -> Reminder:
        pass

    @abstractmethod
    async def update(self, reminder: Reminder) -> Optional[Reminder]:
        pass

    @abstractmethod
    async def delete(self, reminder_id: int) -> bool:
        pass

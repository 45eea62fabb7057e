# 📄 File: app/modules/care_recipients/domain/repositories/recipient_repository.py
# 🧭 Purpose (Layman Explanation):
# The contract for storing and finding care recipients, always within one user's account.
# 🧪 Purpose (Technical Summary):
# Repository interface for Recipient entities. Every read and write is scoped by owner.
# 🔗 Dependencies:
# Domain models (Recipient), abc
# 🔄 Connected Modules / Calls From:
# recipient_service.py, reminder_service.py, device_service.py, calendar and conversation services

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.recipient import Recipient


class RecipientRepository(ABC):
    """
    Repository interface for Recipient entity data access operations.
    """

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[Recipient]:
        """Recipients owned by ``user_id``, ordered by name ascending."""
        pass

    @abstractmethod
    async def get_for_user(self, recipient_id: int, user_id: int) -> Optional[Recipient]:
        """
        Get a recipient only if ``user_id`` owns it.

        Returns:
            Recipient if found and owned, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, recipient: Recipient) -> Recipient:
        pass

    @abstractmethod
    async def update(self, recipient: Recipient) -> Optional[Recipient]:
        """
        Update name, phone and timezone of the row matching ``(id, user_id)``.

        Returns:
            Updated Recipient, or None when no owned row matched
        """
        pass

# 📄 File: app/modules/caregivers/domain/repositories/caregiver_repository.py
# 🧭 Purpose (Layman Explanation):
# The contract for storing caregivers and the links between caregivers and family members.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for the global Caregiver entity and the per-user CaregiverLink.
# 🔗 Dependencies:
# Domain models, abc
# 🔄 Connected Modules / Calls From:
# caregiver_service.py, caregiver_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.caregiver import Caregiver, CaregiverLink, LinkedCaregiver


class CaregiverRepository(ABC):
    """
    Repository interface for Caregiver entity data access operations.
    """

    @abstractmethod
    async def get_by_id(self, caregiver_id: int) -> Optional[Caregiver]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Caregiver]:
        """Exact-match lookup on the de-duplication key."""
        pass

    @abstractmethod
    async def create(self, caregiver: Caregiver) -> Caregiver:
        """
        Raises:
            DuplicateResourceError: If the email is already taken
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def update(self, caregiver: Caregiver) -> Optional[Caregiver]:
        """Update the shared fields; None when the caregiver does not exist."""
        pass

    @abstractmethod
    async def delete(self, caregiver_id: int) -> bool:
        """Hard delete; False when no row matched."""
        pass


class CaregiverLinkRepository(ABC):
    """
    Repository interface for user/caregiver links.
    """

    @abstractmethod
    async def get_link(self, user_id: int, caregiver_id: int) -> Optional[CaregiverLink]:
        pass

    @abstractmethod
    async def create_link(self, link: CaregiverLink) -> CaregiverLink:
        """
        Raises:
            DuplicateResourceError: If the (user, caregiver) pair is already linked
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def update_access_level(self, link_id: int, access_level: str) -> Optional[CaregiverLink]:
        pass

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[LinkedCaregiver]:
        """Caregivers linked to ``user_id`` with link data, ordered by caregiver name."""
        pass

# 📄 File: app/modules/identity/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving and finding user accounts without saying which database is used.
# 🧪 Purpose (Technical Summary):
# Repository interface for User entities following the Repository pattern.
# 🔗 Dependencies:
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From:
# identity_service.py, presentation dependencies, user_repository_impl.py

from abc import ABC, abstractmethod
from typing import Optional

from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Concrete implementations live in the infrastructure layer and return domain entities.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Raises:
            DuplicateResourceError: If a user with the same supabase_id exists
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by internal id."""
        pass

    @abstractmethod
    async def get_by_supabase_id(self, supabase_id: str) -> Optional[User]:
        """
        Get user by the external auth subject.

        Returns:
            User entity if found, None otherwise
        """
        pass

# 📄 File: app/modules/identity/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves and finds user accounts in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of UserRepository with domain/model mapping and
# repository-level error translation.
#
# 🔗 Dependencies:
# - app.modules.identity.domain.repositories.user_repository (interface)
# - app.modules.identity.infrastructure.database.models (UserModel)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - app.modules.identity.domain.services.identity_service
# - app.main (dependency override registration)

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.identity.domain.models.user import User
from app.modules.identity.domain.repositories.user_repository import UserRepository
from app.modules.identity.infrastructure.database.models import UserModel
from app.shared.core.exceptions import DuplicateResourceError, RepositoryError
from app.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, user: User) -> User:
        try:
            user_model = self._domain_to_model(user)

            self._session.add(user_model)
            await self._session.flush()

            logger.info(f"Created user with ID: {user_model.id}")
            return self._model_to_domain(user_model)

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"User creation failed - supabase_id already exists: {user.supabase_id}")
            raise DuplicateResourceError(
                "User already exists",
                resource_type="user",
                field="supabase_id",
                value=user.supabase_id
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during user creation: {str(e)}")
            raise RepositoryError(
                f"Failed to create user: {str(e)}",
                operation="create",
                entity="user"
            ) from e

    async def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            user_model = await self._session.get(UserModel, user_id)
            return self._model_to_domain(user_model) if user_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve user: {str(e)}",
                operation="get_by_id",
                entity="user"
            ) from e

    async def get_by_supabase_id(self, supabase_id: str) -> Optional[User]:
        try:
            stmt = select(UserModel).where(UserModel.supabase_id == supabase_id)
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()

            if user_model:
                logger.debug(f"Retrieved user by supabase_id: {supabase_id}")
                return self._model_to_domain(user_model)

            logger.debug(f"User not found by supabase_id: {supabase_id}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user by supabase_id {supabase_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve user: {str(e)}",
                operation="get_by_supabase_id",
                entity="user"
            ) from e

    def _model_to_domain(self, user_model: UserModel) -> User:
        return User.model_validate(user_model)

    def _domain_to_model(self, user: User) -> UserModel:
        return UserModel(
            supabase_id=user.supabase_id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone_number=user.phone_number,
            timezone=user.timezone,
        )

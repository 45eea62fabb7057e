# 📄 File: app/modules/caregivers/infrastructure/database/caregiver_link_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Keeps track of which caregivers are on which family member's list.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of CaregiverLinkRepository over ``user_caregivers``,
# including the joined caregiver listing.
#
# 🔗 Dependencies:
# - CaregiverLinkRepository interface, CaregiverModel, UserCaregiverModel
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - caregiver_service.py (via dependency override)

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.caregivers.domain.models.caregiver import Caregiver, CaregiverLink, LinkedCaregiver
from app.modules.caregivers.domain.repositories.caregiver_repository import CaregiverLinkRepository
from app.modules.caregivers.infrastructure.database.models import CaregiverModel, UserCaregiverModel
from app.shared.core.exceptions import DuplicateResourceError, RepositoryError
from app.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)


class CaregiverLinkRepositoryImpl(CaregiverLinkRepository):
    """
    SQLAlchemy implementation of the CaregiverLinkRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def get_link(self, user_id: int, caregiver_id: int) -> Optional[CaregiverLink]:
        try:
            stmt = select(UserCaregiverModel).where(
                and_(
                    UserCaregiverModel.user_id == user_id,
                    UserCaregiverModel.caregiver_id == caregiver_id
                )
            )
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            return CaregiverLink.model_validate(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving link {user_id}/{caregiver_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve caregiver link: {str(e)}",
                operation="get_link",
                entity="user_caregiver",
                details={"reason": str(e)}
            ) from e

    async def create_link(self, link: CaregiverLink) -> CaregiverLink:
        try:
            model = UserCaregiverModel(
                user_id=link.user_id,
                caregiver_id=link.caregiver_id,
                access_level=link.access_level,
                added_by=link.added_by,
            )
            self._session.add(model)
            await self._session.flush()

            logger.info(f"Linked caregiver {link.caregiver_id} to user {link.user_id}")
            return CaregiverLink.model_validate(model)

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Caregiver link already exists: {link.user_id}/{link.caregiver_id}")
            raise DuplicateResourceError(
                "This caregiver is already in your list",
                resource_type="user_caregiver",
                details={"reason": str(e.orig)}
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error linking caregiver: {str(e)}")
            raise RepositoryError(
                f"Failed to link caregiver: {str(e)}",
                operation="create_link",
                entity="user_caregiver",
                details={"reason": str(e)}
            ) from e

    async def update_access_level(self, link_id: int, access_level: str) -> Optional[CaregiverLink]:
        try:
            model = await self._session.get(UserCaregiverModel, link_id)
            if model is None:
                return None

            model.access_level = access_level
            await self._session.flush()
            return CaregiverLink.model_validate(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating access level of link {link_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update access level: {str(e)}",
                operation="update_access_level",
                entity="user_caregiver",
                details={"reason": str(e)}
            ) from e

    async def list_for_user(self, user_id: int) -> List[LinkedCaregiver]:
        try:
            stmt = (
                select(CaregiverModel, UserCaregiverModel)
                .join(UserCaregiverModel, UserCaregiverModel.caregiver_id == CaregiverModel.id)
                .where(UserCaregiverModel.user_id == user_id)
                .order_by(CaregiverModel.name.asc())
            )
            result = await self._session.execute(stmt)

            return [
                LinkedCaregiver(
                    caregiver=Caregiver.model_validate(caregiver_model),
                    link=CaregiverLink.model_validate(link_model),
                )
                for caregiver_model, link_model in result.all()
            ]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing caregivers for user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to list caregivers: {str(e)}",
                operation="list_for_user",
                entity="user_caregiver",
                details={"reason": str(e)}
            ) from e

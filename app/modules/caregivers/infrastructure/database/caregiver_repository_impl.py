# 📄 File: app/modules/caregivers/infrastructure/database/caregiver_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds, edits and removes caregivers in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of CaregiverRepository. Unique-email violations surface as
# DuplicateResourceError; other failures as RepositoryError with the cause in ``details``.
#
# 🔗 Dependencies:
# - CaregiverRepository interface, CaregiverModel
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - caregiver_service.py (via dependency override)

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.caregivers.domain.models.caregiver import Caregiver
from app.modules.caregivers.domain.repositories.caregiver_repository import CaregiverRepository
from app.modules.caregivers.infrastructure.database.models import CaregiverModel
from app.shared.core.exceptions import DuplicateResourceError, RepositoryError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class CaregiverRepositoryImpl(CaregiverRepository):
    """
    SQLAlchemy implementation of the CaregiverRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def get_by_id(self, caregiver_id: int) -> Optional[Caregiver]:
        try:
            model = await self._session.get(CaregiverModel, caregiver_id)
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving caregiver {caregiver_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve caregiver: {str(e)}",
                operation="get_by_id",
                entity="caregiver",
                details={"reason": str(e)}
            ) from e

    async def get_by_email(self, email: str) -> Optional[Caregiver]:
        try:
            stmt = select(CaregiverModel).where(CaregiverModel.email == email)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving caregiver by email {email}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve caregiver by email: {str(e)}",
                operation="get_by_email",
                entity="caregiver",
                details={"reason": str(e)}
            ) from e

    async def create(self, caregiver: Caregiver) -> Caregiver:
        try:
            model = CaregiverModel(
                name=caregiver.name,
                email=caregiver.email,
                phone_number=caregiver.phone_number,
                role=caregiver.role,
                notes=caregiver.notes,
            )
            self._session.add(model)
            await self._session.flush()

            logger.info(f"Created caregiver with ID: {model.id}")
            return self._model_to_domain(model)

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Caregiver creation failed - email already exists: {caregiver.email}")
            raise DuplicateResourceError(
                "A caregiver with this email already exists",
                resource_type="caregiver",
                field="email",
                value=caregiver.email,
                details={"reason": str(e.orig)}
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during caregiver creation: {str(e)}")
            raise RepositoryError(
                f"Failed to create caregiver: {str(e)}",
                operation="create",
                entity="caregiver",
                details={"reason": str(e)}
            ) from e

    async def update(self, caregiver: Caregiver) -> Optional[Caregiver]:
        try:
            model = await self._session.get(CaregiverModel, caregiver.id)
            if model is None:
                return None

            model.name = caregiver.name
            model.email = caregiver.email
            model.phone_number = caregiver.phone_number
            model.role = caregiver.role
            model.notes = caregiver.notes
            model.updated_at = utc_now()
            await self._session.flush()

            logger.info(f"Updated caregiver {model.id}")
            return self._model_to_domain(model)

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Caregiver update failed - email already exists: {caregiver.email}")
            raise DuplicateResourceError(
                "A caregiver with this email already exists",
                resource_type="caregiver",
                field="email",
                value=caregiver.email
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating caregiver {caregiver.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update caregiver: {str(e)}",
                operation="update",
                entity="caregiver",
                details={"reason": str(e)}
            ) from e

    async def delete(self, caregiver_id: int) -> bool:
        try:
            stmt = delete(CaregiverModel).where(CaregiverModel.id == caregiver_id)
            result = await self._session.execute(stmt)
            deleted = result.rowcount > 0

            if deleted:
                logger.info(f"Deleted caregiver {caregiver_id}")
            return deleted

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting caregiver {caregiver_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to delete caregiver: {str(e)}",
                operation="delete",
                entity="caregiver",
                details={"reason": str(e)}
            ) from e

    def _model_to_domain(self, model: CaregiverModel) -> Caregiver:
        return Caregiver.model_validate(model)

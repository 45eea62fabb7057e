# 📄 File: app/modules/care_recipients/infrastructure/database/recipient_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves and finds care recipients, only ever touching the caller's own rows.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of RecipientRepository; every statement filters on user_id.
#
# 🔗 Dependencies:
# - RecipientRepository interface, ParentModel
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - recipient_service.py and other modules' services (via dependency override)

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_recipients.domain.models.recipient import Recipient
from app.modules.care_recipients.domain.repositories.recipient_repository import RecipientRepository
from app.modules.care_recipients.infrastructure.database.models import ParentModel
from app.shared.core.exceptions import RepositoryError
from app.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)


class RecipientRepositoryImpl(RecipientRepository):
    """
    SQLAlchemy implementation of the RecipientRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def list_for_user(self, user_id: int) -> List[Recipient]:
        try:
            stmt = (
                select(ParentModel)
                .where(ParentModel.user_id == user_id)
                .order_by(ParentModel.name.asc())
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing recipients for user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to list recipients: {str(e)}",
                operation="list_for_user",
                entity="recipient"
            ) from e

    async def get_for_user(self, recipient_id: int, user_id: int) -> Optional[Recipient]:
        try:
            model = await self._get_owned_model(recipient_id, user_id)
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving recipient {recipient_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve recipient: {str(e)}",
                operation="get_for_user",
                entity="recipient"
            ) from e

    async def create(self, recipient: Recipient) -> Recipient:
        try:
            model = ParentModel(
                user_id=recipient.user_id,
                name=recipient.name,
                phone_number=recipient.phone_number,
                timezone=recipient.timezone,
            )
            self._session.add(model)
            await self._session.flush()

            logger.info(f"Created recipient {model.id} for user {recipient.user_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during recipient creation: {str(e)}")
            raise RepositoryError(
                f"Failed to create recipient: {str(e)}",
                operation="create",
                entity="recipient"
            ) from e

    async def update(self, recipient: Recipient) -> Optional[Recipient]:
        try:
            model = await self._get_owned_model(recipient.id, recipient.user_id)
            if model is None:
                return None

            model.name = recipient.name
            model.phone_number = recipient.phone_number
            model.timezone = recipient.timezone
            await self._session.flush()

            logger.info(f"Updated recipient {model.id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating recipient {recipient.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update recipient: {str(e)}",
                operation="update",
                entity="recipient"
            ) from e

    async def _get_owned_model(self, recipient_id: int, user_id: int) -> Optional[ParentModel]:
        stmt = select(ParentModel).where(
            and_(
                ParentModel.id == recipient_id,
                ParentModel.user_id == user_id
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _model_to_domain(self, model: ParentModel) -> Recipient:
        return Recipient.model_validate(model)

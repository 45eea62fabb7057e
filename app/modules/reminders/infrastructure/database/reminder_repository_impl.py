# 📄 File: app/modules/reminders/infrastructure/database/reminder_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds, edits and deletes reminders in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ReminderRepository. Owner-scoped reads join ``parents``
# on ``user_id``.
#
# 🔗 Dependencies:
# - ReminderRepository interface, ReminderModel, ParentModel
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - reminder_service.py, calendar_service.py (via dependency override)

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import and_, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_recipients.infrastructure.database.models import ParentModel
from app.modules.reminders.domain.models.reminder import WEEKDAY_FIELDS, Reminder, ReminderWithRecipient
from app.modules.reminders.domain.repositories.reminder_repository import ReminderRepository
from app.modules.reminders.infrastructure.database.models import ReminderModel
from app.shared.core.exceptions import RepositoryError
from app.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ["parent_id", "name", "category", "delivery_method", "time", "notes", *WEEKDAY_FIELDS]


class ReminderRepositoryImpl(ReminderRepository):
    """
    SQLAlchemy implementation of the ReminderRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def get_for_user(self, reminder_id: int, user_id: int) -> Optional[Reminder]:
        try:
            stmt = (
                select(ReminderModel)
                .join(ParentModel, ParentModel.id == ReminderModel.parent_id)
                .where(
                    and_(
                        ReminderModel.id == reminder_id,
                        ParentModel.user_id == user_id
                    )
                )
            )
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving reminder {reminder_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve reminder: {str(e)}",
                operation="get_for_user",
                entity="reminder"
            ) from e

    async def list_for_recipient(self, parent_id: int) -> List[Reminder]:
        try:
            stmt = (
                select(ReminderModel)
                .where(ReminderModel.parent_id == parent_id)
                .order_by(ReminderModel.id.asc())
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing reminders for recipient {parent_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to list reminders: {str(e)}",
                operation="list_for_recipient",
                entity="reminder"
            ) from e

    async def list_for_user(
        self,
        user_id: int,
        delivery_method: Optional[str] = None,
        parent_id: Optional[int] = None,
    ) -> List[ReminderWithRecipient]:
        try:
            conditions = [ParentModel.user_id == user_id]
            if delivery_method:
                conditions.append(ReminderModel.delivery_method == delivery_method)
            if parent_id is not None:
                conditions.append(ReminderModel.parent_id == parent_id)

            stmt = (
                select(ReminderModel, ParentModel.name)
                .join(ParentModel, ParentModel.id == ReminderModel.parent_id)
                .where(and_(*conditions))
                .order_by(ReminderModel.id.asc())
            )
            result = await self._session.execute(stmt)

            return [
                ReminderWithRecipient(
                    reminder=self._model_to_domain(model),
                    recipient_name=recipient_name,
                )
                for model, recipient_name in result.all()
            ]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing reminders for user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to list reminders: {str(e)}",
                operation="list_for_user",
                entity="reminder"
            ) from e

    async def create(self, reminder: Reminder) -> Reminder:
        try:
            model = ReminderModel(**reminder.model_dump(include=set(EDITABLE_FIELDS)))
            self._session.add(model)
            await self._session.flush()

            logger.info(f"Created reminder {model.id} for recipient {reminder.parent_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during reminder creation: {str(e)}")
            raise RepositoryError(
                f"Failed to create reminder: {str(e)}",
                operation="create",
                entity="reminder"
            ) from e

    async def update(self, reminder: Reminder) -> Optional[Reminder]:
        try:
            model = await self._session.get(ReminderModel, reminder.id)
            if model is None:
                return None

            for field, value in reminder.model_dump(include=set(EDITABLE_FIELDS)).items():
                setattr(model, field, value)
            await self._session.flush()

            logger.info(f"Updated reminder {model.id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating reminder {reminder.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update reminder: {str(e)}",
                operation="update",
                entity="reminder"
            ) from e

    async def delete(self, reminder_id: int) -> bool:
        try:
            stmt = delete(ReminderModel).where(ReminderModel.id == reminder_id)
            result = await self._session.execute(stmt)
            return result.rowcount > 0

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error deleting reminder {reminder_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to delete reminder: {str(e)}",
                operation="delete",
                entity="reminder"
            ) from e

    def _model_to_domain(self, model: ReminderModel) -> Reminder:
        return Reminder.model_validate(model)

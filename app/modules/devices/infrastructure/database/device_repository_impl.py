# 📄 File: app/modules/devices/infrastructure/database/device_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves devices, changes their connection state and removes them.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of DeviceRepository. ``begin_sync`` commits on its own so the
# completion task, which runs in a separate session, sees the ``syncing`` state.
#
# 🔗 Dependencies:
# - DeviceRepository interface, DeviceModel, ParentModel
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - device_service.py (via dependency override)
# - app.modules.devices.infrastructure.tasks (explicit session)

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import and_, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_recipients.infrastructure.database.models import ParentModel
from app.modules.devices.domain.models.device import (
    Device,
    DeviceRecipient,
    DeviceStatus,
    DeviceWithRecipient,
)
from app.modules.devices.domain.repositories.device_repository import DeviceRepository
from app.modules.devices.infrastructure.database.models import DeviceModel
from app.shared.core.exceptions import RepositoryError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class DeviceRepositoryImpl(DeviceRepository):
    """
    SQLAlchemy implementation of the DeviceRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def list_for_user(self, user_id: int, parent_id: Optional[int] = None) -> List[DeviceWithRecipient]:
        try:
            conditions = [DeviceModel.user_id == user_id]
            if parent_id is not None:
                conditions.append(DeviceModel.parent_id == parent_id)

            stmt = (
                select(DeviceModel, ParentModel)
                .outerjoin(ParentModel, ParentModel.id == DeviceModel.parent_id)
                .where(and_(*conditions))
                .order_by(DeviceModel.created_at.desc())
            )
            result = await self._session.execute(stmt)

            return [
                DeviceWithRecipient(
                    device=self._model_to_domain(device_model),
                    recipient=DeviceRecipient.model_validate(parent_model) if parent_model else None,
                )
                for device_model, parent_model in result.all()
            ]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing devices for user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to list devices: {str(e)}",
                operation="list_for_user",
                entity="device"
            ) from e

    async def get_for_user(self, device_id: str, user_id: int) -> Optional[Device]:
        try:
            stmt = select(DeviceModel).where(
                and_(DeviceModel.id == device_id, DeviceModel.user_id == user_id)
            )
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving device {device_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve device: {str(e)}",
                operation="get_for_user",
                entity="device"
            ) from e

    async def create(self, device: Device) -> Device:
        try:
            model = DeviceModel(
                parent_id=device.parent_id,
                user_id=device.user_id,
                device_type=device.device_type,
                device_model=device.device_model,
                device_name=device.device_name,
                status=device.status,
            )
            self._session.add(model)
            await self._session.flush()

            logger.info(f"Created device {model.id} for recipient {device.parent_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during device creation: {str(e)}")
            raise RepositoryError(
                f"Failed to create device: {str(e)}",
                operation="create",
                entity="device"
            ) from e

    async def update_status(
        self,
        device_id: str,
        status: str,
        last_sync: Optional[datetime] = None
    ) -> Optional[Device]:
        try:
            model = await self._session.get(DeviceModel, device_id)
            if model is None:
                return None

            model.status = status
            if last_sync is not None:
                model.last_sync = last_sync
            model.updated_at = utc_now()
            await self._session.flush()

            logger.info(f"Device {device_id} status set to {status}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating device {device_id} status: {str(e)}")
            raise RepositoryError(
                f"Failed to update device status: {str(e)}",
                operation="update_status",
                entity="device"
            ) from e

    async def begin_sync(self, device_id: str) -> Optional[Device]:
        device = await self.update_status(device_id, DeviceStatus.SYNCING.value)
        if device is None:
            return None

        try:
            await self._session.commit()
            return device

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error committing sync start for device {device_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to start device sync: {str(e)}",
                operation="begin_sync",
                entity="device"
            ) from e

    async def complete_sync(self, device_id: str, battery_level: int) -> Optional[Device]:
        try:
            model = await self._session.get(DeviceModel, device_id)
            if model is None:
                return None

            now = utc_now()
            model.status = DeviceStatus.CONNECTED.value
            model.last_sync = now
            model.battery_level = battery_level
            model.updated_at = now
            await self._session.flush()

            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error completing sync of device {device_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to complete device sync: {str(e)}",
                operation="complete_sync",
                entity="device"
            ) from e

    async def delete(self, device_id: str) -> bool:
        try:
            stmt = delete(DeviceModel).where(DeviceModel.id == device_id)
            result = await self._session.execute(stmt)
            return result.rowcount > 0

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error deleting device {device_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to delete device: {str(e)}",
                operation="delete",
                entity="device"
            ) from e

    def _model_to_domain(self, model: DeviceModel) -> Device:
        return Device.model_validate(model)

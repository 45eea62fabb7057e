# 📄 File: app/modules/devices/domain/services/device_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for a recipient's devices: adding one, switching its status, removing it
# and starting a sync.
# 🧪 Purpose (Technical Summary):
# Domain service for the device registry. Every operation is scoped to the caller's own
# devices and recipients. Starting a sync commits ``syncing`` and hands back the previous
# status so the completion task can restore it.
# 🔗 Dependencies:
# DeviceRepository, RecipientRepository, AuthContext
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/devices.py

import logging
from typing import List, Optional

from fastapi import Depends

from ..models.device import Device, DeviceRecipient, DeviceStatus, DeviceWithRecipient
from ..repositories.device_repository import DeviceRepository
from app.modules.care_recipients.domain.repositories.recipient_repository import RecipientRepository
from app.shared.core.dependencies import AuthContext
from app.shared.core.exceptions import NotFoundError, RepositoryError, ValidationError
from app.shared.utils.helpers import utc_now
from app.shared.utils.validators import missing_fields, validate_choice

logger = logging.getLogger(__name__)

DEVICE_STATUSES = [status.value for status in DeviceStatus]


class DeviceService:
    """
    Domain service for device registry business logic.
    """

    def __init__(
        self,
        device_repository: DeviceRepository = Depends(),
        recipient_repository: RecipientRepository = Depends(),
    ):
        self.device_repository = device_repository
        self.recipient_repository = recipient_repository

    async def list_devices(
        self,
        ctx: AuthContext,
        recipient_id: Optional[int] = None
    ) -> List[DeviceWithRecipient]:
        return await self.device_repository.list_for_user(ctx.user_id, parent_id=recipient_id)

    async def add_device(
        self,
        ctx: AuthContext,
        recipient_id: Optional[int],
        device_type: Optional[str],
        device_name: Optional[str],
        device_model: Optional[str] = None,
    ) -> DeviceWithRecipient:
        """Register a device for an owned recipient. New devices start ``disconnected``."""
        missing = missing_fields({"device_type": device_type, "device_name": device_name})
        if missing:
            raise ValidationError("Device type and name are required", field=missing[0])
        if recipient_id is None:
            raise ValidationError("Recipient is required", field="recipientId")

        recipient = await self.recipient_repository.get_for_user(recipient_id, ctx.user_id)
        if recipient is None:
            raise NotFoundError("Recipient not found", resource_type="recipient", resource_id=recipient_id)

        try:
            device = await self.device_repository.create(
                Device(
                    parent_id=recipient_id,
                    user_id=ctx.user_id,
                    device_type=device_type.strip(),
                    device_name=device_name.strip(),
                    device_model=(device_model or "").strip() or None,
                    status=DeviceStatus.DISCONNECTED.value,
                )
            )
        except RepositoryError as e:
            logger.error(f"Error adding device for recipient {recipient_id}: {e.message}")
            raise RepositoryError("Failed to add device", operation="create", entity="device") from e

        return DeviceWithRecipient(
            device=device,
            recipient=DeviceRecipient(
                id=recipient.id,
                name=recipient.name,
                phone_number=recipient.phone_number,
            ),
        )

    async def update_device_status(self, ctx: AuthContext, device_id: str, status: Optional[str]) -> Device:
        """Set a device's status; ``connected`` also stamps ``last_sync``."""
        result = validate_choice(status, DEVICE_STATUSES, "status")
        if not result.is_valid:
            raise ValidationError(result.first_error, field="status", value=status)

        await self._require_device(ctx, device_id)
        last_sync = utc_now() if status == DeviceStatus.CONNECTED.value else None

        try:
            device = await self.device_repository.update_status(device_id, status, last_sync=last_sync)
        except RepositoryError as e:
            logger.error(f"Error updating status of device {device_id}: {e.message}")
            raise RepositoryError(
                "Failed to update device status",
                operation="update_status",
                entity="device"
            ) from e

        if device is None:
            raise NotFoundError("Device not found", resource_type="device", resource_id=device_id)
        return device

    async def remove_device(self, ctx: AuthContext, device_id: str) -> None:
        await self._require_device(ctx, device_id)

        try:
            deleted = await self.device_repository.delete(device_id)
        except RepositoryError as e:
            logger.error(f"Error removing device {device_id}: {e.message}")
            raise RepositoryError("Failed to remove device", operation="delete", entity="device") from e

        if not deleted:
            raise NotFoundError("Device not found", resource_type="device", resource_id=device_id)

    async def start_sync(self, ctx: AuthContext, device_id: str) -> str:
        """
        Mark a device ``syncing`` and commit.

        Returns:
            The status the device had before the sync, for restoring on failure
        """
        device = await self._require_device(ctx, device_id)
        previous_status = device.status

        try:
            started = await self.device_repository.begin_sync(device_id)
        except RepositoryError as e:
            logger.error(f"Error starting sync of device {device_id}: {e.message}")
            raise RepositoryError("Failed to sync device", operation="begin_sync", entity="device") from e

        if started is None:
            raise NotFoundError("Device not found", resource_type="device", resource_id=device_id)
        return previous_status

    async def _require_device(self, ctx: AuthContext, device_id: str) -> Device:
        device = await self.device_repository.get_for_user(device_id, ctx.user_id)
        if device is None:
            raise NotFoundError("Device not found", resource_type="device", resource_id=device_id)
        return device

# 📄 File: app/modules/devices/infrastructure/tasks.py
# 🧭 Purpose (Layman Explanation):
# Finishes a device sync a moment after it was started: marks the device connected and
# records a fresh battery reading. If that fails, the device goes back to how it was.
#
# 🧪 Purpose (Technical Summary):
# Background job scheduled through FastAPI BackgroundTasks after the request committed
# the ``syncing`` state. Runs in its own session and reverts to the previous status on
# failure.
#
# 🔗 Dependencies:
# - asyncio, random
# - app.shared.infrastructure.database (database_session)
# - DeviceRepositoryImpl
#
# 🔄 Connected Modules / Calls From:
# - app.modules.devices.presentation.api.v1.devices (sync endpoint)

import asyncio
import random

from app.modules.devices.infrastructure.database.device_repository_impl import DeviceRepositoryImpl
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import CareAppException
from app.shared.infrastructure.database.session import database_session
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


async def complete_device_sync(device_id: str, previous_status: str) -> None:
    """
    Complete a device sync after the configured delay.

    Args:
        device_id: Device being synced
        previous_status: Status before the sync started, restored on failure
    """
    await asyncio.sleep(get_settings().DEVICE_SYNC_DELAY_SECONDS)

    try:
        async with database_session() as session:
            device = await DeviceRepositoryImpl(session).complete_sync(
                device_id, battery_level=random.randint(0, 100)
            )
    except CareAppException as e:
        logger.error(f"Device sync failed for {device_id}: {e.message}")
        await _revert_status(device_id, previous_status)
        return

    if device is None:
        logger.warning(f"Device {device_id} was removed before its sync completed")
        return

    logger.log_business_event(
        "device_synced",
        f"Device sync completed with battery at {device.battery_level}%",
        entity_id=device_id,
        entity_type="device",
    )


async def _revert_status(device_id: str, previous_status: str) -> None:
    try:
        async with database_session() as session:
            await DeviceRepositoryImpl(session).update_status(device_id, previous_status)
        logger.log_business_event(
            "device_sync_reverted",
            f"Device status restored to {previous_status}",
            entity_id=device_id,
            entity_type="device",
        )
    except CareAppException as e:
        logger.error(f"Could not restore status of device {device_id}: {e.message}")

# 📄 File: app/modules/devices/domain/repositories/device_repository.py
# 🧭 Purpose (Layman Explanation):
# The contract for storing devices and changing their connection state.
# 🧪 Purpose (Technical Summary):
# Repository interface for Device entities including the two sync transitions.
# 🔗 Dependencies:
# Domain models, abc
# 🔄 Connected Modules / Calls From:
# device_service.py, device sync task, device_repository_impl.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.device import Device, DeviceWithRecipient


class DeviceRepository(ABC):
    """
    Repository interface for Device entity data access operations.
    """

    @abstractmethod
    async def list_for_user(self, user_id: int, parent_id: Optional[int] = None) -> List[DeviceWithRecipient]:
        """Devices newest first, each with its recipient summary."""
        pass

    @abstractmethod
    async def get_for_user(self, device_id: str, user_id: int) -> Optional[Device]:
        pass

    @abstractmethod
    async def create(self, device: Device) -> Device:
        pass

    @abstractmethod
    async def update_status(
        self,
        device_id: str,
        status: str,
        last_sync: Optional[datetime] = None
    ) -> Optional[Device]:
        pass

    @abstractmethod
    async def begin_sync(self, device_id: str) -> Optional[Device]:
        """
        Set status to ``syncing`` and commit immediately.

        The commit makes the state visible to the completion task before the request ends.
        """
        pass

    @abstractmethod
    async def complete_sync(self, device_id: str, battery_level: int) -> Optional[Device]:
        """Set ``connected``, ``last_sync = now`` and the reported battery level."""
        pass

    @abstractmethod
    async def delete(self, device_id: str) -> bool:
        pass

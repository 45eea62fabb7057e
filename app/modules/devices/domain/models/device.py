# 📄 File: app/modules/devices/domain/models/device.py
# 🧭 Purpose (Layman Explanation):
# Describes a recipient's device: what it is, its name, whether it is connected and its battery.
# 🧪 Purpose (Technical Summary):
# Device domain model, connection status enum and the recipient summary shown with each device.
# 🔗 Dependencies:
# pydantic, enum
# 🔄 Connected Modules / Calls From:
# device_service.py, device repositories, sync task

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DeviceStatus(str, Enum):
    DISCONNECTED = "disconnected"
    SYNCING = "syncing"
    CONNECTED = "connected"


class Device(BaseModel):
    """Device belonging to one recipient, owned by the recipient's user."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    parent_id: int
    user_id: int
    device_type: str
    device_model: Optional[str] = None
    device_name: str
    status: str = DeviceStatus.DISCONNECTED.value
    last_sync: Optional[datetime] = None
    battery_level: Optional[int] = Field(default=None, ge=0, le=100)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DeviceRecipient(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    phone_number: str


class DeviceWithRecipient(BaseModel):
    device: Device
    recipient: Optional[DeviceRecipient] = None

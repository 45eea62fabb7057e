# 📄 File: app/modules/devices/presentation/api/schemas/device_schemas.py
# 🧭 Purpose (Layman Explanation):
# What the device forms send and how a device is shown.
# 🧪 Purpose (Technical Summary):
# Request/response schemas for the device registry.
# 🔗 Dependencies:
# pydantic, device domain models
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/devices.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.devices.domain.models.device import Device, DeviceRecipient, DeviceWithRecipient


class DeviceFormRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipient_id: Optional[int] = Field(default=None, alias="recipientId")
    device_type: Optional[str] = None
    device_name: Optional[str] = None
    device_model: Optional[str] = None


class DeviceStatusRequest(BaseModel):
    status: Optional[str] = None


class DeviceResponse(BaseModel):
    id: str
    parent_id: int
    device_type: str
    device_model: Optional[str] = None
    device_name: str
    status: str
    last_sync: Optional[datetime] = None
    battery_level: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    recipient: Optional[DeviceRecipient] = None

    @classmethod
    def from_domain(cls, device: Device, recipient: Optional[DeviceRecipient] = None) -> "DeviceResponse":
        return cls(
            **device.model_dump(exclude={"user_id"}),
            recipient=recipient,
        )

    @classmethod
    def from_listing(cls, item: DeviceWithRecipient) -> "DeviceResponse":
        return cls.from_domain(item.device, item.recipient)

from .device import Device, DeviceRecipient, DeviceStatus, DeviceWithRecipient

__all__ = ["Device", "DeviceRecipient", "DeviceStatus", "DeviceWithRecipient"]

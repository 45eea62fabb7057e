"""
Tests for device registration, status changes and the background sync.
"""
from app.modules.devices.infrastructure import tasks
from app.modules.devices.infrastructure.database.device_repository_impl import DeviceRepositoryImpl
from app.modules.devices.infrastructure.database.models import DeviceModel
from app.modules.devices.presentation.api.v1 import devices as devices_api
from app.shared.core.exceptions import RepositoryError
from tests.support import fetch_all


async def _add_device(client, headers, recipient_id, **overrides):
    form = {
        "recipientId": recipient_id,
        "device_type": "smart_speaker",
        "device_name": "Kitchen speaker",
        "device_model": "Echo Dot",
    }
    form.update(overrides)
    return await client.post("/api/v1/devices", json=form, headers=headers)


async def _device(device_id):
    devices = {device.id: device for device in await fetch_all(DeviceModel)}
    return devices.get(device_id)


class TestAddDevice:
    async def test_add_device(self, client, user, recipient):
        response = await _add_device(client, user["headers"], recipient["id"])

        assert response.status_code == 200
        body = response.json()
        assert body["success"] == "Device added successfully"
        data = body["data"]
        assert data["status"] == "disconnected"
        assert data["parent_id"] == recipient["id"]
        assert data["recipient"] == {
            "id": recipient["id"],
            "name": "Grandma Rose",
            "phone_number": "+1_5551234567",
        }
        assert len(data["id"]) == 36

        stored = await _device(data["id"])
        assert stored.user_id == user["id"]

    async def test_type_and_name_required(self, client, user, recipient):
        response = await _add_device(client, user["headers"], recipient["id"], device_name=" ")
        assert response.status_code == 422
        assert response.json() == {"error": "Device type and name are required"}

    async def test_recipient_required(self, client, user):
        response = await _add_device(client, user["headers"], None)
        assert response.status_code == 422
        assert response.json() == {"error": "Recipient is required"}

    async def test_recipient_of_another_user(self, client, other_user, recipient):
        response = await _add_device(client, other_user["headers"], recipient["id"])
        assert response.status_code == 404
        assert await fetch_all(DeviceModel) == []


class TestListDevices:
    async def test_list_with_recipient(self, client, user, recipient):
        await _add_device(client, user["headers"], recipient["id"])

        response = await client.get("/api/v1/devices", headers=user["headers"])

        assert response.status_code == 200
        devices = response.json()
        assert len(devices) == 1
        assert devices[0]["recipient"]["phone_number"] == "+1_5551234567"

    async def test_list_filtered_by_recipient(self, client, user, recipient):
        await _add_device(client, user["headers"], recipient["id"])

        response = await client.get(
            "/api/v1/devices",
            params={"recipient_id": recipient["id"] + 1},
            headers=user["headers"],
        )
        assert response.json() == []

    async def test_other_user_sees_nothing(self, client, user, other_user, recipient):
        await _add_device(client, user["headers"], recipient["id"])
        response = await client.get("/api/v1/devices", headers=other_user["headers"])
        assert response.json() == []


class TestDeviceStatus:
    async def test_connected_sets_last_sync(self, client, user, recipient):
        device_id = (await _add_device(client, user["headers"], recipient["id"])).json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/devices/{device_id}/status",
            json={"status": "connected"},
            headers=user["headers"],
        )

        assert response.status_code == 200
        assert response.json()["success"] == "Device status updated"
        stored = await _device(device_id)
        assert stored.status == "connected"
        assert stored.last_sync is not None

    async def test_unknown_status(self, client, user, recipient):
        device_id = (await _add_device(client, user["headers"], recipient["id"])).json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/devices/{device_id}/status",
            json={"status": "exploded"},
            headers=user["headers"],
        )

        assert response.status_code == 422
        assert (await _device(device_id)).status == "disconnected"

    async def test_other_user_cannot_change_status(self, client, user, other_user, recipient):
        device_id = (await _add_device(client, user["headers"], recipient["id"])).json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/devices/{device_id}/status",
            json={"status": "connected"},
            headers=other_user["headers"],
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Device not found"}


class TestRemoveDevice:
    async def test_remove(self, client, user, recipient):
        device_id = (await _add_device(client, user["headers"], recipient["id"])).json()["data"]["id"]

        response = await client.delete(f"/api/v1/devices/{device_id}", headers=user["headers"])

        assert response.status_code == 200
        assert response.json() == {"success": "Device removed"}
        assert await fetch_all(DeviceModel) == []

    async def test_remove_missing(self, client, user):
        response = await client.delete("/api/v1/devices/no-such-device", headers=user["headers"])
        assert response.status_code == 404


class TestDeviceSync:
    async def test_sync_marks_syncing_and_schedules_completion(self, client, user, recipient, monkeypatch):
        scheduled = []

        async def record(device_id, previous_status):
            scheduled.append((device_id, previous_status))

        monkeypatch.setattr(devices_api, "complete_device_sync", record)
        device_id = (await _add_device(client, user["headers"], recipient["id"])).json()["data"]["id"]

        response = await client.post(f"/api/v1/devices/{device_id}/sync", headers=user["headers"])

        assert response.status_code == 200
        assert response.json() == {"success": "Device sync initiated."}
        assert scheduled == [(device_id, "disconnected")]
        assert (await _device(device_id)).status == "syncing"

    async def test_sync_of_unknown_device(self, client, user):
        response = await client.post("/api/v1/devices/no-such-device/sync", headers=user["headers"])
        assert response.status_code == 404
        assert response.json() == {"error": "Device not found"}

    async def test_completion_connects_device(self, client, user, recipient):
        device_id = (await _add_device(client, user["headers"], recipient["id"])).json()["data"]["id"]

        await tasks.complete_device_sync(device_id, "disconnected")

        stored = await _device(device_id)
        assert stored.status == "connected"
        assert stored.last_sync is not None
        assert 0 <= stored.battery_level <= 100

    async def test_failed_completion_restores_previous_status(self, client, user, recipient, monkeypatch):
        device_id = (await _add_device(client, user["headers"], recipient["id"])).json()["data"]["id"]
        await client.patch(
            f"/api/v1/devices/{device_id}/status",
            json={"status": "syncing"},
            headers=user["headers"],
        )

        async def fail(self, device_id, battery_level):
            raise RepositoryError("Failed to complete sync", operation="complete_sync", entity="device")

        monkeypatch.setattr(DeviceRepositoryImpl, "complete_sync", fail)

        await tasks.complete_device_sync(device_id, "disconnected")

        stored = await _device(device_id)
        assert stored.status == "disconnected"
        assert stored.battery_level is None

    async def test_completion_for_removed_device(self, database):
        await tasks.complete_device_sync("removed-device", "connected")
        assert await fetch_all(DeviceModel) == []

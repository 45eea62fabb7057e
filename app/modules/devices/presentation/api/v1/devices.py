# 📄 File: app/modules/devices/presentation/api/v1/devices.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for a recipient's devices: list, add, change status, remove and sync.
#
# 🧪 Purpose (Technical Summary):
# FastAPI device endpoints. The sync endpoint commits ``syncing`` and schedules the
# delayed completion as a BackgroundTask that runs after the response is sent.
#
# 🔗 Dependencies:
# - FastAPI router, BackgroundTasks
# - DeviceService, device schemas, complete_device_sync
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /devices)

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query

from app.modules.devices.domain.services.device_service import DeviceService
from app.modules.devices.infrastructure.tasks import complete_device_sync
from app.modules.devices.presentation.api.schemas.device_schemas import (
    DeviceFormRequest,
    DeviceResponse,
    DeviceStatusRequest,
)
from app.modules.identity.presentation.dependencies import get_auth_context
from app.shared.core.actions import ActionResult
from app.shared.core.dependencies import AuthContext
from app.shared.utils.logging import get_logger

audit_logger = get_logger(__name__)

devices_router = APIRouter()


@devices_router.get(
    "",
    response_model=List[DeviceResponse],
    summary="List devices",
    description="The current user's devices, newest first, each with its recipient",
)
async def list_devices(
    recipient_id: Optional[int] = Query(None, description="Only devices of this recipient"),
    ctx: AuthContext = Depends(get_auth_context),
    device_service: DeviceService = Depends(),
) -> List[DeviceResponse]:
    devices = await device_service.list_devices(ctx, recipient_id=recipient_id)
    return [DeviceResponse.from_listing(item) for item in devices]


@devices_router.post(
    "",
    summary="Add a device",
    responses={
        200: {"description": "Device added successfully"},
        404: {"description": "Recipient not found"},
        422: {"description": "Device type and name are required"},
    }
)
async def add_device(
    payload: DeviceFormRequest,
    ctx: AuthContext = Depends(get_auth_context),
    device_service: DeviceService = Depends(),
) -> Dict[str, Any]:
    added = await device_service.add_device(
        ctx,
        recipient_id=payload.recipient_id,
        device_type=payload.device_type,
        device_name=payload.device_name,
        device_model=payload.device_model,
    )
    audit_logger.log_user_action("add_device", ctx.user_id, resource=f"device:{added.device.id}")
    return ActionResult.ok(
        "Device added successfully",
        data=DeviceResponse.from_listing(added).model_dump(mode="json"),
    ).to_response()


@devices_router.patch(
    "/{device_id}/status",
    summary="Update device status",
    responses={404: {"description": "Device not found"}},
)
async def update_device_status(
    device_id: str,
    payload: DeviceStatusRequest,
    ctx: AuthContext = Depends(get_auth_context),
    device_service: DeviceService = Depends(),
) -> Dict[str, Any]:
    device = await device_service.update_device_status(ctx, device_id, payload.status)
    audit_logger.log_user_action(
        "update_device_status", ctx.user_id, resource=f"device:{device_id}",
        extra={"status": device.status}
    )
    return ActionResult.ok(
        "Device status updated",
        data=DeviceResponse.from_domain(device).model_dump(mode="json"),
    ).to_response()


@devices_router.delete(
    "/{device_id}",
    summary="Remove a device",
    responses={404: {"description": "Device not found"}},
)
async def remove_device(
    device_id: str,
    ctx: AuthContext = Depends(get_auth_context),
    device_service: DeviceService = Depends(),
) -> Dict[str, Any]:
    await device_service.remove_device(ctx, device_id)
    audit_logger.log_user_action("remove_device", ctx.user_id, resource=f"device:{device_id}")
    return ActionResult.ok("Device removed").to_response()


@devices_router.post(
    "/{device_id}/sync",
    summary="Sync a device",
    description="Marks the device as syncing and completes the sync in the background.",
    responses={404: {"description": "Device not found"}},
)
async def sync_device(
    device_id: str,
    background_tasks: BackgroundTasks,
    ctx: AuthContext = Depends(get_auth_context),
    device_service: DeviceService = Depends(),
) -> Dict[str, Any]:
    previous_status = await device_service.start_sync(ctx, device_id)
    background_tasks.add_task(complete_device_sync, device_id, previous_status)
    audit_logger.log_user_action("sync_device", ctx.user_id, resource=f"device:{device_id}")
    return ActionResult.ok("Device sync initiated.").to_response()

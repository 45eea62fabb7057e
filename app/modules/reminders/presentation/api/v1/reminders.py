# 📄 File: app/modules/reminders/presentation/api/v1/reminders.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for reminders: browse them all, see one recipient's, add, edit and delete.
#
# 🧪 Purpose (Technical Summary):
# FastAPI reminder endpoints. ``reminders_router`` is mounted under /reminders and
# ``recipient_reminders_router`` under /recipients for the per-recipient listing.
#
# 🔗 Dependencies:
# - FastAPI router, Query
# - ReminderService, reminder schemas, get_auth_context
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from app.modules.identity.presentation.dependencies import get_auth_context
from app.modules.reminders.domain.models.reminder import DeliveryMethod
from app.modules.reminders.domain.services.reminder_service import ReminderService
from app.modules.reminders.presentation.api.schemas.reminder_schemas import (
    ReminderFormRequest,
    ReminderPageResponse,
    ReminderResponse,
)
from app.shared.core.actions import ActionResult
from app.shared.core.dependencies import AuthContext, PaginationParams, get_pagination_params
from app.shared.utils.logging import get_logger

audit_logger = get_logger(__name__)

reminders_router = APIRouter()
recipient_reminders_router = APIRouter()


@reminders_router.get(
    "",
    response_model=ReminderPageResponse,
    summary="Browse reminders",
    description="Reminders across all of the user's recipients, filtered and paginated",
)
async def browse_reminders(
    delivery_method: str = Query(DeliveryMethod.CALL.value, description="call or text"),
    recipient_id: Optional[int] = Query(None, description="Only this recipient's reminders"),
    pagination: PaginationParams = Depends(get_pagination_params),
    ctx: AuthContext = Depends(get_auth_context),
    reminder_service: ReminderService = Depends(),
) -> ReminderPageResponse:
    page = await reminder_service.browse_reminders(
        ctx,
        delivery_method=delivery_method,
        recipient_id=recipient_id,
        page=pagination.page,
    )
    return ReminderPageResponse.from_domain(page)


@reminders_router.post(
    "",
    summary="Add a reminder",
    responses={
        200: {"description": "Reminder added"},
        404: {"description": "Recipient not found"},
        422: {"description": "All fields are required"},
    }
)
async def add_reminder(
    payload: ReminderFormRequest,
    ctx: AuthContext = Depends(get_auth_context),
    reminder_service: ReminderService = Depends(),
) -> Dict[str, Any]:
    reminder = await reminder_service.add_reminder(
        ctx,
        recipient_id=payload.recipient_id,
        name=payload.name,
        category=payload.category,
        delivery_method=payload.delivery_method,
        hour=payload.hour,
        minute=payload.minute,
        ampm=payload.ampm,
        days=payload.days,
        notes=payload.notes,
    )
    audit_logger.log_user_action("add_reminder", ctx.user_id, resource=f"reminder:{reminder.id}")
    return ActionResult.ok(
        "Reminder added",
        data=ReminderResponse.from_domain(reminder).model_dump(mode="json"),
    ).to_response()


@reminders_router.put(
    "/{reminder_id}",
    summary="Update a reminder",
    responses={
        200: {"description": "Reminder updated"},
        404: {"description": "Reminder not found"},
    }
)
async def update_reminder(
    reminder_id: int,
    payload: ReminderFormRequest,
    ctx: AuthContext = Depends(get_auth_context),
    reminder_service: ReminderService = Depends(),
) -> Dict[str, Any]:
    reminder = await reminder_service.update_reminder(
        ctx,
        reminder_id,
        recipient_id=payload.recipient_id,
        name=payload.name,
        category=payload.category,
        delivery_method=payload.delivery_method,
        hour=payload.hour,
        minute=payload.minute,
        ampm=payload.ampm,
        days=payload.days,
        notes=payload.notes,
    )
    audit_logger.log_user_action("update_reminder", ctx.user_id, resource=f"reminder:{reminder_id}")
    return ActionResult.ok(
        "Reminder updated",
        data=ReminderResponse.from_domain(reminder).model_dump(mode="json"),
    ).to_response()


@reminders_router.delete(
    "/{reminder_id}",
    summary="Delete a reminder",
    responses={404: {"description": "Reminder not found"}},
)
async def delete_reminder(
    reminder_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    reminder_service: ReminderService = Depends(),
) -> Dict[str, Any]:
    await reminder_service.delete_reminder(ctx, reminder_id)
    audit_logger.log_user_action("delete_reminder", ctx.user_id, resource=f"reminder:{reminder_id}")
    return ActionResult.ok("Reminder deleted").to_response()


@recipient_reminders_router.get(
    "/{recipient_id}/reminders",
    response_model=List[ReminderResponse],
    summary="List a recipient's reminders",
    description="Reminders of one recipient in time-of-day order",
)
async def list_recipient_reminders(
    recipient_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    reminder_service: ReminderService = Depends(),
) -> List[ReminderResponse]:
    reminders = await reminder_service.list_reminders(ctx, recipient_id)
    return [ReminderResponse.from_domain(reminder) for reminder in reminders]

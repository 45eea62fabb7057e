# 📄 File: app/modules/care_recipients/presentation/api/v1/recipients.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for listing, viewing, adding and editing the people being cared for.
#
# 🧪 Purpose (Technical Summary):
# FastAPI recipient endpoints. Reads return recipient representations; mutations
# return the uniform action result with the affected recipient under ``data``.
#
# 🔗 Dependencies:
# - FastAPI router
# - RecipientService, recipient schemas
# - get_auth_context (identity module)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /recipients)

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from app.modules.care_recipients.domain.services.recipient_service import RecipientService
from app.modules.care_recipients.presentation.api.schemas.recipient_schemas import (
    RecipientFormRequest,
    RecipientResponse,
)
from app.modules.identity.presentation.dependencies import get_auth_context
from app.shared.core.actions import ActionResult
from app.shared.core.dependencies import AuthContext
from app.shared.utils.logging import get_logger

audit_logger = get_logger(__name__)

recipients_router = APIRouter()


@recipients_router.get(
    "",
    response_model=List[RecipientResponse],
    summary="List care recipients",
    description="Recipients owned by the current user, ordered by name",
)
async def list_recipients(
    ctx: AuthContext = Depends(get_auth_context),
    recipient_service: RecipientService = Depends(),
) -> List[RecipientResponse]:
    recipients = await recipient_service.list_recipients(ctx)
    return [RecipientResponse.from_domain(recipient) for recipient in recipients]


@recipients_router.post(
    "",
    summary="Add a care recipient",
    responses={
        200: {"description": "Recipient added successfully!"},
        422: {"description": "All fields are required"},
    }
)
async def add_recipient(
    payload: RecipientFormRequest,
    ctx: AuthContext = Depends(get_auth_context),
    recipient_service: RecipientService = Depends(),
) -> Dict[str, Any]:
    recipient = await recipient_service.add_recipient(
        ctx,
        name=payload.name,
        phone_number=payload.phone_number,
        country_code=payload.country_code,
        timezone=payload.timezone,
    )
    audit_logger.log_user_action("add_recipient", ctx.user_id, resource=f"recipient:{recipient.id}")
    return ActionResult.ok(
        "Recipient added successfully!",
        data=RecipientResponse.from_domain(recipient).model_dump(mode="json"),
    ).to_response()


@recipients_router.get(
    "/{recipient_id}",
    response_model=RecipientResponse,
    summary="Get a care recipient",
    responses={404: {"description": "Recipient not found"}},
)
async def get_recipient(
    recipient_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    recipient_service: RecipientService = Depends(),
) -> RecipientResponse:
    recipient = await recipient_service.get_recipient(ctx, recipient_id)
    return RecipientResponse.from_domain(recipient)


@recipients_router.put(
    "/{recipient_id}",
    summary="Update a care recipient",
    responses={
        200: {"description": "Recipient updated successfully!"},
        404: {"description": "Recipient not found"},
        422: {"description": "All fields are required"},
    }
)
async def update_recipient(
    recipient_id: int,
    payload: RecipientFormRequest,
    ctx: AuthContext = Depends(get_auth_context),
    recipient_service: RecipientService = Depends(),
) -> Dict[str, Any]:
    recipient = await recipient_service.update_recipient(
        ctx,
        recipient_id,
        name=payload.name,
        phone_number=payload.phone_number,
        country_code=payload.country_code,
        timezone=payload.timezone,
    )
    audit_logger.log_user_action("update_recipient", ctx.user_id, resource=f"recipient:{recipient_id}")
    return ActionResult.ok(
        "Recipient updated successfully!",
        data=RecipientResponse.from_domain(recipient).model_dump(mode="json"),
    ).to_response()

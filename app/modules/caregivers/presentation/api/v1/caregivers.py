# 📄 File: app/modules/caregivers/presentation/api/v1/caregivers.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the caregiver list: see it, add someone, edit someone.
#
# 🧪 Purpose (Technical Summary):
# FastAPI caregiver endpoints returning linked caregiver views and action results.
#
# 🔗 Dependencies:
# - FastAPI router
# - CaregiverService, caregiver schemas, get_auth_context
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /caregivers)

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from app.modules.caregivers.domain.services.caregiver_service import CaregiverService
from app.modules.caregivers.presentation.api.schemas.caregiver_schemas import (
    CaregiverFormRequest,
    CaregiverResponse,
)
from app.modules.identity.presentation.dependencies import get_auth_context
from app.shared.core.actions import ActionResult
from app.shared.core.dependencies import AuthContext
from app.shared.utils.logging import get_logger

audit_logger = get_logger(__name__)

caregivers_router = APIRouter()


@caregivers_router.get(
    "",
    response_model=List[CaregiverResponse],
    summary="List caregivers",
    description="Caregivers on the current user's list, ordered by name",
)
async def list_caregivers(
    ctx: AuthContext = Depends(get_auth_context),
    caregiver_service: CaregiverService = Depends(),
) -> List[CaregiverResponse]:
    caregivers = await caregiver_service.list_caregivers(ctx)
    return [CaregiverResponse.from_domain(linked) for linked in caregivers]


@caregivers_router.post(
    "",
    summary="Add a caregiver",
    responses={
        200: {"description": "Caregiver added successfully!"},
        409: {"description": "This caregiver is already in your list"},
        422: {"description": "Name, email, and phone number are required"},
    }
)
async def add_caregiver(
    payload: CaregiverFormRequest,
    ctx: AuthContext = Depends(get_auth_context),
    caregiver_service: CaregiverService = Depends(),
) -> Dict[str, Any]:
    linked = await caregiver_service.add_caregiver(
        ctx,
        name=payload.name,
        email=payload.email,
        phone_number=payload.phone_number,
        country_code=payload.country_code,
        role=payload.role,
        access_level=payload.access_level,
        notes=payload.notes,
    )
    audit_logger.log_user_action("add_caregiver", ctx.user_id, resource=f"caregiver:{linked.caregiver.id}")
    return ActionResult.ok(
        "Caregiver added successfully!",
        data=CaregiverResponse.from_domain(linked).model_dump(mode="json"),
    ).to_response()


@caregivers_router.put(
    "/{caregiver_id}",
    summary="Update a caregiver",
    responses={
        200: {"description": "Caregiver updated successfully!"},
        403: {"description": "No access or no permission to edit"},
        409: {"description": "A caregiver with this email already exists"},
    }
)
async def update_caregiver(
    caregiver_id: int,
    payload: CaregiverFormRequest,
    ctx: AuthContext = Depends(get_auth_context),
    caregiver_service: CaregiverService = Depends(),
) -> Dict[str, Any]:
    linked = await caregiver_service.update_caregiver(
        ctx,
        caregiver_id,
        name=payload.name,
        email=payload.email,
        phone_number=payload.phone_number,
        country_code=payload.country_code,
        role=payload.role,
        access_level=payload.access_level,
        notes=payload.notes,
    )
    audit_logger.log_user_action("update_caregiver", ctx.user_id, resource=f"caregiver:{caregiver_id}")
    return ActionResult.ok(
        "Caregiver updated successfully!",
        data=CaregiverResponse.from_domain(linked).model_dump(mode="json"),
    ).to_response()

# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 requests: sends recipient requests to the recipient
# handlers, reminder requests to the reminder handlers, and so on.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation combining every module router under its route prefix.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.*.presentation.api.v1.*
# 🔄 Connected Modules / Calls From:
# app.main.py

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router
from app.modules.calendar.presentation.api.v1.calendar import calendar_router
from app.modules.care_recipients.presentation.api.v1.recipients import recipients_router
from app.modules.caregivers.presentation.api.v1.caregivers import caregivers_router
from app.modules.conversation_logs.presentation.api.v1.conversations import conversations_router
from app.modules.devices.presentation.api.v1.devices import devices_router
from app.modules.identity.presentation.api.v1.auth import auth_router
from app.modules.reminders.presentation.api.v1.reminders import (
    recipient_reminders_router,
    reminders_router,
)

logger = logging.getLogger(__name__)

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])


@api_v1_router.get(
    "/",
    summary="API v1 Information",
    description="API v1 version information and route prefixes",
    tags=["API Info"]
)
async def api_v1_info() -> JSONResponse:
    return JSONResponse(status_code=200, content=get_api_info())


# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

api_v1_router.include_router(auth_router, prefix=ROUTE_PREFIXES["auth"], tags=["Authentication"])
api_v1_router.include_router(recipients_router, prefix=ROUTE_PREFIXES["recipients"], tags=["Recipients"])
api_v1_router.include_router(recipient_reminders_router, prefix=ROUTE_PREFIXES["recipients"], tags=["Reminders"])
api_v1_router.include_router(conversations_router, prefix=ROUTE_PREFIXES["recipients"], tags=["Conversations"])
api_v1_router.include_router(caregivers_router, prefix=ROUTE_PREFIXES["caregivers"], tags=["Caregivers"])
api_v1_router.include_router(reminders_router, prefix=ROUTE_PREFIXES["reminders"], tags=["Reminders"])
api_v1_router.include_router(devices_router, prefix=ROUTE_PREFIXES["devices"], tags=["Devices"])
api_v1_router.include_router(calendar_router, prefix=ROUTE_PREFIXES["calendar"], tags=["Calendar"])

logger.debug("API v1 module routers loaded")

# 📄 File: app/modules/calendar/presentation/api/v1/calendar.py
# 🧭 Purpose (Layman Explanation):
# The web endpoint the calendar page loads its entries from.
#
# 🔗 Dependencies:
# - FastAPI router, CalendarService, get_auth_context
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /calendar)

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.modules.calendar.domain.models.calendar_event import CalendarEvent
from app.modules.calendar.domain.services.calendar_service import CalendarService
from app.modules.identity.presentation.dependencies import get_auth_context
from app.shared.core.dependencies import AuthContext

calendar_router = APIRouter()


@calendar_router.get(
    "/events",
    response_model=List[CalendarEvent],
    summary="Calendar events",
    description="Weekly recurring events for the user's reminders, one per selected weekday",
)
async def list_events(
    delivery_method: Optional[str] = Query(None, description="call or text"),
    recipient_id: Optional[int] = Query(None, description="Only this recipient's reminders"),
    ctx: AuthContext = Depends(get_auth_context),
    calendar_service: CalendarService = Depends(),
) -> List[CalendarEvent]:
    return await calendar_service.list_events(ctx, delivery_method, recipient_id)

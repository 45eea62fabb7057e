# 📄 File: app/modules/calendar/domain/services/calendar_service.py
# 🧭 Purpose (Layman Explanation):
# Gathers the caller's reminders and recipients and lays them out on the calendar.
# 🧪 Purpose (Technical Summary):
# Applies the browse filters without pagination and feeds the result to the projector.
# 🔗 Dependencies:
# ReminderService, RecipientRepository, projector
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/calendar.py

from typing import List, Optional

from fastapi import Depends

from .projector import project_reminders
from ..models.calendar_event import CalendarEvent
from app.modules.care_recipients.domain.repositories.recipient_repository import RecipientRepository
from app.modules.reminders.domain.services.reminder_service import ReminderService
from app.shared.config.settings import get_settings
from app.shared.core.dependencies import AuthContext


class CalendarService:
    def __init__(
        self,
        reminder_service: ReminderService = Depends(),
        recipient_repository: RecipientRepository = Depends(),
    ):
        self.reminder_service = reminder_service
        self.recipient_repository = recipient_repository

    async def list_events(
        self,
        ctx: AuthContext,
        delivery_method: Optional[str] = None,
        recipient_id: Optional[int] = None,
    ) -> List[CalendarEvent]:
        listings = await self.reminder_service.filter_reminders(ctx, delivery_method, recipient_id)
        recipients = await self.recipient_repository.list_for_user(ctx.user_id)

        return project_reminders(
            [item.reminder for item in listings],
            recipients,
            palette=get_settings().CALENDAR_PALETTE,
        )

# 📄 File: app/modules/reminders/presentation/api/schemas/reminder_schemas.py
# 🧭 Purpose (Layman Explanation):
# What the reminder form sends and how reminders are shown in lists.
# 🧪 Purpose (Technical Summary):
# Request/response schemas for reminders, including the parsed time parts and weekday
# summary used to pre-fill and label the form.
# 🔗 Dependencies:
# pydantic, reminder domain models and time helpers
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/reminders.py, calendar module (extended props)

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.reminders.domain.models.reminder import WEEKDAY_FIELDS, Reminder, ReminderWithRecipient
from app.modules.reminders.domain.services.reminder_service import ReminderPage
from app.modules.reminders.domain.services.time_format import day_string, parse_time_string


class ReminderFormRequest(BaseModel):
    """Add/edit reminder form."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    recipient_id: Optional[int] = Field(default=None, alias="recipientId")
    name: Optional[str] = None
    category: Optional[str] = None
    delivery_method: Optional[str] = None
    hour: Optional[str] = None
    minute: Optional[str] = None
    ampm: Optional[str] = None
    monday: bool = False
    tuesday: bool = False
    wednesday: bool = False
    thursday: bool = False
    friday: bool = False
    saturday: bool = False
    sunday: bool = False
    notes: Optional[str] = None

    @property
    def days(self) -> Dict[str, bool]:
        return {day: getattr(self, day) for day in WEEKDAY_FIELDS}


class ReminderResponse(BaseModel):
    id: int
    parent_id: int
    name: str
    category: str
    delivery_method: str
    time: str
    hour: str
    minute: str
    ampm: str
    monday: bool
    tuesday: bool
    wednesday: bool
    thursday: bool
    friday: bool
    saturday: bool
    sunday: bool
    day_string: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    recipient_name: Optional[str] = None

    @classmethod
    def from_domain(cls, reminder: Reminder, recipient_name: Optional[str] = None) -> "ReminderResponse":
        return cls(
            **reminder.model_dump(),
            **parse_time_string(reminder.time),
            day_string=day_string(reminder),
            recipient_name=recipient_name,
        )

    @classmethod
    def from_listing(cls, item: ReminderWithRecipient) -> "ReminderResponse":
        return cls.from_domain(item.reminder, item.recipient_name)


class ReminderPageResponse(BaseModel):
    items: List[ReminderResponse]
    total: int
    page: int
    page_size: int
    total_pages: int

    @classmethod
    def from_domain(cls, page: ReminderPage) -> "ReminderPageResponse":
        return cls(
            items=[ReminderResponse.from_listing(item) for item in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
        )

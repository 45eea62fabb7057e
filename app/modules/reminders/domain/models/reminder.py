# 📄 File: app/modules/reminders/domain/models/reminder.py
# 🧭 Purpose (Layman Explanation):
# Describes a reminder: what it is, how it is delivered, what time, and on which days.
# 🧪 Purpose (Technical Summary):
# Reminder domain model with category, delivery and meridiem enums and weekday helpers.
# 🔗 Dependencies:
# pydantic, enum
# 🔄 Connected Modules / Calls From:
# reminder_service.py, reminder repositories, calendar projector

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class ReminderCategory(str, Enum):
    MEDICINE = "Medicine"
    APPOINTMENT = "Appointment"
    ACTIVITY = "Activity"


class DeliveryMethod(str, Enum):
    TEXT = "text"
    CALL = "call"


class Meridiem(str, Enum):
    AM = "AM"
    PM = "PM"


# Monday first, matching the form and the day summary
WEEKDAY_FIELDS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


class Reminder(BaseModel):
    """
    Weekly recurring reminder for one recipient.

    ``time`` is a ``H:MMAM`` string such as ``9:00AM``; the weekday flags say which days it fires.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    parent_id: int
    name: str
    category: str
    delivery_method: str
    time: str
    monday: bool = False
    tuesday: bool = False
    wednesday: bool = False
    thursday: bool = False
    friday: bool = False
    saturday: bool = False
    sunday: bool = False
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def days(self) -> Dict[str, bool]:
        return {day: bool(getattr(self, day)) for day in WEEKDAY_FIELDS}

    @property
    def selected_days(self) -> List[str]:
        return [day for day, selected in self.days.items() if selected]


class ReminderWithRecipient(BaseModel):
    """Reminder plus the name of the recipient it belongs to."""

    reminder: Reminder
    recipient_name: Optional[str] = None

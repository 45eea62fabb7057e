# 📄 File: app/modules/calendar/domain/services/projector.py
# 🧭 Purpose (Layman Explanation):
# Turns "every Monday and Wednesday at 9:00AM" into calendar entries.
# 🧪 Purpose (Technical Summary):
# Pure projection of reminder weekday flags into recurring events over a window from
# January 1st of last year to December 31st of next year.
# 🔗 Dependencies:
# reminder and recipient domain models
# 🔄 Connected Modules / Calls From:
# calendar_service.py

from datetime import date
from typing import List, Optional, Sequence

from ..models.calendar_event import CalendarEvent
from app.modules.care_recipients.domain.models.recipient import Recipient
from app.modules.reminders.domain.models.reminder import WEEKDAY_FIELDS, Reminder

DEFAULT_PALETTE = ["#87CEEB", "#FFB6C1", "#D8BFD8", "#FFDAB9", "#98FB98"]

# Calendar day numbers, Sunday is 0
DAY_NUMBERS = {
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
    "sunday": 0,
}


def project_reminders(
    reminders: Sequence[Reminder],
    recipients: Sequence[Recipient],
    today: Optional[date] = None,
    palette: Optional[Sequence[str]] = None,
) -> List[CalendarEvent]:
    """
    Project reminders into one recurring event per selected weekday.

    Args:
        reminders: Reminders to show
        recipients: The owner's recipients sorted by name; position picks the colour
        today: Anchor for the recurrence window, defaults to the current date
        palette: Colours cycled by recipient position

    Returns:
        Events in reminder order, weekdays Monday through Sunday
    """
    today = today or date.today()
    palette = list(palette or DEFAULT_PALETTE)
    start_recur = f"{today.year - 1}-01-01"
    end_recur = f"{today.year + 1}-12-31"

    positions = {recipient.id: index for index, recipient in enumerate(recipients)}
    by_id = {recipient.id: recipient for recipient in recipients}

    events = []
    for reminder in reminders:
        recipient = by_id.get(reminder.parent_id)
        colour = palette[positions.get(reminder.parent_id, 0) % len(palette)]
        title = f"{reminder.name} ({recipient.name if recipient else 'Unknown'})"
        extended_props = {
            "reminder": reminder.model_dump(mode="json"),
            "recipient": recipient.model_dump(mode="json") if recipient else None,
        }

        for day in WEEKDAY_FIELDS:
            if not getattr(reminder, day):
                continue
            dow = DAY_NUMBERS[day]
            events.append(
                CalendarEvent(
                    id=f"{reminder.id}-{dow}",
                    title=title,
                    days_of_week=[dow],
                    start_time=reminder.time,
                    start_recur=start_recur,
                    end_recur=end_recur,
                    background_color=colour,
                    border_color=colour,
                    extended_props=extended_props,
                )
            )

    return events

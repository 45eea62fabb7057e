# 📄 File: app/modules/reminders/domain/services/time_format.py
# 🧭 Purpose (Layman Explanation):
# Converts reminder times between the form's hour/minute/AM-PM pickers and the stored
# text, sorts times through the day, and describes which days a reminder repeats.
# 🧪 Purpose (Technical Summary):
# Pure helpers for the ``H:MMAM`` time representation and the weekday summary string.
# 🔗 Dependencies:
# re
# 🔄 Connected Modules / Calls From:
# reminder_service.py, reminder schemas, calendar projector

import re
from typing import Dict

from ..models.reminder import WEEKDAY_FIELDS, Reminder

TIME_PATTERN = re.compile(r"(\d+):(\d+)(AM|PM)")

DEFAULT_TIME_PARTS = {"hour": "12", "minute": "00", "ampm": "AM"}

# Exactly what the pickers offer: hours without a leading zero, two-digit minutes
HOUR_CHOICES = tuple(str(hour) for hour in range(1, 13))
MINUTE_CHOICES = tuple(f"{minute:02d}" for minute in range(60))

DAY_ABBREVIATIONS = {
    "monday": "Mon",
    "tuesday": "Tue",
    "wednesday": "Wed",
    "thursday": "Thu",
    "friday": "Fri",
    "saturday": "Sat",
    "sunday": "Sun",
}


def format_time_string(hour: str, minute: str, ampm: str) -> str:
    """
    Example:
        format_time_string("9", "00", "AM") -> "9:00AM"
    """
    return f"{hour}:{minute}{ampm}"


def parse_time_string(time_string: str) -> Dict[str, str]:
    """
    Split a stored time into form parts, falling back to 12:00AM when it does not parse.
    """
    match = TIME_PATTERN.search(time_string or "")
    if not match:
        return dict(DEFAULT_TIME_PARTS)
    return {"hour": match.group(1), "minute": match.group(2), "ampm": match.group(3)}


def time_sort_key(time_string: str) -> int:
    """Minutes since midnight; 12AM is 0 and 12PM is 720."""
    parts = parse_time_string(time_string)
    hour = int(parts["hour"]) % 12
    if parts["ampm"] == "PM":
        hour += 12
    return hour * 60 + int(parts["minute"])


def day_string(reminder: Reminder) -> str:
    selected = reminder.selected_days
    if len(selected) == len(WEEKDAY_FIELDS):
        return "Every day"
    if not selected:
        return "No days selected"
    return ", ".join(DAY_ABBREVIATIONS[day] for day in selected)

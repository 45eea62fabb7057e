# 📄 File: app/modules/calendar/domain/models/calendar_event.py
# 🧭 Purpose (Layman Explanation):
# One repeating entry on the calendar.
# 🧪 Purpose (Technical Summary):
# Recurring event in the shape calendar widgets consume, serialized with camelCase keys.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# domain/services/projector.py, presentation/api/v1/calendar.py

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CalendarEvent(BaseModel):
    """A weekly recurring event for one weekday of one reminder."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    days_of_week: List[int]
    start_time: str
    start_recur: str
    end_recur: str
    background_color: str
    border_color: str
    text_color: str = "#ffffff"
    extended_props: Dict[str, Any]

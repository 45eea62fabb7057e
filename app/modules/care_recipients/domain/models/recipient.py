# 📄 File: app/modules/care_recipients/domain/models/recipient.py
# 🧭 Purpose (Layman Explanation):
# Describes a care recipient: their name, phone and timezone, and whose account they belong to.
# 🧪 Purpose (Technical Summary):
# Recipient domain model with derived phone parts for display and form pre-fill.
# 🔗 Dependencies:
# pydantic, app.shared.utils.formatters
# 🔄 Connected Modules / Calls From:
# recipient_service.py, recipient_repository.py, reminders/devices/calendar modules

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.shared.utils.formatters import format_phone_for_display, split_phone_number


class Recipient(BaseModel):
    """
    Care recipient ("parent") owned by exactly one user.

    ``phone_number`` is stored as ``{countryCode}_{digits}``.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    user_id: int
    name: str
    phone_number: str
    timezone: str
    created_at: Optional[datetime] = None

    @property
    def country_code(self) -> str:
        return split_phone_number(self.phone_number)[0]

    @property
    def phone_digits(self) -> str:
        return split_phone_number(self.phone_number)[1]

    @property
    def display_phone(self) -> str:
        return format_phone_for_display(self.phone_number)

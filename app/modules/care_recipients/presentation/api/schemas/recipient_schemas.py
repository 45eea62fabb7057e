# 📄 File: app/modules/care_recipients/presentation/api/schemas/recipient_schemas.py
# 🧭 Purpose (Layman Explanation):
# What the recipient form sends and what the recipient list shows.
# 🧪 Purpose (Technical Summary):
# Request/response schemas for recipients. Form fields use the camelCase names the
# web form posts; responses expose the stored phone plus its parsed parts.
# 🔗 Dependencies:
# pydantic, Recipient domain model
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/recipients.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.care_recipients.domain.models.recipient import Recipient


class RecipientFormRequest(BaseModel):
    """Add/edit recipient form. Empty values are rejected by the service."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    country_code: Optional[str] = Field(default=None, alias="countryCode")
    timezone: Optional[str] = None


class RecipientResponse(BaseModel):
    id: int
    user_id: int
    name: str
    phone_number: str
    country_code: str
    phone_digits: str
    display_phone: str
    timezone: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, recipient: Recipient) -> "RecipientResponse":
        return cls(
            id=recipient.id,
            user_id=recipient.user_id,
            name=recipient.name,
            phone_number=recipient.phone_number,
            country_code=recipient.country_code,
            phone_digits=recipient.phone_digits,
            display_phone=recipient.display_phone,
            timezone=recipient.timezone,
            created_at=recipient.created_at,
        )

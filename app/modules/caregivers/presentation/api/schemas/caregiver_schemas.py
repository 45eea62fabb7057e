# 📄 File: app/modules/caregivers/presentation/api/schemas/caregiver_schemas.py
# 🧭 Purpose (Layman Explanation):
# What the caregiver form sends and what the caregiver list shows.
# 🧪 Purpose (Technical Summary):
# Request/response schemas for caregivers. Responses flatten the caregiver with the
# caller's link (access level, who added it and when).
# 🔗 Dependencies:
# pydantic, caregiver domain models
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/caregivers.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.caregivers.domain.models.caregiver import LinkedCaregiver


class CaregiverFormRequest(BaseModel):
    """Add/edit caregiver form."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    country_code: Optional[str] = Field(default=None, alias="countryCode")
    role: Optional[str] = None
    access_level: Optional[str] = Field(default=None, alias="accessLevel")
    notes: Optional[str] = None


class CaregiverResponse(BaseModel):
    id: int
    name: str
    email: str
    phone_number: str
    country_code: str
    phone_digits: str
    display_phone: str
    role: str
    notes: Optional[str] = None
    access_level: str
    added_by: int
    added_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, linked: LinkedCaregiver) -> "CaregiverResponse":
        caregiver, link = linked.caregiver, linked.link
        return cls(
            id=caregiver.id,
            name=caregiver.name,
            email=caregiver.email,
            phone_number=caregiver.phone_number,
            country_code=caregiver.country_code,
            phone_digits=caregiver.phone_digits,
            display_phone=caregiver.display_phone,
            role=caregiver.role,
            notes=caregiver.notes,
            access_level=link.access_level,
            added_by=link.added_by,
            added_at=link.added_at,
            created_at=caregiver.created_at,
            updated_at=caregiver.updated_at,
        )

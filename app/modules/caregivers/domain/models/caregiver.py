# 📄 File: app/modules/caregivers/domain/models/caregiver.py
# 🧭 Purpose (Layman Explanation):
# Describes a caregiver and the link that puts them on a family member's list,
# including how much that family member lets them do.
# 🧪 Purpose (Technical Summary):
# Domain models for the global Caregiver entity, the per-user CaregiverLink and the
# joined LinkedCaregiver view returned by listings.
# 🔗 Dependencies:
# pydantic, enum
# 🔄 Connected Modules / Calls From:
# caregiver_service.py, caregiver repositories, caregiver schemas

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.shared.utils.formatters import format_phone_for_display, split_phone_number


class AccessLevel(str, Enum):
    """Access a user grants a linked caregiver."""
    VIEW = "view"
    EDIT = "edit"
    ADMIN = "admin"


EDITING_ACCESS_LEVELS = {AccessLevel.EDIT.value, AccessLevel.ADMIN.value}


class Caregiver(BaseModel):
    """
    Caregiver shared by every user linked to it.

    ``email`` is the de-duplication key; edits to these fields are seen by all linked users.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str
    email: str
    phone_number: str
    role: str = "Caregiver"
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def country_code(self) -> str:
        return split_phone_number(self.phone_number)[0]

    @property
    def phone_digits(self) -> str:
        return split_phone_number(self.phone_number)[1]

    @property
    def display_phone(self) -> str:
        return format_phone_for_display(self.phone_number)


class CaregiverLink(BaseModel):
    """Row of ``user_caregivers``: one user's view of one caregiver."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    user_id: int
    caregiver_id: int
    access_level: str = AccessLevel.VIEW.value
    added_by: int
    added_at: Optional[datetime] = None

    def allows_edit_by(self, user_id: int) -> bool:
        """The user who added the caregiver, or any edit/admin link, may edit it."""
        return self.added_by == user_id or self.access_level in EDITING_ACCESS_LEVELS


class LinkedCaregiver(BaseModel):
    """Caregiver as seen from one user's list."""

    caregiver: Caregiver
    link: CaregiverLink

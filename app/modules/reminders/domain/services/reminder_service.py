# 📄 File: app/modules/reminders/domain/services/reminder_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for reminders: every field on the form must be filled in, a reminder always
# belongs to one of your own recipients, and lists come back in time-of-day order.
# 🧪 Purpose (Technical Summary):
# Domain service for the reminder registry. Validates form input before persistence,
# checks ownership through the recipient, sorts chronologically and paginates the
# cross-recipient browse view.
# 🔗 Dependencies:
# ReminderRepository, RecipientRepository, time_format helpers, app.shared
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/reminders.py, calendar_service.py

import logging
from typing import Dict, List, Optional

from fastapi import Depends
from pydantic import BaseModel

from .time_format import HOUR_CHOICES, MINUTE_CHOICES, format_time_string, time_sort_key
from ..models.reminder import (
    WEEKDAY_FIELDS,
    DeliveryMethod,
    Meridiem,
    Reminder,
    ReminderCategory,
    ReminderWithRecipient,
)
from ..repositories.reminder_repository import ReminderRepository
from app.modules.care_recipients.domain.repositories.recipient_repository import RecipientRepository
from app.shared.config.settings import get_settings
from app.shared.core.dependencies import AuthContext, PaginationParams
from app.shared.core.exceptions import NotFoundError, RepositoryError, ValidationError
from app.shared.utils.validators import missing_fields, validate_choice

logger = logging.getLogger(__name__)

ALL_FIELDS_REQUIRED = "All fields are required"


class ReminderPage(BaseModel):
    """One page of the cross-recipient reminder list."""

    items: List[ReminderWithRecipient]
    total: int
    page: int
    page_size: int
    total_pages: int


class ReminderService:
    """
    Domain service for reminder registry business logic.
    """

    def __init__(
        self,
        reminder_repository: ReminderRepository = Depends(),
        recipient_repository: RecipientRepository = Depends(),
    ):
        self.reminder_repository = reminder_repository
        self.recipient_repository = recipient_repository

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def list_reminders(self, ctx: AuthContext, recipient_id: int) -> List[Reminder]:
        """Reminders of one owned recipient in time-of-day order."""
        await self._require_recipient(ctx, recipient_id)
        reminders = await self.reminder_repository.list_for_recipient(recipient_id)
        return sorted(reminders, key=lambda reminder: time_sort_key(reminder.time))

    async def filter_reminders(
        self,
        ctx: AuthContext,
        delivery_method: Optional[str] = None,
        recipient_id: Optional[int] = None,
    ) -> List[ReminderWithRecipient]:
        """All of the caller's reminders matching the filters, in time-of-day order."""
        if delivery_method:
            self._check_choice(delivery_method, DeliveryMethod, "delivery_method")

        reminders = await self.reminder_repository.list_for_user(
            ctx.user_id,
            delivery_method=delivery_method,
            parent_id=recipient_id,
        )
        return sorted(
            reminders,
            key=lambda item: (time_sort_key(item.reminder.time), item.recipient_name or ""),
        )

    async def browse_reminders(
        self,
        ctx: AuthContext,
        delivery_method: str = DeliveryMethod.CALL.value,
        recipient_id: Optional[int] = None,
        page: int = 1,
    ) -> ReminderPage:
        pagination = PaginationParams(page=page, page_size=get_settings().REMINDERS_PAGE_SIZE)
        reminders = await self.filter_reminders(ctx, delivery_method, recipient_id)

        return ReminderPage(
            items=reminders[pagination.offset:pagination.offset + pagination.page_size],
            total=len(reminders),
            page=pagination.page,
            page_size=pagination.page_size,
            total_pages=pagination.total_pages(len(reminders)),
        )

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    async def add_reminder(
        self,
        ctx: AuthContext,
        recipient_id: Optional[int],
        name: Optional[str],
        category: Optional[str],
        delivery_method: Optional[str],
        hour: Optional[str],
        minute: Optional[str],
        ampm: Optional[str],
        days: Dict[str, bool],
        notes: Optional[str],
    ) -> Reminder:
        """
        Add a reminder for an owned recipient. A reminder with no days selected is allowed.
        """
        self._validate(name, category, delivery_method, hour, minute, ampm, notes)
        if recipient_id is None:
            raise ValidationError(ALL_FIELDS_REQUIRED, field="recipientId")
        await self._require_recipient(ctx, recipient_id)

        reminder = self._build(recipient_id, name, category, delivery_method, hour, minute, ampm, days, notes)

        try:
            return await self.reminder_repository.create(reminder)
        except RepositoryError as e:
            logger.error(f"Error creating reminder for recipient {recipient_id}: {e.message}")
            raise RepositoryError("Could not create reminder", operation="create", entity="reminder") from e

    async def update_reminder(
        self,
        ctx: AuthContext,
        reminder_id: int,
        recipient_id: Optional[int],
        name: Optional[str],
        category: Optional[str],
        delivery_method: Optional[str],
        hour: Optional[str],
        minute: Optional[str],
        ampm: Optional[str],
        days: Dict[str, bool],
        notes: Optional[str],
    ) -> Reminder:
        """
        Update an owned reminder, optionally moving it to another owned recipient.
        """
        self._validate(name, category, delivery_method, hour, minute, ampm, notes)
        existing = await self._require_reminder(ctx, reminder_id)

        target_recipient_id = recipient_id if recipient_id is not None else existing.parent_id
        if target_recipient_id != existing.parent_id:
            await self._require_recipient(ctx, target_recipient_id)

        reminder = self._build(
            target_recipient_id, name, category, delivery_method, hour, minute, ampm, days, notes
        )
        reminder.id = reminder_id

        try:
            updated = await self.reminder_repository.update(reminder)
        except RepositoryError as e:
            logger.error(f"Error updating reminder {reminder_id}: {e.message}")
            raise RepositoryError("Could not update reminder", operation="update", entity="reminder") from e

        if updated is None:
            raise NotFoundError("Reminder not found", resource_type="reminder", resource_id=reminder_id)
        return updated

    async def delete_reminder(self, ctx: AuthContext, reminder_id: int) -> None:
        await self._require_reminder(ctx, reminder_id)

        try:
            deleted = await self.reminder_repository.delete(reminder_id)
        except RepositoryError as e:
            logger.error(f"Error deleting reminder {reminder_id}: {e.message}")
            raise RepositoryError("Could not delete reminder", operation="delete", entity="reminder") from e

        if not deleted:
            raise NotFoundError("Reminder not found", resource_type="reminder", resource_id=reminder_id)

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _require_recipient(self, ctx: AuthContext, recipient_id: int) -> None:
        recipient = await self.recipient_repository.get_for_user(recipient_id, ctx.user_id)
        if recipient is None:
            raise NotFoundError("Recipient not found", resource_type="recipient", resource_id=recipient_id)

    async def _require_reminder(self, ctx: AuthContext, reminder_id: int) -> Reminder:
        reminder = await self.reminder_repository.get_for_user(reminder_id, ctx.user_id)
        if reminder is None:
            raise NotFoundError("Reminder not found", resource_type="reminder", resource_id=reminder_id)
        return reminder

    def _validate(self, name, category, delivery_method, hour, minute, ampm, notes) -> None:
        missing = missing_fields({
            "name": name,
            "category": category,
            "delivery_method": delivery_method,
            "hour": hour,
            "minute": minute,
            "ampm": ampm,
            "notes": notes,
        })
        if missing:
            raise ValidationError(ALL_FIELDS_REQUIRED, field=missing[0])

        self._check_choice(category, ReminderCategory, "category")
        self._check_choice(delivery_method, DeliveryMethod, "delivery_method")
        self._check_choice(ampm, Meridiem, "ampm")

        if hour not in HOUR_CHOICES:
            raise ValidationError("Invalid hour: must be 1-12", field="hour", value=hour)
        if minute not in MINUTE_CHOICES:
            raise ValidationError("Invalid minute: must be 00-59", field="minute", value=minute)

    def _check_choice(self, value: str, enum_cls, field: str) -> None:
        result = validate_choice(value, [member.value for member in enum_cls], field)
        if not result.is_valid:
            raise ValidationError(result.first_error, field=field, value=value)

    def _build(
        self,
        recipient_id: int,
        name: str,
        category: str,
        delivery_method: str,
        hour: str,
        minute: str,
        ampm: str,
        days: Dict[str, bool],
        notes: str,
    ) -> Reminder:
        return Reminder(
            parent_id=recipient_id,
            name=name.strip(),
            category=category,
            delivery_method=delivery_method,
            time=format_time_string(hour, minute, ampm),
            notes=notes,
            **{day: bool(days.get(day, False)) for day in WEEKDAY_FIELDS},
        )

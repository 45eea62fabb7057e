# 📄 File: app/modules/care_recipients/domain/services/recipient_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for adding and editing the people being cared for: every field must be
# filled in, and nobody can see or change someone else's recipients.
# 🧪 Purpose (Technical Summary):
# Domain service for the recipient registry. Validates form input before persistence,
# composes the stored phone value and scopes every operation by the caller's user id.
# 🔗 Dependencies:
# RecipientRepository, AuthContext, app.shared.utils (validators, formatters)
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/recipients.py

import logging
from typing import List, Optional

from fastapi import Depends

from ..models.recipient import Recipient
from ..repositories.recipient_repository import RecipientRepository
from app.shared.core.dependencies import AuthContext
from app.shared.core.exceptions import NotFoundError, RepositoryError, ValidationError
from app.shared.utils.formatters import compose_phone_number
from app.shared.utils.validators import missing_fields

logger = logging.getLogger(__name__)

ALL_FIELDS_REQUIRED = "All fields are required"
RECIPIENT_NOT_FOUND = "Recipient not found"


class RecipientService:
    """
    Domain service for recipient registry business logic.
    """

    def __init__(self, recipient_repository: RecipientRepository = Depends()):
        self.recipient_repository = recipient_repository

    async def list_recipients(self, ctx: AuthContext) -> List[Recipient]:
        return await self.recipient_repository.list_for_user(ctx.user_id)

    async def get_recipient(self, ctx: AuthContext, recipient_id: int) -> Recipient:
        recipient = await self.recipient_repository.get_for_user(recipient_id, ctx.user_id)
        if recipient is None:
            raise NotFoundError(RECIPIENT_NOT_FOUND, resource_type="recipient", resource_id=recipient_id)
        return recipient

    async def add_recipient(
        self,
        ctx: AuthContext,
        name: Optional[str],
        phone_number: Optional[str],
        country_code: Optional[str],
        timezone: Optional[str],
    ) -> Recipient:
        """
        Add a recipient owned by the caller.

        Raises:
            ValidationError: "All fields are required"
            RepositoryError: "Failed to add recipient. Please try again."
        """
        self._validate(name, phone_number, country_code, timezone)

        recipient = Recipient(
            user_id=ctx.user_id,
            name=name.strip(),
            phone_number=compose_phone_number(country_code, phone_number),
            timezone=timezone,
        )

        try:
            return await self.recipient_repository.create(recipient)
        except RepositoryError as e:
            logger.error(f"Error adding recipient for user {ctx.user_id}: {e.message}")
            raise RepositoryError(
                "Failed to add recipient. Please try again.",
                operation="create",
                entity="recipient"
            ) from e

    async def update_recipient(
        self,
        ctx: AuthContext,
        recipient_id: int,
        name: Optional[str],
        phone_number: Optional[str],
        country_code: Optional[str],
        timezone: Optional[str],
    ) -> Recipient:
        """
        Update a recipient, matching on both id and owner.
        """
        self._validate(name, phone_number, country_code, timezone)

        recipient = Recipient(
            id=recipient_id,
            user_id=ctx.user_id,
            name=name.strip(),
            phone_number=compose_phone_number(country_code, phone_number),
            timezone=timezone,
        )

        try:
            updated = await self.recipient_repository.update(recipient)
        except RepositoryError as e:
            logger.error(f"Error updating recipient {recipient_id}: {e.message}")
            raise RepositoryError(
                "Failed to update recipient. Please try again.",
                operation="update",
                entity="recipient"
            ) from e

        if updated is None:
            raise NotFoundError(RECIPIENT_NOT_FOUND, resource_type="recipient", resource_id=recipient_id)
        return updated

    def _validate(self, name, phone_number, country_code, timezone) -> None:
        missing = missing_fields({
            "name": name,
            "phoneNumber": phone_number,
            "countryCode": country_code,
            "timezone": timezone,
        })
        if missing:
            raise ValidationError(ALL_FIELDS_REQUIRED, field=missing[0])

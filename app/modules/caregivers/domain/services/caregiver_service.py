# 📄 File: app/modules/caregivers/domain/services/caregiver_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for putting a caregiver on someone's list and editing them. The same person
# (by email) is never stored twice, and only people with the right access can edit.
# 🧪 Purpose (Technical Summary):
# Domain service for the caregiver registry and linker. Add runs find-or-create then
# link, deleting a caregiver it created when linking fails. Update authorizes against
# the caller's link before touching the shared caregiver row.
# 🔗 Dependencies:
# CaregiverRepository, CaregiverLinkRepository, AuthContext, app.shared.utils
# 🔄 Connected Modules / Calls From:
# presentation/api/v1/caregivers.py

import logging
from typing import List, Optional

from fastapi import Depends

from ..models.caregiver import AccessLevel, Caregiver, CaregiverLink, LinkedCaregiver
from ..repositories.caregiver_repository import CaregiverLinkRepository, CaregiverRepository
from app.shared.core.dependencies import AuthContext
from app.shared.core.exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    CareAppException,
    DuplicateResourceError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from app.shared.utils.formatters import compose_phone_number
from app.shared.utils.validators import missing_fields, validate_choice, validate_email_address

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name, email, and phone number are required"
ACCESS_LEVELS = [level.value for level in AccessLevel]


def _reason(exc: CareAppException) -> str:
    return str(exc.details.get("reason") or exc.message)


class CaregiverService:
    """
    Domain service for caregiver registry and linking business logic.
    """

    def __init__(
        self,
        caregiver_repository: CaregiverRepository = Depends(),
        link_repository: CaregiverLinkRepository = Depends(),
    ):
        self.caregiver_repository = caregiver_repository
        self.link_repository = link_repository

    async def list_caregivers(self, ctx: AuthContext) -> List[LinkedCaregiver]:
        return await self.link_repository.list_for_user(ctx.user_id)

    # =========================================================================
    # ADD: FIND-OR-CREATE, THEN LINK
    # =========================================================================

    async def add_caregiver(
        self,
        ctx: AuthContext,
        name: Optional[str],
        email: Optional[str],
        phone_number: Optional[str],
        country_code: Optional[str],
        role: Optional[str] = None,
        access_level: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> LinkedCaregiver:
        """
        Add a caregiver to the caller's list.

        An existing caregiver with the same email is reused rather than duplicated.
        If linking fails, a caregiver created by this call is deleted again.
        """
        access_level = access_level or AccessLevel.VIEW.value
        email = self._validate(name, email, phone_number, country_code, access_level)

        try:
            caregiver = await self.caregiver_repository.get_by_email(email)
        except RepositoryError as e:
            logger.error(f"Error checking for existing caregiver {email}: {e.message}")
            raise RepositoryError(
                "Error checking for existing caregiver",
                operation="get_by_email",
                entity="caregiver"
            ) from e

        created = False
        if caregiver is None:
            try:
                caregiver = await self.caregiver_repository.create(
                    Caregiver(
                        name=name.strip(),
                        email=email,
                        phone_number=compose_phone_number(country_code, phone_number),
                        role=role or "Caregiver",
                        notes=notes or None,
                    )
                )
            except (RepositoryError, DuplicateResourceError) as e:
                logger.error(f"Error creating caregiver {email}: {e.message}")
                raise BusinessRuleViolationError(
                    f"Failed to create caregiver: {_reason(e)}",
                    rule="caregiver_create",
                    status_code=500
                ) from e
            created = True
        else:
            logger.info(f"Reusing existing caregiver {caregiver.id} for {email}")

        try:
            existing_link = await self.link_repository.get_link(ctx.user_id, caregiver.id)
        except RepositoryError as e:
            logger.error(f"Error checking caregiver relationship: {e.message}")
            raise RepositoryError(
                "Error checking caregiver relationship",
                operation="get_link",
                entity="user_caregiver"
            ) from e

        if existing_link is not None:
            raise DuplicateResourceError(
                "This caregiver is already in your list",
                resource_type="user_caregiver",
                value=str(caregiver.id)
            )

        try:
            link = await self.link_repository.create_link(
                CaregiverLink(
                    user_id=ctx.user_id,
                    caregiver_id=caregiver.id,
                    access_level=access_level,
                    added_by=ctx.user_id,
                )
            )
        except (RepositoryError, DuplicateResourceError) as e:
            logger.error(f"Error linking caregiver {caregiver.id} to user {ctx.user_id}: {e.message}")
            if created:
                await self._remove_orphan(caregiver.id)
            raise BusinessRuleViolationError(
                f"Failed to link caregiver: {_reason(e)}",
                rule="caregiver_link",
                status_code=500
            ) from e

        return LinkedCaregiver(caregiver=caregiver, link=link)

    async def _remove_orphan(self, caregiver_id: int) -> None:
        """Delete a caregiver created by a failed add. A row already rolled back is fine."""
        try:
            deleted = await self.caregiver_repository.delete(caregiver_id)
            logger.info(f"Compensating delete of caregiver {caregiver_id}: deleted={deleted}")
        except RepositoryError as e:
            logger.error(f"Compensating delete of caregiver {caregiver_id} failed: {e.message}")

    # =========================================================================
    # UPDATE
    # =========================================================================

    async def update_caregiver(
        self,
        ctx: AuthContext,
        caregiver_id: int,
        name: Optional[str],
        email: Optional[str],
        phone_number: Optional[str],
        country_code: Optional[str],
        role: Optional[str] = None,
        access_level: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> LinkedCaregiver:
        """
        Update a caregiver's shared fields and, optionally, the caller's own access level.

        Raises:
            AuthorizationError: No link, or the link does not allow editing
            DuplicateResourceError: The new email belongs to another caregiver
        """
        email = self._validate(name, email, phone_number, country_code, access_level)

        link = await self.link_repository.get_link(ctx.user_id, caregiver_id)
        if link is None:
            raise AuthorizationError(
                "You don't have access to this caregiver",
                resource_type="caregiver",
                resource_id=caregiver_id,
                user_id=ctx.user_id
            )

        caller = ctx.with_access_level(link.access_level)
        if not link.allows_edit_by(caller.user_id):
            logger.warning(
                f"User {caller.user_id} with {caller.access_level} access tried to edit caregiver {caregiver_id}"
            )
            raise AuthorizationError(
                "You don't have permission to edit this caregiver",
                resource_type="caregiver",
                resource_id=caregiver_id,
                required_permission="edit",
                user_id=caller.user_id
            )

        other = await self.caregiver_repository.get_by_email(email)
        if other is not None and other.id != caregiver_id:
            raise DuplicateResourceError(
                "A caregiver with this email already exists",
                resource_type="caregiver",
                field="email",
                value=email
            )

        current = await self.caregiver_repository.get_by_id(caregiver_id)
        if current is None:
            raise NotFoundError("Caregiver not found", resource_type="caregiver", resource_id=caregiver_id)

        updated = await self.caregiver_repository.update(
            current.model_copy(update={
                "name": name.strip(),
                "email": email,
                "phone_number": compose_phone_number(country_code, phone_number),
                "role": role or current.role,
                "notes": notes or None,
            })
        )
        if updated is None:
            raise NotFoundError("Caregiver not found", resource_type="caregiver", resource_id=caregiver_id)

        if access_level and access_level != link.access_level:
            link = await self.link_repository.update_access_level(link.id, access_level) or link

        return LinkedCaregiver(caregiver=updated, link=link)

    def _validate(
        self,
        name: Optional[str],
        email: Optional[str],
        phone_number: Optional[str],
        country_code: Optional[str],
        access_level: Optional[str],
    ) -> str:
        """Validate the caregiver form and return the normalized email."""
        missing = missing_fields({
            "name": name,
            "email": email,
            "phoneNumber": phone_number,
            "countryCode": country_code,
        })
        if missing:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE, field=missing[0])

        email = email.strip()
        email_result = validate_email_address(email)
        if not email_result.is_valid:
            raise ValidationError("Invalid email address", field="email", value=email)

        if access_level:
            level_result = validate_choice(access_level, ACCESS_LEVELS, "access level")
            if not level_result.is_valid:
                raise ValidationError(level_result.first_error, field="accessLevel", value=access_level)

        return email

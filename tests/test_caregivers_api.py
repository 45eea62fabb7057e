"""
Tests for the caregiver registry and the per-user caregiver links.
"""
import pytest
from sqlalchemy import select

from app.modules.caregivers.domain.models.caregiver import CaregiverLink
from app.modules.caregivers.domain.repositories.caregiver_repository import CaregiverLinkRepository
from app.modules.caregivers.domain.services.caregiver_service import CaregiverService
from app.modules.caregivers.infrastructure.database.caregiver_repository_impl import CaregiverRepositoryImpl
from app.modules.caregivers.infrastructure.database.models import CaregiverModel, UserCaregiverModel
from app.shared.core.dependencies import AuthContext
from app.shared.core.exceptions import BusinessRuleViolationError, RepositoryError
from app.shared.infrastructure.database import database_session
from tests.support import add_rows, fetch_all

CAREGIVER_FORM = {
    "name": "Nurse Kim",
    "email": "kim@example.com",
    "phoneNumber": "5559876543",
    "countryCode": "+1",
    "role": "Nurse",
    "notes": "Weekday mornings",
}


async def _add(client, headers, **overrides):
    return await client.post("/api/v1/caregivers", json=dict(CAREGIVER_FORM, **overrides), headers=headers)


class TestAddCaregiver:
    async def test_add_creates_caregiver_and_link(self, client, user):
        response = await _add(client, user["headers"])

        assert response.status_code == 200
        body = response.json()
        assert body["success"] == "Caregiver added successfully!"
        assert body["data"]["phone_number"] == "+1_5559876543"
        assert body["data"]["access_level"] == "view"
        assert body["data"]["added_by"] == user["id"]

        links = await fetch_all(UserCaregiverModel)
        assert [(link.user_id, link.added_by) for link in links] == [(user["id"], user["id"])]

    async def test_existing_email_is_reused(self, client, user, other_user):
        await _add(client, user["headers"])
        response = await _add(client, other_user["headers"], name="Kim Lee", phoneNumber="5550000000")

        assert response.status_code == 200
        caregivers = await fetch_all(CaregiverModel)
        assert len(caregivers) == 1
        assert caregivers[0].name == "Nurse Kim"
        assert len(await fetch_all(UserCaregiverModel)) == 2

    async def test_duplicate_link_is_rejected(self, client, user):
        await _add(client, user["headers"])
        response = await _add(client, user["headers"])

        assert response.status_code == 409
        assert response.json() == {"error": "This caregiver is already in your list"}
        assert len(await fetch_all(UserCaregiverModel)) == 1

    async def test_required_fields(self, client, user):
        response = await _add(client, user["headers"], email="")
        assert response.status_code == 422
        assert response.json() == {"error": "Name, email, and phone number are required"}
        assert await fetch_all(CaregiverModel) == []

    async def test_invalid_email(self, client, user):
        response = await _add(client, user["headers"], email="kim-at-example")
        assert response.status_code == 422
        assert response.json() == {"error": "Invalid email address"}

    async def test_invalid_access_level(self, client, user):
        response = await _add(client, user["headers"], accessLevel="owner")
        assert response.status_code == 422
        assert await fetch_all(CaregiverModel) == []


class TestListCaregivers:
    async def test_list_only_linked_caregivers(self, client, user, other_user):
        await _add(client, user["headers"])
        await _add(client, user["headers"], name="Aide Bo", email="bo@example.com")
        await _add(client, other_user["headers"], name="Neighbor Pat", email="pat@example.com")

        response = await client.get("/api/v1/caregivers", headers=user["headers"])

        assert response.status_code == 200
        assert [item["name"] for item in response.json()] == ["Aide Bo", "Nurse Kim"]


class TestUpdateCaregiver:
    async def test_creator_can_edit(self, client, user):
        caregiver_id = (await _add(client, user["headers"])).json()["data"]["id"]

        response = await client.put(
            f"/api/v1/caregivers/{caregiver_id}",
            json=dict(CAREGIVER_FORM, name="Nurse Kimberly", accessLevel="edit"),
            headers=user["headers"],
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] == "Caregiver updated successfully!"
        assert body["data"]["name"] == "Nurse Kimberly"
        assert body["data"]["access_level"] == "edit"

    async def test_unlinked_user_is_refused(self, client, user, other_user):
        caregiver_id = (await _add(client, user["headers"])).json()["data"]["id"]

        response = await client.put(
            f"/api/v1/caregivers/{caregiver_id}",
            json=dict(CAREGIVER_FORM, name="Someone Else"),
            headers=other_user["headers"],
        )

        assert response.status_code == 403
        assert response.json() == {"error": "You don't have access to this caregiver"}

    async def test_view_link_added_by_someone_else_cannot_edit(self, client, user, other_user):
        caregiver_id = (await _add(client, user["headers"])).json()["data"]["id"]
        await add_rows(
            UserCaregiverModel(
                user_id=other_user["id"],
                caregiver_id=caregiver_id,
                access_level="view",
                added_by=user["id"],
            )
        )

        response = await client.put(
            f"/api/v1/caregivers/{caregiver_id}",
            json=dict(CAREGIVER_FORM, name="Changed"),
            headers=other_user["headers"],
        )

        assert response.status_code == 403
        assert response.json() == {"error": "You don't have permission to edit this caregiver"}
        caregivers = await fetch_all(CaregiverModel)
        assert caregivers[0].name == "Nurse Kim"

    async def test_edit_link_allows_edit(self, client, user, other_user):
        caregiver_id = (await _add(client, user["headers"])).json()["data"]["id"]
        await add_rows(
            UserCaregiverModel(
                user_id=other_user["id"],
                caregiver_id=caregiver_id,
                access_level="edit",
                added_by=user["id"],
            )
        )

        response = await client.put(
            f"/api/v1/caregivers/{caregiver_id}",
            json=dict(CAREGIVER_FORM, role="Night nurse"),
            headers=other_user["headers"],
        )

        assert response.status_code == 200
        assert (await fetch_all(CaregiverModel))[0].role == "Night nurse"

    async def test_access_level_change_touches_only_callers_link(self, client, user, other_user):
        caregiver_id = (await _add(client, user["headers"])).json()["data"]["id"]
        await add_rows(
            UserCaregiverModel(
                user_id=other_user["id"],
                caregiver_id=caregiver_id,
                access_level="view",
                added_by=user["id"],
            )
        )

        response = await client.put(
            f"/api/v1/caregivers/{caregiver_id}",
            json=dict(CAREGIVER_FORM, accessLevel="edit"),
            headers=user["headers"],
        )

        assert response.status_code == 200
        assert response.json()["data"]["access_level"] == "edit"
        levels = {link.user_id: link.access_level for link in await fetch_all(UserCaregiverModel)}
        assert levels == {user["id"]: "edit", other_user["id"]: "view"}

    async def test_email_taken_by_another_caregiver(self, client, user):
        await _add(client, user["headers"], name="Aide Bo", email="bo@example.com")
        caregiver_id = (await _add(client, user["headers"])).json()["data"]["id"]

        response = await client.put(
            f"/api/v1/caregivers/{caregiver_id}",
            json=dict(CAREGIVER_FORM, email="bo@example.com"),
            headers=user["headers"],
        )

        assert response.status_code == 409
        assert response.json() == {"error": "A caregiver with this email already exists"}


class FailingLinkRepository(CaregiverLinkRepository):
    """Link repository whose inserts always fail."""

    async def get_link(self, user_id, caregiver_id):
        return None

    async def create_link(self, link: CaregiverLink) -> CaregiverLink:
        raise RepositoryError(
            "Failed to link caregiver",
            operation="create_link",
            entity="user_caregiver",
            details={"reason": "connection reset"},
        )

    async def update_access_level(self, link_id, access_level):
        return None

    async def list_for_user(self, user_id):
        return []


class TestAddCompensation:
    """A caregiver created by a failed add does not outlive it."""

    @pytest.fixture
    def deletes(self, monkeypatch):
        """Record compensating deletes while still running them."""
        calls = []
        original_delete = CaregiverRepositoryImpl.delete

        async def recording_delete(self, caregiver_id):
            calls.append(caregiver_id)
            return await original_delete(self, caregiver_id)

        monkeypatch.setattr(CaregiverRepositoryImpl, "delete", recording_delete)
        return calls

    async def test_created_caregiver_is_removed_when_link_fails(self, user, deletes):
        ctx = AuthContext(user_id=user["id"], supabase_id="supabase-owner")

        async with database_session() as session:
            service = CaregiverService(CaregiverRepositoryImpl(session), FailingLinkRepository())
            with pytest.raises(BusinessRuleViolationError) as exc_info:
                await service.add_caregiver(
                    ctx,
                    name="Nurse Kim",
                    email="kim@example.com",
                    phone_number="5559876543",
                    country_code="+1",
                )
            created_ids = [caregiver.id for caregiver in (await session.execute(select(CaregiverModel))).scalars()]

        assert exc_info.value.message == "Failed to link caregiver: connection reset"
        assert exc_info.value.status_code == 500
        assert len(deletes) == 1
        assert created_ids == []
        assert await fetch_all(CaregiverModel) == []

    async def test_reused_caregiver_is_kept_when_link_fails(self, client, user, other_user, deletes):
        await _add(client, other_user["headers"])
        ctx = AuthContext(user_id=user["id"], supabase_id="supabase-owner")

        async with database_session() as session:
            service = CaregiverService(CaregiverRepositoryImpl(session), FailingLinkRepository())
            with pytest.raises(BusinessRuleViolationError):
                await service.add_caregiver(
                    ctx,
                    name="Nurse Kim",
                    email="kim@example.com",
                    phone_number="5559876543",
                    country_code="+1",
                )

        assert len(await fetch_all(CaregiverModel)) == 1
        assert deletes == []

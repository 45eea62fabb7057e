"""
Tests for the reminder registry and the calendar view built on it.
"""
from app.modules.reminders.infrastructure.database.models import ReminderModel
from tests.support import fetch_all


def _form(recipient_id, **overrides):
    form = {
        "recipientId": recipient_id,
        "name": "Blood pressure pill",
        "category": "Medicine",
        "delivery_method": "call",
        "hour": "9",
        "minute": "00",
        "ampm": "AM",
        "monday": True,
        "wednesday": True,
        "notes": "Take with breakfast",
    }
    form.update(overrides)
    return form


async def _add(client, headers, recipient_id, **overrides):
    response = await client.post("/api/v1/reminders", json=_form(recipient_id, **overrides), headers=headers)
    assert response.status_code == 200, response.text
    return response.json()["data"]


class TestAddReminder:
    async def test_add_stores_formatted_time(self, client, user, recipient):
        data = await _add(client, user["headers"], recipient["id"])

        assert data["time"] == "9:00AM"
        assert (data["hour"], data["minute"], data["ampm"]) == ("9", "00", "AM")
        assert data["day_string"] == "Mon, Wed"
        assert data["monday"] and data["wednesday"] and not data["friday"]

        stored = await fetch_all(ReminderModel)
        assert [(r.parent_id, r.time) for r in stored] == [(recipient["id"], "9:00AM")]

    async def test_success_message(self, client, user, recipient):
        response = await client.post("/api/v1/reminders", json=_form(recipient["id"]), headers=user["headers"])
        assert response.json()["success"] == "Reminder added"

    async def test_no_days_is_allowed(self, client, user, recipient):
        data = await _add(client, user["headers"], recipient["id"], monday=False, wednesday=False)
        assert data["day_string"] == "No days selected"

    async def test_all_fields_required(self, client, user, recipient):
        for field in ["name", "category", "delivery_method", "hour", "minute", "ampm", "notes"]:
            response = await client.post(
                "/api/v1/reminders",
                json=_form(recipient["id"], **{field: ""}),
                headers=user["headers"],
            )
            assert response.status_code == 422
            assert response.json() == {"error": "All fields are required"}

        response = await client.post("/api/v1/reminders", json=_form(None), headers=user["headers"])
        assert response.status_code == 422
        assert await fetch_all(ReminderModel) == []

    async def test_rejects_unknown_category(self, client, user, recipient):
        response = await client.post(
            "/api/v1/reminders",
            json=_form(recipient["id"], category="Chores"),
            headers=user["headers"],
        )
        assert response.status_code == 422
        assert "category" in response.json()["error"]

    async def test_rejects_out_of_range_hour(self, client, user, recipient):
        response = await client.post(
            "/api/v1/reminders",
            json=_form(recipient["id"], hour="13"),
            headers=user["headers"],
        )
        assert response.status_code == 422
        assert response.json() == {"error": "Invalid hour: must be 1-12"}

    async def test_rejects_zero_padded_hour(self, client, user, recipient):
        for hour in ["09", "012"]:
            response = await client.post(
                "/api/v1/reminders",
                json=_form(recipient["id"], hour=hour),
                headers=user["headers"],
            )
            assert response.status_code == 422
            assert response.json() == {"error": "Invalid hour: must be 1-12"}

        assert await fetch_all(ReminderModel) == []

    async def test_rejects_single_digit_minute(self, client, user, recipient):
        response = await client.post(
            "/api/v1/reminders",
            json=_form(recipient["id"], minute="5"),
            headers=user["headers"],
        )
        assert response.status_code == 422
        assert response.json() == {"error": "Invalid minute: must be 00-59"}

    async def test_recipient_of_another_user(self, client, other_user, recipient):
        response = await client.post("/api/v1/reminders", json=_form(recipient["id"]), headers=other_user["headers"])
        assert response.status_code == 404
        assert response.json() == {"error": "Recipient not found"}


class TestListReminders:
    async def test_recipient_reminders_in_time_order(self, client, user, recipient):
        await _add(client, user["headers"], recipient["id"], name="Evening walk", category="Activity", hour="7", ampm="PM")
        await _add(client, user["headers"], recipient["id"], name="Lunch pill", hour="12", minute="30", ampm="PM")
        await _add(client, user["headers"], recipient["id"], name="Morning pill", hour="8", minute="15")

        response = await client.get(f"/api/v1/recipients/{recipient['id']}/reminders", headers=user["headers"])

        assert response.status_code == 200
        assert [item["name"] for item in response.json()] == ["Morning pill", "Lunch pill", "Evening walk"]

    async def test_other_user_cannot_list(self, client, other_user, recipient):
        response = await client.get(f"/api/v1/recipients/{recipient['id']}/reminders", headers=other_user["headers"])
        assert response.status_code == 404


class TestBrowseReminders:
    async def test_defaults_to_calls(self, client, user, recipient):
        await _add(client, user["headers"], recipient["id"], name="Call me")
        await _add(client, user["headers"], recipient["id"], name="Text me", delivery_method="text")

        response = await client.get("/api/v1/reminders", headers=user["headers"])

        body = response.json()
        assert [item["name"] for item in body["items"]] == ["Call me"]
        assert body["items"][0]["recipient_name"] == "Grandma Rose"

        texts = await client.get("/api/v1/reminders", params={"delivery_method": "text"}, headers=user["headers"])
        assert [item["name"] for item in texts.json()["items"]] == ["Text me"]

    async def test_pagination(self, client, user, recipient):
        for hour in range(1, 13):
            await _add(client, user["headers"], recipient["id"], name=f"Reminder {hour}", hour=str(hour))

        first = (await client.get("/api/v1/reminders", headers=user["headers"])).json()
        second = (await client.get("/api/v1/reminders", params={"page": 2}, headers=user["headers"])).json()

        assert (first["total"], first["page_size"], first["total_pages"]) == (12, 10, 2)
        assert len(first["items"]) == 10
        assert first["items"][0]["name"] == "Reminder 12"
        assert [item["name"] for item in second["items"]] == ["Reminder 10", "Reminder 11"]

    async def test_filter_by_recipient(self, client, user, recipient):
        other = await client.post(
            "/api/v1/recipients",
            json={"name": "Uncle Ben", "phoneNumber": "5550001111", "countryCode": "+1", "timezone": "UTC"},
            headers=user["headers"],
        )
        other_id = other.json()["data"]["id"]
        await _add(client, user["headers"], recipient["id"], name="Rose pill")
        await _add(client, user["headers"], other_id, name="Ben pill")

        response = await client.get(
            "/api/v1/reminders",
            params={"recipient_id": other_id},
            headers=user["headers"],
        )
        assert [item["name"] for item in response.json()["items"]] == ["Ben pill"]

    async def test_invalid_delivery_method(self, client, user):
        response = await client.get("/api/v1/reminders", params={"delivery_method": "fax"}, headers=user["headers"])
        assert response.status_code == 422

    async def test_scoped_to_caller(self, client, other_user, user, recipient):
        await _add(client, user["headers"], recipient["id"])
        response = await client.get("/api/v1/reminders", headers=other_user["headers"])
        assert response.json()["total"] == 0


class TestUpdateAndDeleteReminder:
    async def test_update(self, client, user, recipient):
        reminder = await _add(client, user["headers"], recipient["id"])

        response = await client.put(
            f"/api/v1/reminders/{reminder['id']}",
            json=_form(recipient["id"], name="Evening pill", hour="8", ampm="PM", monday=False, friday=True),
            headers=user["headers"],
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert response.json()["success"] == "Reminder updated"
        assert (data["name"], data["time"], data["day_string"]) == ("Evening pill", "8:00PM", "Wed, Fri")

    async def test_update_by_other_user(self, client, user, other_user, recipient):
        reminder = await _add(client, user["headers"], recipient["id"])

        response = await client.put(
            f"/api/v1/reminders/{reminder['id']}",
            json=_form(recipient["id"], name="Hijacked"),
            headers=other_user["headers"],
        )

        assert response.status_code == 404
        assert (await fetch_all(ReminderModel))[0].name == "Blood pressure pill"

    async def test_delete(self, client, user, recipient):
        reminder = await _add(client, user["headers"], recipient["id"])

        response = await client.delete(f"/api/v1/reminders/{reminder['id']}", headers=user["headers"])

        assert response.status_code == 200
        assert response.json() == {"success": "Reminder deleted"}
        assert await fetch_all(ReminderModel) == []

    async def test_delete_missing(self, client, user):
        response = await client.delete("/api/v1/reminders/999", headers=user["headers"])
        assert response.status_code == 404
        assert response.json() == {"error": "Reminder not found"}


class TestCalendarEvents:
    async def test_events_for_each_selected_day(self, client, user, recipient):
        reminder = await _add(client, user["headers"], recipient["id"])

        response = await client.get("/api/v1/calendar/events", headers=user["headers"])

        assert response.status_code == 200
        events = response.json()
        assert [event["id"] for event in events] == [f"{reminder['id']}-1", f"{reminder['id']}-3"]
        assert events[0]["title"] == "Blood pressure pill (Grandma Rose)"
        assert events[0]["daysOfWeek"] == [1]
        assert events[0]["startTime"] == "9:00AM"
        assert events[0]["extendedProps"]["recipient"]["id"] == recipient["id"]

    async def test_events_filtered_by_delivery_method(self, client, user, recipient):
        await _add(client, user["headers"], recipient["id"], delivery_method="text")

        response = await client.get(
            "/api/v1/calendar/events",
            params={"delivery_method": "call"},
            headers=user["headers"],
        )
        assert response.json() == []

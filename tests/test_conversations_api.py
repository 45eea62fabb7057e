"""
Tests for the per-recipient conversation log of answered calls and texts.
"""
from datetime import datetime, timedelta

from app.modules.conversation_logs.infrastructure.database.models import ScheduledCallModel, ScheduledTextModel
from app.modules.reminders.infrastructure.database.models import ReminderModel
from tests.support import add_rows

BASE_TIME = datetime(2026, 10, 1, 9, 0)


def _call(recipient_id, hours, response, status="completed", **kwargs):
    return ScheduledCallModel(
        parent_id=recipient_id,
        scheduled_time=BASE_TIME + timedelta(hours=hours),
        status=status,
        ai_agent_response=response,
        **kwargs,
    )


class TestConversationLog:
    async def test_only_answered_entries_newest_first(self, client, user, recipient):
        await add_rows(
            _call(recipient["id"], 0, "Took the morning pill."),
            _call(recipient["id"], 2, None, status="failed"),
            _call(recipient["id"], 4, "Already had lunch."),
        )

        response = await client.get(f"/api/v1/recipients/{recipient['id']}/conversations", headers=user["headers"])

        assert response.status_code == 200
        body = response.json()
        assert [entry["ai_agent_response"] for entry in body["calls"]] == ["Already had lunch.", "Took the morning pill."]
        assert body["texts"] == []

    async def test_entries_carry_their_reminder(self, client, user, recipient):
        reminder = ReminderModel(
            parent_id=recipient["id"],
            name="Blood pressure pill",
            category="Medicine",
            delivery_method="text",
            time="9:00AM",
            notes="With food",
        )
        await add_rows(reminder)
        await add_rows(
            ScheduledTextModel(
                parent_id=recipient["id"],
                reminder_id=reminder.id,
                scheduled_time=BASE_TIME,
                status="completed",
                ai_agent_response="Yes, taken.",
            )
        )

        response = await client.get(f"/api/v1/recipients/{recipient['id']}/conversations", headers=user["headers"])

        text = response.json()["texts"][0]
        assert text["reminder"] == {"name": "Blood pressure pill", "category": "Medicine", "delivery_method": "text"}

    async def test_display_time_prefers_last_attempt(self, client, user, recipient):
        attempted = BASE_TIME + timedelta(minutes=7)
        await add_rows(
            _call(recipient["id"], 0, "Answered late.", last_attempt_time=attempted),
            _call(recipient["id"], -1, "Answered on time."),
        )

        response = await client.get(f"/api/v1/recipients/{recipient['id']}/conversations", headers=user["headers"])

        late, on_time = response.json()["calls"]
        assert late["display_time"].startswith("2026-10-01T09:07")
        assert on_time["display_time"] == on_time["scheduled_time"]

    async def test_limit(self, client, user, recipient):
        await add_rows(*[_call(recipient["id"], hour, f"Reply {hour}") for hour in range(5)])

        response = await client.get(
            f"/api/v1/recipients/{recipient['id']}/conversations",
            params={"limit": 2},
            headers=user["headers"],
        )

        assert [entry["ai_agent_response"] for entry in response.json()["calls"]] == ["Reply 4", "Reply 3"]

    async def test_other_user_gets_not_found(self, client, other_user, recipient):
        response = await client.get(
            f"/api/v1/recipients/{recipient['id']}/conversations",
            headers=other_user["headers"],
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Recipient not found"}

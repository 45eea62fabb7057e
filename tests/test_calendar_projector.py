"""
Tests for projecting weekly reminders into calendar events.
"""
from datetime import date

from app.modules.calendar.domain.services.projector import DEFAULT_PALETTE, project_reminders
from app.modules.care_recipients.domain.models.recipient import Recipient
from app.modules.reminders.domain.models.reminder import Reminder

TODAY = date(2026, 10, 19)


def _recipient(recipient_id: int, name: str) -> Recipient:
    return Recipient(id=recipient_id, user_id=1, name=name, phone_number="+1_5551234567", timezone="UTC")


def _reminder(reminder_id: int, parent_id: int, **days) -> Reminder:
    return Reminder(
        id=reminder_id,
        parent_id=parent_id,
        name="Blood pressure pill",
        category="Medicine",
        delivery_method="call",
        time="9:00AM",
        **days,
    )


class TestProjectReminders:
    """One event per selected weekday, recurring over a three-year window."""

    def test_one_event_per_selected_day(self):
        events = project_reminders(
            [_reminder(7, 1, monday=True, wednesday=True)],
            [_recipient(1, "Grandma Rose")],
            today=TODAY,
        )

        assert [event.id for event in events] == ["7-1", "7-3"]
        assert [event.days_of_week for event in events] == [[1], [3]]

        event = events[0]
        assert event.title == "Blood pressure pill (Grandma Rose)"
        assert event.start_time == "9:00AM"
        assert event.start_recur == "2025-01-01"
        assert event.end_recur == "2027-12-31"
        assert event.text_color == "#ffffff"
        assert event.extended_props["recipient"]["name"] == "Grandma Rose"
        assert event.extended_props["reminder"]["id"] == 7

    def test_sunday_is_day_zero(self):
        events = project_reminders([_reminder(3, 1, sunday=True)], [_recipient(1, "Rose")], today=TODAY)
        assert [event.id for event in events] == ["3-0"]

    def test_reminder_without_days_has_no_events(self):
        assert project_reminders([_reminder(7, 1)], [_recipient(1, "Rose")], today=TODAY) == []

    def test_unknown_recipient(self):
        events = project_reminders([_reminder(7, 99, friday=True)], [], today=TODAY)
        assert events[0].title == "Blood pressure pill (Unknown)"
        assert events[0].extended_props["recipient"] is None

    def test_colours_follow_recipient_position(self):
        recipients = [_recipient(index, f"Recipient {index}") for index in range(1, 7)]
        reminders = [_reminder(10 + index, index, monday=True) for index in range(1, 7)]

        events = project_reminders(reminders, recipients, today=TODAY)

        colours = [event.background_color for event in events]
        assert colours[:5] == DEFAULT_PALETTE
        assert colours[5] == DEFAULT_PALETTE[0]
        assert all(event.border_color == event.background_color for event in events)

    def test_custom_palette(self):
        events = project_reminders(
            [_reminder(1, 2, tuesday=True)],
            [_recipient(1, "A"), _recipient(2, "B")],
            today=TODAY,
            palette=["#111111", "#222222"],
        )
        assert events[0].background_color == "#222222"

    def test_serializes_with_camel_case_keys(self):
        event = project_reminders([_reminder(7, 1, monday=True)], [_recipient(1, "Rose")], today=TODAY)[0]
        payload = event.model_dump(by_alias=True)
        assert {"daysOfWeek", "startTime", "startRecur", "endRecur", "backgroundColor", "extendedProps"} <= set(payload)

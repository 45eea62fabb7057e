"""
Tests for the shared phone helpers, form validators and reminder time helpers.
"""
from app.modules.reminders.domain.models.reminder import Reminder
from app.modules.reminders.domain.services.time_format import (
    day_string,
    format_time_string,
    parse_time_string,
    time_sort_key,
)
from app.shared.utils.formatters import (
    compose_phone_number,
    format_phone_for_display,
    split_phone_number,
)
from app.shared.utils.validators import missing_fields, validate_choice, validate_email_address


class TestPhoneNumbers:
    """Stored phone values are ``{countryCode}_{digits}``."""

    def test_compose_keeps_country_code_verbatim(self):
        assert compose_phone_number("+1", "5551234567") == "+1_5551234567"
        assert compose_phone_number("+1_US", "5551234567") == "+1_US_5551234567"

    def test_split_bare_dialling_code(self):
        assert split_phone_number("+44_2071234567") == ("+44", "2071234567")

    def test_split_region_code(self):
        assert split_phone_number("+1_US_5551234567") == ("+1_US", "5551234567")

    def test_split_without_country_code(self):
        assert split_phone_number("5551234567") == ("", "5551234567")
        assert split_phone_number(None) == ("", "")

    def test_display(self):
        assert format_phone_for_display("+1_US_5551234567") == "+1 5551234567"
        assert format_phone_for_display("+44_2071234567") == "+44 2071234567"
        assert format_phone_for_display("") == ""


class TestValidators:
    def test_missing_fields_treats_whitespace_as_empty(self):
        assert missing_fields({"name": "Mom", "timezone": " ", "phone": None}) == ["timezone", "phone"]

    def test_email_validation(self):
        assert validate_email_address("helper@example.com").is_valid
        assert not validate_email_address("not-an-email").is_valid
        assert not validate_email_address("").is_valid

    def test_choice_lists_allowed_values(self):
        result = validate_choice("fax", ["call", "text"], "delivery_method")
        assert not result.is_valid
        assert result.first_error == "Invalid delivery_method: must be one of call, text"


class TestTimeFormat:
    def test_format_and_parse(self):
        assert format_time_string("9", "05", "PM") == "9:05PM"
        assert parse_time_string("9:05PM") == {"hour": "9", "minute": "05", "ampm": "PM"}

    def test_every_form_time_survives_a_round_trip(self):
        for hour in range(1, 13):
            for minute in ["00", "15", "30", "45"]:
                for ampm in ["AM", "PM"]:
                    stored = format_time_string(str(hour), minute, ampm)
                    assert parse_time_string(stored) == {"hour": str(hour), "minute": minute, "ampm": ampm}

    def test_unparseable_time_falls_back_to_midnight(self):
        assert parse_time_string("soon") == {"hour": "12", "minute": "00", "ampm": "AM"}

    def test_sort_key_orders_through_the_day(self):
        times = ["1:00PM", "12:30AM", "9:00AM", "12:00PM", "11:59PM"]
        assert sorted(times, key=time_sort_key) == ["12:30AM", "9:00AM", "12:00PM", "1:00PM", "11:59PM"]


class TestDayString:
    def _reminder(self, **days) -> Reminder:
        return Reminder(
            parent_id=1,
            name="Pills",
            category="Medicine",
            delivery_method="call",
            time="9:00AM",
            **days,
        )

    def test_every_day(self):
        days = {day: True for day in ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]}
        assert day_string(self._reminder(**days)) == "Every day"

    def test_no_days(self):
        assert day_string(self._reminder()) == "No days selected"

    def test_selected_days_in_week_order(self):
        assert day_string(self._reminder(sunday=True, monday=True, wednesday=True)) == "Mon, Wed, Sun"

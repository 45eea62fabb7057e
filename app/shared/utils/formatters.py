# 📄 File: app/shared/utils/formatters.py

# 🧭 Purpose (Layman Explanation):
# Turns stored phone numbers into the pieces and text the screens show,
# like "+1 5551234567" instead of "+1_US_5551234567".

# 🧪 Purpose (Technical Summary):
# Formatting utilities for the stored ``{countryCode}_{digits}`` phone representation
# (compose, split, display) for API responses.

# 🔗 Dependencies:
# - typing

# 🔄 Connected Modules / Calls From:
# Used by: care_recipients and caregivers services and schemas, devices schemas

from typing import Optional, Tuple


PHONE_SEPARATOR = "_"


def compose_phone_number(country_code: str, phone_digits: str) -> str:
    """
    Build the stored phone value.

    The country code is kept verbatim, so a form value of ``+1_US`` yields
    ``+1_US_5551234567`` and ``+1`` yields ``+1_5551234567``.
    """
    return f"{country_code}{PHONE_SEPARATOR}{phone_digits}"


def split_phone_number(phone_number: Optional[str]) -> Tuple[str, str]:
    """
    Split a stored phone value into ``(country_code, phone_digits)``.

    Three or more parts means the country code carries a region (``+1_US``);
    two parts means a bare dialling code; a single part has no country code.
    """
    if not phone_number:
        return "", ""

    parts = phone_number.split(PHONE_SEPARATOR)

    if len(parts) >= 3:
        return PHONE_SEPARATOR.join(parts[:2]), PHONE_SEPARATOR.join(parts[2:])
    if len(parts) == 2:
        return parts[0], parts[1]
    return "", parts[0]


def format_phone_for_display(phone_number: Optional[str]) -> str:
    """
    Human readable phone number.

    Example:
        format_phone_for_display("+1_US_5551234567") -> "+1 5551234567"
    """
    if not phone_number:
        return ""

    parts = phone_number.split(PHONE_SEPARATOR)

    if len(parts) >= 3:
        return f"{parts[0]} {''.join(parts[2:])}"
    if len(parts) == 2:
        return f"{parts[0]} {parts[1]}"
    return phone_number.replace(PHONE_SEPARATOR, " ")


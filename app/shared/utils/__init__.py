# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A toolbox of small helpers the rest of the care app uses for logging, checking form
# input and formatting phone numbers.

# 🧪 Purpose (Technical Summary):
# Utilities package: structured logging, validators, formatters and general helpers.

# 🔗 Dependencies:
# - python-json-logger, email-validator

# 🔄 Connected Modules / Calls From:
# - All modules

from .formatters import compose_phone_number, format_phone_for_display, split_phone_number
from .helpers import Timer, is_empty_or_whitespace, mask_sensitive_data, utc_now
from .logging import get_logger, log_context, setup_logging
from .validators import ValidationResult, missing_fields, validate_choice, validate_email_address

__all__ = [
    "compose_phone_number",
    "format_phone_for_display",
    "split_phone_number",
    "Timer",
    "is_empty_or_whitespace",
    "mask_sensitive_data",
    "utc_now",
    "get_logger",
    "log_context",
    "setup_logging",
    "ValidationResult",
    "missing_fields",
    "validate_choice",
    "validate_email_address",
]

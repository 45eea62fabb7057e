# 📄 File: app/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# Checks that what people type into the forms is usable before anything is saved,
# like making sure nothing required was left empty and that emails look like emails.
# 🧪 Purpose (Technical Summary):
# Reusable validation functions for form input: required-field detection, email format
# validation (email-validator) and enum membership checks.
# 🔗 Dependencies:
# email-validator, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# Domain services of every module, before any persistence call

from typing import Any, Dict, Iterable, List

from email_validator import EmailNotValidError, validate_email

from app.shared.utils.helpers import is_empty_or_whitespace


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool, errors: List[str] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False

    @property
    def first_error(self) -> str:
        return self.errors[0] if self.errors else ""


def missing_fields(values: Dict[str, Any]) -> List[str]:
    """
    Names of the fields that are None, empty or whitespace only.

    Example:
        missing_fields({"name": "Mom", "timezone": " "}) -> ["timezone"]
    """
    return [field for field, value in values.items() if is_empty_or_whitespace(value)]


def validate_email_address(email: str) -> ValidationResult:
    """
    Validate email address format. Deliverability is not checked.
    """
    result = ValidationResult(True)

    if not email or not isinstance(email, str):
        result.add_error("Email address is required")
        return result

    email = email.strip()

    if len(email) > 254:
        result.add_error("Email address is too long (max 254 characters)")
        return result

    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        result.add_error(f"Invalid email format: {str(e)}")

    return result


def validate_choice(value: Any, allowed: Iterable[str], field: str) -> ValidationResult:
    """Check that ``value`` is one of ``allowed``."""
    result = ValidationResult(True)
    allowed = list(allowed)
    if value not in allowed:
        result.add_error(f"Invalid {field}: must be one of {', '.join(allowed)}")
    return result

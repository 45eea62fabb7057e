# 📄 File: app/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small everyday tools used all over the app, like getting the current time or hiding
# private details before something is written to the logs.

# 🧪 Purpose (Technical Summary):
# General purpose helpers: timezone-aware timestamps, blank-value checks, sensitive data
# masking for log output and a simple timing context manager.

# 🔗 Dependencies:
# - datetime: Timestamps
# - re: Masking patterns
# - time: Timer

# 🔄 Connected Modules / Calls From:
# Used by: ORM models (timestamps), validators, request logging middleware, device sync

import re
import time
from datetime import datetime, timezone
from typing import Any, Dict

from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def is_empty_or_whitespace(value: Any) -> bool:
    """Check if value is None, empty, or only whitespace."""
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (list, dict, tuple, set)):
        return len(value) == 0
    return False


def mask_sensitive_data(
    text: str,
    patterns: Dict[str, str] = None,
    mask_char: str = '*'
) -> str:
    """
    Mask sensitive data in text.

    Emails keep the first character of the user and domain; other matches keep
    their first and last character.
    """
    if not text:
        return text

    default_patterns = {
        'email': r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}',
        'phone': r'\b\d{3}[-.]?\d{3}[-.]?\d{4}\b',
    }

    patterns = patterns or default_patterns
    masked_text = text

    for pattern_name, pattern in patterns.items():
        def mask_match(match, pattern_name=pattern_name):
            matched_text = match.group(0)
            if pattern_name == 'email':
                username, _, domain = matched_text.partition('@')
                domain_name, _, domain_rest = domain.partition('.')
                masked_username = username[0] + mask_char * (len(username) - 1)
                masked_domain = domain_name[0] + mask_char * (len(domain_name) - 1)
                return f"{masked_username}@{masked_domain}.{domain_rest}"

            if len(matched_text) <= 2:
                return mask_char * len(matched_text)
            return matched_text[0] + mask_char * (len(matched_text) - 2) + matched_text[-1]

        masked_text = re.sub(pattern, mask_match, masked_text)

    return masked_text


class Timer:
    """Context manager for timing operations."""

    def __init__(self, description: str = "Operation"):
        self.description = description
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.perf_counter()
        logger.debug(f"{self.description} took {self.duration:.3f} seconds")

    @property
    def duration(self) -> float:
        """Duration in seconds, or the elapsed time so far while still running."""
        if self.start_time is None:
            return 0.0
        end_time = self.end_time if self.end_time is not None else time.perf_counter()
        return end_time - self.start_time

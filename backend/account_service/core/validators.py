"""Field Validators — pure predicates over raw request fields.

Invariants:
    - Total functions: any input (None, int, list...) returns a bool, never raises
    - No IO, no state — callers turn False into a field-specific message

Design Decisions:
    - Email check is deliberately coarse (one @, one dot in the domain part);
      deliverability is not this service's concern
"""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MOBILE_PATTERN = re.compile(r"^[0-9]{10}$")

MIN_PASSWORD_LENGTH: int = 6
MIN_NAME_LENGTH: int = 2


def valid_email(value: object) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def valid_mobile(value: object) -> bool:
    """Exactly 10 ASCII digits."""
    return isinstance(value, str) and MOBILE_PATTERN.fullmatch(value) is not None


def valid_password(value: object) -> bool:
    """Non-empty and at least MIN_PASSWORD_LENGTH characters. No charset rule."""
    return isinstance(value, str) and len(value) >= MIN_PASSWORD_LENGTH


def valid_name(value: object) -> bool:
    """At least MIN_NAME_LENGTH characters once surrounding whitespace is stripped."""
    return isinstance(value, str) and len(value.strip()) >= MIN_NAME_LENGTH

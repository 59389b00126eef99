"""Account Rules — ordered, fail-fast input checks for each account operation.

Invariants:
    - PURE: no IO, no async — raise InputValidationError on the FIRST failing rule
    - Field order is fixed: name → email → mobile → password
    - Messages are single source of truth (constants below), shared by all operations
    - parse_user_id accepts ASCII digits only, value > 0

Design Decisions:
    - Rules raise instead of returning error dicts: the shell has exactly one place
      (api/error_handlers.py) that turns errors into responses
    - collect_profile_changes receives ONLY supplied fields (the schema decides
      presence), so absent and explicit-null stay distinguishable for profilepic
"""

import re

from account_service.core.domain_types import ProfileChanges, ProfileField, UserId
from account_service.core.errors import InputValidationError
from account_service.core.validators import (
    valid_email, valid_mobile, valid_name, valid_password,
)

NAME_MESSAGE = "Name must be at least 2 characters long"
EMAIL_MESSAGE = "Please provide a valid email address"
MOBILE_MESSAGE = "Please provide a valid 10-digit mobile number"
PASSWORD_MESSAGE = "Password must be at least 6 characters long"
NEW_PASSWORD_MESSAGE = "New password must be at least 6 characters long"
LOGIN_REQUIRED_MESSAGE = "Email and password are required"
PASSWORD_CHANGE_REQUIRED_MESSAGE = "Current password and new password are required"
USER_ID_MESSAGE = "Valid User ID is required"
NO_FIELDS_MESSAGE = "No fields to update"

_USER_ID_PATTERN = re.compile(r"[0-9]+")


def parse_user_id(raw: str) -> UserId:
    """Take the segment after the last '/' and require a positive integer."""
    segment = (raw or "").rsplit("/", 1)[-1]
    if not _USER_ID_PATTERN.fullmatch(segment) or int(segment) <= 0:
        raise InputValidationError(USER_ID_MESSAGE, field="userid")
    return UserId(int(segment))


def check_signup_fields(
    name: object, email: object, mobileno: object, password: object,
) -> None:
    if not valid_name(name):
        raise InputValidationError(NAME_MESSAGE, field="name")
    if not valid_email(email):
        raise InputValidationError(EMAIL_MESSAGE, field="email")
    if not valid_mobile(mobileno):
        raise InputValidationError(MOBILE_MESSAGE, field="mobileno")
    if not valid_password(password):
        raise InputValidationError(PASSWORD_MESSAGE, field="password")


def check_login_fields(email: object, password: object) -> None:
    """Both present, then email shape. Password strength is NOT checked at login."""
    if _blank(email) or _blank(password):
        raise InputValidationError(LOGIN_REQUIRED_MESSAGE)
    if not valid_email(email):
        raise InputValidationError(EMAIL_MESSAGE, field="email")


def check_password_change_fields(current: object, new: object) -> None:
    """Presence first, then new-password strength. Current password is verified later."""
    if _blank(current) or _blank(new):
        raise InputValidationError(PASSWORD_CHANGE_REQUIRED_MESSAGE)
    if not valid_password(new):
        raise InputValidationError(NEW_PASSWORD_MESSAGE, field="newPassword")


def collect_profile_changes(supplied: dict[ProfileField, object]) -> ProfileChanges:
    """Validate supplied profile fields in ProfileField order and return the change set.

    name/email/mobileno with a None value count as not supplied.
    profilepic is taken as-is, None included.
    """
    changes: ProfileChanges = {}
    for profile_field in ProfileField:
        if profile_field not in supplied:
            continue
        value = supplied[profile_field]
        if profile_field is ProfileField.PROFILEPIC:
            changes[profile_field] = value
            continue
        if value is None:
            continue
        _check_profile_value(profile_field, value)
        changes[profile_field] = (
            value.strip() if profile_field is ProfileField.NAME else value
        )
    return changes


def require_changes(changes: ProfileChanges) -> None:
    if not changes:
        raise InputValidationError(NO_FIELDS_MESSAGE)


def normalize_profilepic(value: str | None) -> str | None:
    """Empty or missing picture reference is stored as NULL at creation."""
    return value or None


def _blank(value: object) -> bool:
    """Missing for presence checks: null, empty string, false or zero. [] and {} count as sent."""
    return value is None or value == "" or value is False or (
        isinstance(value, (int, float)) and value == 0
    )


def _check_profile_value(profile_field: ProfileField, value: object) -> None:
    if profile_field is ProfileField.NAME and not valid_name(value):
        raise InputValidationError(NAME_MESSAGE, field="name")
    if profile_field is ProfileField.EMAIL and not valid_email(value):
        raise InputValidationError(EMAIL_MESSAGE, field="email")
    if profile_field is ProfileField.MOBILENO and not valid_mobile(value):
        raise InputValidationError(MOBILE_MESSAGE, field="mobileno")

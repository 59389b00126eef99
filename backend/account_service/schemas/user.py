"""User Schemas — Pydantic request/response shapes for the account endpoints.

Invariants:
    - Every request field is optional at the schema level: presence and format
      rules are enforced by core/account_rules.py so the first failing rule wins
      and messages stay exact
    - Rule-checked fields are typed Any: a bool, list or object reaches the
      validators unchanged and fails with its field-specific message
    - A JSON integer mobileno is read as its decimal string; profilepic must be a
      string or null, anything else → 400 "Invalid request data"
    - UserPublic has no password field — the digest cannot be serialized by accident

Design Decisions:
    - ProfileUpdateRequest.supplied_fields() reads model_fields_set: a key sent
      as null is "supplied", a missing key is not (matters for profilepic)
    - Wire names (currentPassword, newPassword, createdAt) via aliases, snake_case in Python
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from account_service.core.domain_types import ProfileField


class _AccountRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @field_validator("mobileno", mode="before", check_fields=False)
    @classmethod
    def integer_mobile_as_digits(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class SignupRequest(_AccountRequest):
    """Account creation payload."""
    name: Any = None
    email: Any = None
    mobileno: Any = None
    password: Any = None
    profilepic: str | None = None


class LoginRequest(_AccountRequest):
    email: Any = None
    password: Any = None


class ProfileUpdateRequest(_AccountRequest):
    """Partial profile update — any subset of the editable fields."""
    name: Any = None
    email: Any = None
    mobileno: Any = None
    profilepic: str | None = None

    def supplied_fields(self) -> dict[ProfileField, Any]:
        return {
            profile_field: getattr(self, profile_field.value)
            for profile_field in ProfileField
            if profile_field.value in self.model_fields_set
        }


class PasswordChangeRequest(_AccountRequest):
    current_password: Any = Field(None, alias="currentPassword")
    new_password: Any = Field(None, alias="newPassword")


# --- Responses ----------------------------------------------------------------

class UserPublic(BaseModel):
    """Public projection of a user. Never carries the password digest."""
    model_config = ConfigDict(populate_by_name=True)

    userid: int
    name: str
    email: str
    mobileno: str
    profilepic: str | None = None
    created_at: str | None = Field(None, alias="createdAt")


class UserResponse(BaseModel):
    message: str
    user: UserPublic


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str

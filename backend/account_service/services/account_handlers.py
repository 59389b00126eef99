"""Account Handlers — one method per account operation: validate → store → shape.

Invariants:
    - Rules run BEFORE any store call; a failing rule never mutates anything
    - Login answers "Invalid email or password" for unknown email AND wrong password
    - change_password checks new-password strength before verifying the current one
    - Results are plain dicts {"message": ..., [payload]}; the digest never appears
    - Store failures on writes surface as operation-specific 500 messages; failures
      on reads keep the generic "Internal server error"

Design Decisions:
    - Repository and hasher injected through __init__ (ADR: no ambient globals —
      api/dependencies.py builds them per request from Settings)
    - Errors raised, not returned: api/error_handlers.py is the one place that turns
      AccountServiceError into a response
"""

import logging

from account_service.core.account_rules import (
    check_login_fields,
    check_password_change_fields,
    check_signup_fields,
    collect_profile_changes,
    normalize_profilepic,
    parse_user_id,
    require_changes,
)
from account_service.core.credentials import PasswordHasher
from account_service.core.domain_types import ProfileField, UserId, UserRecord
from account_service.core.errors import (
    AuthenticationError,
    ConflictError,
    ErrorContext,
    ResourceNotFoundError,
    StoreError,
)
from account_service.core.repository_protocols import AccountRepository
from account_service.schemas.user import (
    LoginRequest,
    PasswordChangeRequest,
    ProfileUpdateRequest,
    SignupRequest,
)

logger = logging.getLogger(__name__)


class AccountHandlers:
    """Signup, login, edit-profile, change-password and get-user."""

    def __init__(self, repository: AccountRepository, hasher: PasswordHasher):
        self.repository = repository
        self.hasher = hasher

    async def signup(self, body: SignupRequest) -> dict:
        check_signup_fields(body.name, body.email, body.mobileno, body.password)

        existing = await self.repository.find_by_email_or_mobile(
            body.email, body.mobileno,
        )
        if existing:
            raise ConflictError()

        digest = self.hasher.hash(body.password)
        try:
            user = await self.repository.insert(
                name=body.name.strip(),
                email=body.email,
                mobileno=body.mobileno,
                password_digest=digest,
                profilepic=normalize_profilepic(body.profilepic),
            )
        except StoreError as e:
            raise StoreError(e.operation, "Failed to create user") from e

        return {
            "message": "User created successfully",
            "user": user.to_public(),
        }

    async def login(self, body: LoginRequest) -> dict:
        check_login_fields(body.email, body.password)

        user = await self.repository.find_by_email(body.email)
        if not user or not self.hasher.verify(body.password, user.password_digest):
            raise AuthenticationError()

        logger.info("Login succeeded", extra={"user_id": user.userid})
        return {"message": "Login successful", "user": user.to_public()}

    async def edit_profile(self, raw_user_id: str, body: ProfileUpdateRequest) -> dict:
        user_id = parse_user_id(raw_user_id)
        changes = collect_profile_changes(body.supplied_fields())

        await self._get_user_or_404(user_id)

        new_email = changes.get(ProfileField.EMAIL)
        new_mobile = changes.get(ProfileField.MOBILENO)
        if new_email is not None or new_mobile is not None:
            conflict = await self.repository.find_by_email_or_mobile_excluding(
                new_email, new_mobile, user_id,
            )
            if conflict:
                raise ConflictError(context=ErrorContext(user_id=user_id))

        require_changes(changes)

        try:
            user = await self.repository.update(user_id, changes)
        except StoreError as e:
            raise StoreError(e.operation, "Failed to update profile") from e

        return {
            "message": "Profile updated successfully",
            "user": user.to_public(),
        }

    async def change_password(
        self, raw_user_id: str, body: PasswordChangeRequest,
    ) -> dict:
        user_id = parse_user_id(raw_user_id)
        check_password_change_fields(body.current_password, body.new_password)

        user = await self._get_user_or_404(user_id)
        if not self.hasher.verify(body.current_password, user.password_digest):
            raise AuthenticationError(
                "Current password is incorrect",
                context=ErrorContext(user_id=user_id),
            )

        try:
            await self.repository.update_password(
                user_id, self.hasher.hash(body.new_password),
            )
        except StoreError as e:
            raise StoreError(e.operation, "Failed to change password") from e

        return {"message": "Password changed successfully"}

    async def get_user(self, raw_user_id: str) -> dict:
        user_id = parse_user_id(raw_user_id)
        user = await self._get_user_or_404(user_id)
        return {
            "message": "User retrieved successfully",
            "user": user.to_public(),
        }

    async def _get_user_or_404(self, user_id: UserId) -> UserRecord:
        user = await self.repository.find_by_id(user_id)
        if not user:
            raise ResourceNotFoundError(context=ErrorContext(user_id=user_id))
        return user

"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every store operation is one round trip, atomic at the single-row level
    - Implementations raise StoreError (500) or ConflictError (409), never driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake (ADR: no inheritance hierarchy)
    - Async in Protocol: implementations do IO; the rules that run around them stay sync and pure
"""

from typing import Protocol

from account_service.core.domain_types import (
    PasswordDigest, ProfileChanges, UserId, UserRecord,
)


class AccountRepository(Protocol):
    """Contract for user persistence — implemented by infrastructure/user_repository.py."""

    async def find_by_email_or_mobile(
        self, email: str, mobileno: str,
    ) -> UserRecord | None: ...

    async def find_by_email_or_mobile_excluding(
        self, email: str | None, mobileno: str | None, exclude_id: UserId,
    ) -> UserRecord | None: ...

    async def insert(
        self,
        name: str,
        email: str,
        mobileno: str,
        password_digest: PasswordDigest,
        profilepic: str | None,
    ) -> UserRecord: ...

    async def find_by_email(self, email: str) -> UserRecord | None: ...

    async def find_by_id(self, user_id: UserId) -> UserRecord | None: ...

    async def update(
        self, user_id: UserId, changes: ProfileChanges,
    ) -> UserRecord: ...

    async def update_password(
        self, user_id: UserId, new_digest: PasswordDigest,
    ) -> None: ...

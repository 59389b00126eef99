"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps a positive int assigned by the store — never constructed from raw input
      without going through account_rules.parse_user_id
    - PasswordDigest is the only representation of a password that reaches the store
    - ProfileField enumerates the ONLY columns a profile update may touch

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - UserRecord is a frozen dataclass, not the ORM row: core never imports SQLAlchemy
      (ADR: functional core / imperative shell)
    - str Enums: map 1:1 to column names and JSON keys without custom encoders
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity & Value Types ──────────────────────────────────────

UserId = NewType("UserId", int)
PasswordDigest = NewType("PasswordDigest", str)   # 64-char hex


# ─── Enums ───────────────────────────────────────────────────────

class ProfileField(str, Enum):
    """Columns editable through edit-profile, in validation order."""
    NAME = "name"
    EMAIL = "email"
    MOBILENO = "mobileno"
    PROFILEPIC = "profilepic"


# ─── Records ─────────────────────────────────────────────────────

ProfileChanges = dict[ProfileField, str | None]


@dataclass(frozen=True)
class UserRecord:
    """A stored user as seen by the core. password_digest never leaves the service."""
    userid: UserId
    name: str
    email: str
    mobileno: str
    password_digest: PasswordDigest
    profilepic: str | None
    created_at: datetime | None

    def to_public(self) -> dict:
        """Projection returned to callers — no digest."""
        return {
            "userid": self.userid,
            "name": self.name,
            "email": self.email,
            "mobileno": self.mobileno,
            "profilepic": self.profilepic,
            "createdAt": (
                self.created_at.isoformat() if self.created_at else None
            ),
        }

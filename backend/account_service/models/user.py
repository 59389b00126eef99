"""User ORM — the single persisted entity (table `users`).

Invariants:
    - userid is an autoincrement integer primary key, assigned by the store
    - email and mobileno carry UNIQUE constraints: the store is the final guard
      against two concurrent signups passing the application-level check
    - createdAt is assigned by the store (server_default) and never updated
    - password holds the hex digest only

Design Decisions:
    - Column names kept as the public API spells them (mobileno, profilepic, createdAt)
      so existing databases map without renames
    - to_record() converts to core's UserRecord: handlers never see ORM objects
"""

from datetime import datetime

from sqlalchemy import String, Text, Integer, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from account_service.core.domain_types import (
    PasswordDigest, UserId, UserRecord,
)
from account_service.db.base import Base


class User(Base):
    """Registered user account."""
    __tablename__ = "users"

    userid: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    mobileno: Mapped[str] = mapped_column(
        String(10), nullable=False, unique=True,
    )
    password: Mapped[str] = mapped_column(String(64), nullable=False)
    profilepic: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def to_record(self) -> UserRecord:
        return UserRecord(
            userid=UserId(self.userid),
            name=self.name,
            email=self.email,
            mobileno=self.mobileno,
            password_digest=PasswordDigest(self.password),
            profilepic=self.profilepic,
            created_at=self.created_at,
        )

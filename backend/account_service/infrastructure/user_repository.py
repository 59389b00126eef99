"""User Repository — SQLAlchemy implementation of core.repository_protocols.AccountRepository.

Invariants:
    - Every statement is parameterized; column names for partial updates come
      only from the ProfileField enum, never from request keys
    - IntegrityError (UNIQUE on email/mobileno) → ConflictError: a concurrent signup
      that slipped past the existence check still ends as 409
    - Any other SQLAlchemyError → StoreError after rollback; detail is logged here only
    - Returns core UserRecord values, never ORM instances

Design Decisions:
    - One repository per request, bound to the request's AsyncSession (ADR: no shared state)
    - Reads after writes use populate_existing so the identity map cannot serve a stale row
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from account_service.core.domain_types import (
    PasswordDigest, ProfileChanges, UserId, UserRecord,
)
from account_service.core.errors import (
    ConflictError, ErrorContext, ResourceNotFoundError, StoreError,
)
from account_service.models.user import User

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    """User persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _store_operation(
        self, operation: str, user_id: int | None = None,
    ) -> AsyncGenerator[None, None]:
        """Map driver failures to the error taxonomy, rolling back first."""
        try:
            yield
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Unique constraint rejected {operation}: {e.orig}",
                extra={"operation": operation, "user_id": user_id},
            )
            raise ConflictError(context=ErrorContext(user_id=user_id)) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Store failure during {operation}: {e}",
                extra={"operation": operation, "user_id": user_id},
                exc_info=True,
            )
            raise StoreError(
                operation, context=ErrorContext(user_id=user_id),
            ) from e

    async def find_by_email_or_mobile(
        self, email: str, mobileno: str,
    ) -> UserRecord | None:
        async with self._store_operation("find_by_email_or_mobile"):
            result = await self.db.execute(
                select(User)
                .where(or_(User.email == email, User.mobileno == mobileno))
                .limit(1),
            )
            user = result.scalars().first()
        return user.to_record() if user else None

    async def find_by_email_or_mobile_excluding(
        self, email: str | None, mobileno: str | None, exclude_id: UserId,
    ) -> UserRecord | None:
        """Uniqueness check for edits. None means 'this field is not changing'."""
        conditions = []
        if email is not None:
            conditions.append(User.email == email)
        if mobileno is not None:
            conditions.append(User.mobileno == mobileno)
        if not conditions:
            return None

        async with self._store_operation("find_by_email_or_mobile_excluding", exclude_id):
            result = await self.db.execute(
                select(User)
                .where(or_(*conditions))
                .where(User.userid != exclude_id)
                .limit(1),
            )
            user = result.scalars().first()
        return user.to_record() if user else None

    async def insert(
        self,
        name: str,
        email: str,
        mobileno: str,
        password_digest: PasswordDigest,
        profilepic: str | None,
    ) -> UserRecord:
        user = User(
            name=name, email=email, mobileno=mobileno,
            password=password_digest, profilepic=profilepic,
        )
        async with self._store_operation("insert"):
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
        logger.info("User created", extra={"user_id": user.userid})
        return user.to_record()

    async def find_by_email(self, email: str) -> UserRecord | None:
        async with self._store_operation("find_by_email"):
            result = await self.db.execute(
                select(User).where(User.email == email),
            )
            user = result.scalar_one_or_none()
        return user.to_record() if user else None

    async def find_by_id(self, user_id: UserId) -> UserRecord | None:
        async with self._store_operation("find_by_id", user_id):
            user = await self._load(user_id)
        return user.to_record() if user else None

    async def update(
        self, user_id: UserId, changes: ProfileChanges,
    ) -> UserRecord:
        """Apply only the supplied profile fields and return the refreshed row."""
        values = {
            profile_field.value: value
            for profile_field, value in changes.items()
        }
        async with self._store_operation("update", user_id):
            await self.db.execute(
                update(User).where(User.userid == user_id).values(**values),
            )
            await self.db.commit()
            user = await self._load(user_id)
        if not user:
            raise ResourceNotFoundError(context=ErrorContext(user_id=user_id))
        logger.info(
            f"Profile updated: {', '.join(sorted(values))}",
            extra={"user_id": user_id},
        )
        return user.to_record()

    async def update_password(
        self, user_id: UserId, new_digest: PasswordDigest,
    ) -> None:
        async with self._store_operation("update_password", user_id):
            await self.db.execute(
                update(User)
                .where(User.userid == user_id)
                .values(password=new_digest),
            )
            await self.db.commit()
        logger.info("Password changed", extra={"user_id": user_id})

    async def _load(self, user_id: int) -> User | None:
        result = await self.db.execute(
            select(User)
            .where(User.userid == user_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

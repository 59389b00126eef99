"""Request Dependencies — build AccountHandlers with explicit collaborators per request.

Design Decisions:
    - Hasher cached per process (it is stateless); repository bound per request to
      the request's AsyncSession
    - Tests override get_db (and may override get_password_hasher) via
      app.dependency_overrides — no monkeypatching of module globals
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from account_service.config import get_settings
from account_service.core.credentials import PasswordHasher
from account_service.infrastructure.database import get_db
from account_service.infrastructure.user_repository import SqlAlchemyUserRepository
from account_service.services.account_handlers import AccountHandlers


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(get_settings().password_salt)


def get_account_handlers(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AccountHandlers:
    return AccountHandlers(SqlAlchemyUserRepository(db), hasher)

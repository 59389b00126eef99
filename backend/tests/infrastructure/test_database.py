"""Database Session Manager — rollback and driver-error mapping.

Tests cover:
    - SQLAlchemy errors inside a session surface as StoreError chained to the driver error
    - the mapping is logged with its traceback
    - other exceptions pass through unchanged
"""

import logging

import pytest
from sqlalchemy.exc import OperationalError

from account_service.core.errors import StoreError
from account_service.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield manager
    await manager.close()


async def test_driver_error_becomes_chained_store_error(manager, caplog):
    driver_error = OperationalError("SELECT 1", {}, Exception("disk I/O error"))
    with caplog.at_level(logging.ERROR):
        with pytest.raises(StoreError) as exc:
            async with manager.session():
                raise driver_error
    assert exc.value.__cause__ is driver_error
    assert exc.value.http_status == 500
    record = next(r for r in caplog.records if "SQLAlchemy error" in r.getMessage())
    assert record.exc_info is not None


async def test_other_errors_pass_through(manager):
    with pytest.raises(KeyError):
        async with manager.session():
            raise KeyError("userid")

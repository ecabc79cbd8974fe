"""Tests for the PostgreSQL unit of work factory with stub pools."""

from unittest.mock import AsyncMock

import psycopg
import pytest

from collabgate.domain.exceptions import InvalidOperation, StorageUnavailable
from collabgate.infrastructure.persistence.postgres.unit_of_work import create_uow_factory


class _StubConnectionContext:
    def __init__(self, conn) -> None:
        self._conn = conn
        self.exited = False

    async def __aenter__(self):
        return self._conn

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.exited = True


class _StubPool:
    def __init__(self, conn=None, error: Exception | None = None) -> None:
        self._conn = conn
        self._error = error
        self.context = None

    def connection(self):
        if self._error:
            raise self._error
        self.context = _StubConnectionContext(self._conn)
        return self.context


@pytest.fixture
def conn() -> AsyncMock:
    return AsyncMock()


@pytest.mark.asyncio
async def test_unreachable_database_is_storage_unavailable() -> None:
    factory = create_uow_factory(_StubPool(error=psycopg.OperationalError("connection refused")))

    with pytest.raises(StorageUnavailable) as exc_info:
        async with factory():
            pass

    assert exc_info.value.retryable is True
    assert isinstance(exc_info.value.__cause__, psycopg.OperationalError)


@pytest.mark.asyncio
async def test_connection_lost_mid_transaction_rolls_back(conn) -> None:
    pool = _StubPool(conn)
    factory = create_uow_factory(pool)

    with pytest.raises(StorageUnavailable):
        async with factory():
            raise psycopg.OperationalError("server closed the connection")

    conn.rollback.assert_awaited()
    conn.commit.assert_not_awaited()
    assert pool.context.exited


@pytest.mark.asyncio
async def test_commits_on_success(conn) -> None:
    factory = create_uow_factory(_StubPool(conn))

    async with factory() as uow:
        assert uow.collections is not None

    conn.commit.assert_awaited_once()
    conn.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_domain_errors_pass_through(conn) -> None:
    factory = create_uow_factory(_StubPool(conn))

    with pytest.raises(InvalidOperation):
        async with factory():
            raise InvalidOperation("Cannot delete last collection")

    conn.rollback.assert_awaited()
    conn.commit.assert_not_awaited()

"""User store — exists / insert / find against an in‑memory database.

Invariants:
    - ids are unique; a second insert raises DuplicateKeyError and keeps the first row
    - a missing NOT NULL column surfaces as StorageError with the SQLite message
    - find returns None for unknown ids, never raises
"""

import asyncio
import logging

import pytest

from user_registry_api.app.core.errors import DuplicateKeyError, StorageError
from user_registry_api.app.schemas.user import UserCreate, UserRead

SERVICE_LOGGER = "user_registry_api.app.services.user_service"


async def test_exists_is_false_on_empty_store(service):
    assert await service.exists(1) is False


async def test_create_then_exists(service, ana):
    await service.create_user(UserCreate(**ana))

    assert await service.exists(ana["id"]) is True


async def test_create_returns_submitted_fields(service, ana):
    user = await service.create_user(UserCreate(**ana))

    assert user == UserRead(**ana)


async def test_duplicate_insert_raises_and_keeps_original(service, ana):
    await service.create_user(UserCreate(**ana))

    with pytest.raises(DuplicateKeyError):
        await service.create_user(
            UserCreate(id=ana["id"], name="Other", birth_date="2000-12-31"),
        )

    stored = await service.get_user(ana["id"])
    assert stored.name == "Ana"
    assert stored.birth_date == "1990-01-01"


async def test_missing_name_raises_storage_error(service):
    with pytest.raises(StorageError) as exc_info:
        await service.create_user(UserCreate(id=7, birth_date="1990-01-01"))

    assert "NOT NULL constraint failed: usuario.name" in exc_info.value.message
    assert await service.exists(7) is False


async def test_find_unknown_returns_none(service):
    assert await service.get_user(42) is None


async def test_find_out_of_range_id_returns_none(service):
    assert await service.get_user(2 ** 70) is None
    assert await service.exists(2 ** 70) is False


async def test_insert_out_of_range_id_raises_storage_error(service):
    with pytest.raises(StorageError):
        await service.create_user(UserCreate(id=2 ** 70, name="Big", birth_date="1990-01-01"))


async def test_concurrent_inserts_of_same_id_store_one_row(service, ana):
    results = await asyncio.gather(
        *[service.create_user(UserCreate(**ana)) for _ in range(10)],
        return_exceptions=True,
    )

    created = [r for r in results if isinstance(r, UserRead)]
    duplicates = [r for r in results if isinstance(r, DuplicateKeyError)]
    assert len(created) == 1
    assert len(duplicates) == 9

    with service.db.cursor() as cursor:
        count = cursor.execute("SELECT COUNT(*) AS count FROM usuario").fetchone()["count"]
    assert count == 1


async def test_create_logs_registration(service, ana, caplog):
    with caplog.at_level(logging.INFO, logger=SERVICE_LOGGER):
        await service.create_user(UserCreate(**ana))

    records = [r for r in caplog.records if r.name == SERVICE_LOGGER]
    assert [(r.levelno, r.getMessage()) for r in records] == [
        (logging.INFO, "Registering user 12345678901"),
    ]


async def test_storage_failure_is_logged_as_error(service, caplog):
    with caplog.at_level(logging.INFO, logger=SERVICE_LOGGER):
        with pytest.raises(StorageError):
            await service.create_user(UserCreate(id=7, birth_date="1990-01-01"))

    errors = [
        r for r in caplog.records
        if r.name == SERVICE_LOGGER and r.levelno == logging.ERROR
    ]
    assert len(errors) == 1
    assert errors[0].getMessage() == (
        "Failed to insert user 7: NOT NULL constraint failed: usuario.name"
    )

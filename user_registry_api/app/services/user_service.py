"""
Business logic for users.

``UserService`` is the record store of the application: it checks
for, inserts and looks up rows of the ``usuario`` table.  The public
methods are coroutines; the SQLite work itself is blocking and runs in
Starlette's worker thread pool so the event loop stays free while a
query executes.
"""

import logging
import sqlite3
from typing import Optional

from starlette.concurrency import run_in_threadpool

from ..core.db import Database
from ..core.errors import DuplicateKeyError, StorageError
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Record store for users backed by a ``Database``.

    The service is constructed once per application and shared by all
    requests through the ``get_user_service`` dependency.
    """

    def __init__(self, db: Database) -> None:
        self.db = db

    async def exists(self, user_id: int) -> bool:
        """Return whether a user with ``user_id`` is stored."""
        return await run_in_threadpool(self._exists, user_id)

    async def create_user(self, data: UserCreate) -> UserRead:
        """Insert a new user and return it.

        The existence check and the insert run in one locked
        transaction, so of several concurrent requests for the same
        ``id`` exactly one succeeds and the others get
        ``DuplicateKeyError``.

        Raises
        ------
        DuplicateKeyError
            A user with ``data.id`` already exists.
        StorageError
            SQLite rejected the insert for any other reason, e.g. a
            missing ``name``.
        """
        return await run_in_threadpool(self._insert, data)

    async def get_user(self, user_id: int) -> Optional[UserRead]:
        """Return the user with ``user_id`` or ``None``."""
        return await run_in_threadpool(self._find, user_id)

    def _exists(self, user_id: int) -> bool:
        try:
            with self.db.cursor() as cursor:
                row = cursor.execute(
                    "SELECT 1 FROM usuario WHERE id = ?", (user_id,)
                ).fetchone()
        except OverflowError:
            # Outside SQLite's INTEGER range, so it can never be stored.
            return False
        return row is not None

    def _insert(self, data: UserCreate) -> UserRead:
        logger.info("Registering user %s", data.id)
        try:
            with self.db.cursor() as cursor:
                row = cursor.execute(
                    "SELECT 1 FROM usuario WHERE id = ?", (data.id,)
                ).fetchone()
                if row is not None:
                    raise DuplicateKeyError()
                cursor.execute(
                    "INSERT INTO usuario (id, name, birth_date) VALUES (?, ?, ?)",
                    (data.id, data.name, data.birth_date),
                )
        except sqlite3.IntegrityError as exc:
            if "UNIQUE constraint failed: usuario.id" in str(exc):
                raise DuplicateKeyError() from exc
            logger.error("Failed to insert user %s: %s", data.id, exc)
            raise StorageError(str(exc)) from exc
        except (sqlite3.Error, OverflowError) as exc:
            logger.error("Failed to insert user %s: %s", data.id, exc)
            raise StorageError(str(exc)) from exc
        return UserRead(id=data.id, name=data.name, birth_date=data.birth_date)

    def _find(self, user_id: int) -> Optional[UserRead]:
        try:
            with self.db.cursor() as cursor:
                row = cursor.execute(
                    "SELECT id, name, birth_date FROM usuario WHERE id = ?",
                    (user_id,),
                ).fetchone()
        except OverflowError:
            return None
        if not row:
            return None
        return UserRead(id=row["id"], name=row["name"], birth_date=row["birth_date"])

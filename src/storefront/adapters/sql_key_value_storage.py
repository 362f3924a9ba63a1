"""SQLAlchemy implementation of KeyValueStorage."""

from __future__ import annotations

import asyncio
from contextlib import AbstractContextManager
from typing import Callable

from sqlalchemy import delete
from sqlalchemy.orm import Session

from storefront.infra.db.models.key_value import KeyValueRow
from storefront.infra.db.session import get_session
from storefront.ports.key_value_storage import KeyValueStorage

SessionFactory = Callable[[], AbstractContextManager[Session]]


class SqlKeyValueStorage(KeyValueStorage):
    """
    Durable key-value storage backed by the `key_value_store` table.

    - One row per key; writes upsert via Session.merge
    - Blocking session work runs in a worker thread (asyncio.to_thread)
      so the event loop never waits on disk I/O
    - Each call uses its own session (commit on success, rollback on error)
    """

    def __init__(self, session_factory: SessionFactory = get_session) -> None:
        """
        Initialize storage with a session factory.

        Args:
            session_factory: Context manager factory yielding a SQLAlchemy session
        """
        self._session_factory = session_factory

    async def get_item(self, key: str) -> str | None:
        return await asyncio.to_thread(self._get_item, key)

    async def set_item(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set_item, key, value)

    async def remove_item(self, key: str) -> None:
        await asyncio.to_thread(self._remove_item, key)

    def _get_item(self, key: str) -> str | None:
        with self._session_factory() as session:
            row = session.get(KeyValueRow, key)
            return row.value if row else None

    def _set_item(self, key: str, value: str) -> None:
        with self._session_factory() as session:
            session.merge(KeyValueRow(key=key, value=value))

    def _remove_item(self, key: str) -> None:
        with self._session_factory() as session:
            session.execute(delete(KeyValueRow).where(KeyValueRow.key == key))

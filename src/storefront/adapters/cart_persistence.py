"""Durable persistence for the cart aggregate.

Writes the cart's whitelisted fields (lines, totalItemCount, totalAmount) under
one fixed key after every mutation, and reads them back once at startup.
Both directions are best-effort: failures are logged and swallowed here so the
in-memory cart stays authoritative for the session.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal
from typing import Callable

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.adapters.catalog_records import ProductRecord
from storefront.domain.cart import CartLine, CartSnapshot
from storefront.ports.key_value_storage import KeyValueStorage
from storefront.use_cases.cart_store import CartStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "cart"


class PersistedCartLine(BaseModel):
    product: ProductRecord
    quantity: int = Field(ge=1)


class PersistedCart(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    lines: list[PersistedCartLine]
    total_item_count: int = Field(ge=0)
    total_amount: Decimal = Field(ge=0)

    @classmethod
    def from_snapshot(cls, snapshot: CartSnapshot) -> PersistedCart:
        return cls(
            lines=[
                PersistedCartLine(product=ProductRecord.from_domain(line.product), quantity=line.quantity)
                for line in snapshot.lines
            ],
            total_item_count=snapshot.total_item_count,
            total_amount=snapshot.total_amount,
        )

    def to_snapshot(self) -> CartSnapshot:
        return CartSnapshot(
            lines=tuple(CartLine(product=line.product.to_domain(), quantity=line.quantity) for line in self.lines),
            total_item_count=self.total_item_count,
            total_amount=self.total_amount,
        )


def encode_snapshot(snapshot: CartSnapshot) -> str:
    return PersistedCart.from_snapshot(snapshot).model_dump_json(by_alias=True)


def decode_snapshot(raw: str) -> CartSnapshot:
    """
    Decode a stored cart.

    Raises:
        pydantic.ValidationError: If the stored JSON is malformed
    """
    return PersistedCart.model_validate_json(raw).to_snapshot()


class CartPersistenceAdapter:
    """
    Bridges a CartStore to durable key-value storage.

    - `save` schedules a write and returns immediately (fire-and-forget)
    - Writes are serialized through a lock, so they land in mutation order
    - `load` is meant to run exactly once, before anything renders the cart
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._write_lock = asyncio.Lock()
        self._pending: set[asyncio.Task[None]] = set()
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def key(self) -> str:
        return self._key

    def save(self, snapshot: CartSnapshot) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(self._write(snapshot))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def load(self) -> CartSnapshot | None:
        """Return the stored snapshot, or None if absent or unreadable."""
        try:
            raw = await self._storage.get_item(self._key)
        except Exception:
            logger.warning("Cart load failed; starting with an empty cart", exc_info=True)
            return None

        if raw is None:
            logger.info("No persisted cart found", extra={"key": self._key})
            return None

        try:
            return decode_snapshot(raw)
        except pydantic.ValidationError:
            logger.warning("Persisted cart is malformed; starting with an empty cart", exc_info=True)
            return None

    async def restore_into(self, store: CartStore) -> bool:
        """Load once and hand the snapshot to `store`. Returns True if something was restored."""
        snapshot = await self.load()
        if snapshot is None:
            return False

        store.restore(snapshot)
        logger.info(
            "Restored persisted cart",
            extra={"lines": len(snapshot.lines), "total_item_count": store.snapshot().total_item_count},
        )
        return True

    def attach(self, store: CartStore) -> None:
        """Save after every cart mutation from now on."""
        self.detach()
        self._unsubscribe = store.subscribe(self.save)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def flush(self) -> None:
        """Wait for every scheduled write to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _write(self, snapshot: CartSnapshot) -> None:
        async with self._write_lock:
            try:
                await self._storage.set_item(self._key, encode_snapshot(snapshot))
            except Exception:
                logger.warning("Cart save failed; keeping in-memory cart", exc_info=True)

from __future__ import annotations

import logging
from typing import Callable

from storefront.domain.cart import CartLine, CartSnapshot, snapshot_of
from storefront.domain.product import Product

logger = logging.getLogger(__name__)

CartListener = Callable[[CartSnapshot], None]


class CartStore:
    """
    The cart aggregate: ordered lines plus derived totals.

    Invariants:
    - At most one line per product id (add merges into the existing line)
    - Every line has quantity >= 1; setting a quantity <= 0 removes the line
    - Totals are recomputed from the lines after every mutation, never patched

    Mutations run to completion synchronously and in call order, so a single
    event loop gives FIFO single-writer semantics. Listeners are notified with
    the new snapshot after each mutation that changed the cart. Operations are
    total: nothing here raises for in-range input.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []
        self._snapshot = CartSnapshot()
        self._listeners: list[CartListener] = []

    def snapshot(self) -> CartSnapshot:
        return self._snapshot

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_line(self, product: Product) -> None:
        index = self._index_of(product.id)
        if index is None:
            self._lines.append(CartLine(product=product, quantity=1))
        else:
            line = self._lines[index]
            self._lines[index] = CartLine(product=line.product, quantity=line.quantity + 1)

        logger.info("Added product to cart", extra={"product_id": product.id})
        self._commit()

    def remove_line(self, product_id: int) -> None:
        index = self._index_of(product_id)
        if index is None:
            return

        del self._lines[index]
        logger.info("Removed product from cart", extra={"product_id": product_id})
        self._commit()

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """Set a line's quantity. No stock check; quantity <= 0 removes the line."""
        if quantity <= 0:
            self.remove_line(product_id)
            return

        index = self._index_of(product_id)
        if index is None or self._lines[index].quantity == quantity:
            return

        self._lines[index] = CartLine(product=self._lines[index].product, quantity=quantity)
        logger.info(
            "Updated cart quantity",
            extra={"product_id": product_id, "quantity": quantity},
        )
        self._commit()

    def clear(self) -> None:
        self._lines = []
        logger.info("Cleared cart")
        self._commit()

    def restore(self, snapshot: CartSnapshot) -> None:
        """
        Replace the cart with a previously persisted snapshot.

        Lines are re-normalized (merged by product id, non-positive quantities
        dropped) and totals recomputed; stored totals are not trusted.
        """
        lines: list[CartLine] = []
        for line in snapshot.lines:
            if line.quantity <= 0:
                continue
            existing = next((i for i, kept in enumerate(lines) if kept.product_id == line.product_id), None)
            if existing is None:
                lines.append(line)
            else:
                lines[existing] = CartLine(
                    product=lines[existing].product,
                    quantity=lines[existing].quantity + line.quantity,
                )

        self._lines = lines
        self._commit()

        if (
            self._snapshot.total_item_count != snapshot.total_item_count
            or self._snapshot.total_amount != snapshot.total_amount
        ):
            logger.warning(
                "Restored cart totals differed from stored totals; using recomputed values",
                extra={
                    "stored_item_count": snapshot.total_item_count,
                    "stored_amount": str(snapshot.total_amount),
                },
            )

    def _index_of(self, product_id: int) -> int | None:
        for index, line in enumerate(self._lines):
            if line.product_id == product_id:
                return index
        return None

    def _commit(self) -> None:
        self._snapshot = snapshot_of(self._lines)
        for listener in list(self._listeners):
            listener(self._snapshot)

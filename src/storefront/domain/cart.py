from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from storefront.domain.product import Product


@dataclass(frozen=True, slots=True)
class CartLine:
    """One product in the cart. Quantity is always >= 1."""

    product: Product
    quantity: int

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True, slots=True)
class CartTotals:
    total_item_count: int
    total_amount: Decimal


@dataclass(frozen=True, slots=True)
class CartSnapshot:
    """Immutable view of the cart used for rendering and persistence."""

    lines: tuple[CartLine, ...] = ()
    total_item_count: int = 0
    total_amount: Decimal = Decimal("0")

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def line_for(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None


def compute_totals(lines: Iterable[CartLine]) -> CartTotals:
    """
    Recompute cart totals from scratch.

    Rounding policy:
    - Exact Decimal sum of price * quantity, no quantization
    - Fixed-point display formatting is the presentation layer's job
    """
    total_item_count = 0
    total_amount = Decimal("0")
    for line in lines:
        total_item_count += line.quantity
        total_amount += line.subtotal

    return CartTotals(total_item_count=total_item_count, total_amount=total_amount)


def snapshot_of(lines: Iterable[CartLine]) -> CartSnapshot:
    """Build a snapshot whose totals are derived from `lines`."""
    frozen_lines = tuple(lines)
    totals = compute_totals(frozen_lines)
    return CartSnapshot(
        lines=frozen_lines,
        total_item_count=totals.total_item_count,
        total_amount=totals.total_amount,
    )

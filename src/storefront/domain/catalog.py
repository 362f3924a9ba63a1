"""Catalog browsing intents and result states.

Both are closed sum types: a query is exactly one of AllProducts, ByCategory or
BySearchTerm, and a result is exactly one of Idle, Loading, Loaded or Failed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from storefront.domain.product import ALL_CATEGORY_SLUG, Category, Product, with_all_category


# ==============================================================================
# Queries
# ==============================================================================


@dataclass(frozen=True, slots=True)
class AllProducts:
    mode: Literal["all"] = field(default="all", init=False)


@dataclass(frozen=True, slots=True)
class ByCategory:
    slug: str
    mode: Literal["category"] = field(default="category", init=False)


@dataclass(frozen=True, slots=True)
class BySearchTerm:
    term: str
    mode: Literal["search"] = field(default="search", init=False)


CatalogQuery = Union[AllProducts, ByCategory, BySearchTerm]


def query_for_category(slug: str) -> CatalogQuery:
    """Map a selected category slug to its query; "all" means AllProducts."""
    if slug == ALL_CATEGORY_SLUG:
        return AllProducts()
    return ByCategory(slug=slug)


# ==============================================================================
# Result states
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Idle:
    status: Literal["idle"] = field(default="idle", init=False)

    @property
    def items(self) -> tuple[Product, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class Loading:
    previous_items: tuple[Product, ...] = ()
    status: Literal["loading"] = field(default="loading", init=False)

    @property
    def items(self) -> tuple[Product, ...]:
        return self.previous_items


@dataclass(frozen=True, slots=True)
class Loaded:
    loaded_items: tuple[Product, ...]
    status: Literal["loaded"] = field(default="loaded", init=False)

    @property
    def items(self) -> tuple[Product, ...]:
        return self.loaded_items


@dataclass(frozen=True, slots=True)
class Failed:
    previous_items: tuple[Product, ...]
    error_message: str
    status: Literal["failed"] = field(default="failed", init=False)

    @property
    def items(self) -> tuple[Product, ...]:
        return self.previous_items


CatalogResultState = Union[Idle, Loading, Loaded, Failed]


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """Everything a product list screen needs to render."""

    query: CatalogQuery
    selected_category: str
    search_text: str
    result: CatalogResultState
    categories: tuple[Category, ...] = ()

    @property
    def items(self) -> tuple[Product, ...]:
        """Items to display; stale items are kept while loading or after a failure."""
        return self.result.items

    @property
    def is_loading(self) -> bool:
        return isinstance(self.result, Loading)

    @property
    def error_message(self) -> str | None:
        if isinstance(self.result, Failed):
            return self.result.error_message
        return None

    @property
    def display_categories(self) -> tuple[Category, ...]:
        """Categories for the picker, with the synthetic "All" entry first."""
        return with_all_category(self.categories)

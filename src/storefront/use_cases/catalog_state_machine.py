from __future__ import annotations

import asyncio
import logging
from typing import Callable

from storefront.domain.catalog import (
    AllProducts,
    ByCategory,
    BySearchTerm,
    CatalogQuery,
    CatalogResultState,
    CatalogSnapshot,
    Failed,
    Idle,
    Loaded,
    Loading,
    query_for_category,
)
from storefront.domain.errors import DomainError
from storefront.domain.product import ALL_CATEGORY_SLUG, Category, Product
from storefront.infra.config import DEFAULT_PRODUCT_LIMIT
from storefront.ports.catalog_gateway import CatalogGateway

logger = logging.getLogger(__name__)

CatalogListener = Callable[[CatalogSnapshot], None]


class CatalogStateMachine:
    """
    Owns the displayed product collection, the active query and its status.

    States: Idle → Loading → {Loaded, Failed}; Loaded/Failed → Loading on any
    new request. Each submission bumps a sequence number and the request task
    remembers the number it was issued with. When a response arrives it may
    only commit if its number is still the current one; otherwise it is
    dropped, whether it succeeded or failed. Requests are never cancelled at
    the transport level.

    Must be driven from a single running event loop: submissions return the
    asyncio.Task of the request they started.
    """

    def __init__(self, gateway: CatalogGateway, product_limit: int = DEFAULT_PRODUCT_LIMIT) -> None:
        self._gateway = gateway
        self._product_limit = product_limit

        self._sequence = 0
        self._query: CatalogQuery = AllProducts()
        self._selected_category = ALL_CATEGORY_SLUG
        self._search_text = ""
        self._result: CatalogResultState = Idle()

        self._categories: tuple[Category, ...] = ()
        self._categories_task: asyncio.Task[tuple[Category, ...]] | None = None
        self._activated = False

        self._listeners: list[CatalogListener] = []
        self._pending: set[asyncio.Task[CatalogResultState | None]] = set()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def sequence(self) -> int:
        return self._sequence

    def snapshot(self) -> CatalogSnapshot:
        return CatalogSnapshot(
            query=self._query,
            selected_category=self._selected_category,
            search_text=self._search_text,
            result=self._result,
            categories=self._categories,
        )

    def find_displayed(self, product_id: int) -> Product | None:
        for product in self._result.items:
            if product.id == product_id:
                return product
        return None

    def subscribe(self, listener: CatalogListener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def activate(self) -> asyncio.Task[CatalogResultState | None] | None:
        """First activation: load everything and the category list. Later calls are no-ops."""
        if self._activated:
            return None

        self._activated = True
        self.load_categories()
        return self._submit(AllProducts())

    def select_category(self, slug: str) -> asyncio.Task[CatalogResultState | None]:
        """Select a category; always clears the pending search text and resubmits."""
        self._selected_category = slug
        self._search_text = ""
        return self._submit(query_for_category(slug))

    def set_search_text(self, text: str) -> asyncio.Task[CatalogResultState | None] | None:
        """
        Update the pending search text.

        Clearing it while a search is active falls back to the selected
        category's query.
        """
        self._search_text = text
        if not text.strip() and isinstance(self._query, BySearchTerm):
            return self._submit(query_for_category(self._selected_category))

        self._notify()
        return None

    def submit_search(self) -> asyncio.Task[CatalogResultState | None]:
        return self._submit(self._active_intent())

    def refresh(self) -> asyncio.Task[CatalogResultState | None]:
        """Pull-to-refresh: resubmit the active intent, keeping current items on screen."""
        return self._submit(self._active_intent())

    def dismiss_error(self) -> None:
        """Drop the error of a Failed state, keeping the items that were on screen."""
        if isinstance(self._result, Failed):
            self._result = Loaded(self._result.previous_items)
            self._notify()

    def load_categories(self) -> asyncio.Task[tuple[Category, ...]]:
        """
        Load categories once. Concurrent callers share the in-flight load;
        a failed load may be retried by calling again.
        """
        if self._categories_task is None:
            self._categories_task = asyncio.get_running_loop().create_task(self._load_categories())
        return self._categories_task

    async def drain(self) -> None:
        """Wait for every outstanding request (used at shutdown and in tests)."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _active_intent(self) -> CatalogQuery:
        term = self._search_text.strip()
        if term:
            return BySearchTerm(term=term)
        return query_for_category(self._selected_category)

    def _submit(self, query: CatalogQuery) -> asyncio.Task[CatalogResultState | None]:
        self._sequence += 1
        sequence = self._sequence

        self._query = query
        self._result = Loading(previous_items=self._result.items)
        logger.debug("Catalog query submitted", extra={"sequence": sequence, "query": query})
        self._notify()

        task = asyncio.get_running_loop().create_task(self._run(sequence, query))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _run(self, sequence: int, query: CatalogQuery) -> CatalogResultState | None:
        """Execute one request; returns the committed state, or None if superseded."""
        try:
            products = await self._fetch(query)
        except DomainError as exc:
            if not self._is_current(sequence):
                logger.debug("Dropped stale catalog failure", extra={"sequence": sequence})
                return None
            logger.warning(
                "Catalog request failed",
                extra={"sequence": sequence, "error_code": exc.error_code, "error_message": exc.message},
            )
            self._result = Failed(previous_items=self._result.items, error_message=exc.message)
            self._notify()
            return self._result

        if not self._is_current(sequence):
            logger.debug("Dropped stale catalog response", extra={"sequence": sequence})
            return None

        self._result = Loaded(tuple(products))
        self._notify()
        return self._result

    async def _fetch(self, query: CatalogQuery) -> list[Product]:
        if isinstance(query, BySearchTerm):
            return await self._gateway.search(query.term)
        if isinstance(query, ByCategory):
            return await self._gateway.fetch_by_category(query.slug)
        return await self._gateway.fetch_all(self._product_limit)

    async def _load_categories(self) -> tuple[Category, ...]:
        try:
            categories = await self._gateway.fetch_categories()
        except DomainError as exc:
            logger.warning("Category load failed", extra={"error_message": exc.message})
            self._categories_task = None
            return self._categories

        self._categories = tuple(categories)
        self._notify()
        return self._categories

    def _is_current(self, sequence: int) -> bool:
        return sequence == self._sequence

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

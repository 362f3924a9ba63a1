from __future__ import annotations

from storefront.domain.catalog import ByCategory, BySearchTerm, CatalogQuery, CatalogSnapshot
from storefront.entrypoints.http.dtos.catalog import CatalogQueryDTO, CatalogStateResponseDTO
from storefront.entrypoints.http.mappers.product_mapper import ProductMapper


class CatalogMapper:
    """Maps catalog state machine snapshots to REST DTOs."""

    @staticmethod
    def to_query_response(query: CatalogQuery) -> CatalogQueryDTO:
        if isinstance(query, ByCategory):
            return CatalogQueryDTO(mode=query.mode, slug=query.slug)
        if isinstance(query, BySearchTerm):
            return CatalogQueryDTO(mode=query.mode, term=query.term)
        return CatalogQueryDTO(mode=query.mode)

    @staticmethod
    def to_response(snapshot: CatalogSnapshot) -> CatalogStateResponseDTO:
        """
        Converts a catalog snapshot to its REST representation.

        `items` are whatever should stay on screen: the loaded items, or the
        previous items while loading or after a failure. Categories include
        the synthetic "All" entry first.
        """
        return CatalogStateResponseDTO(
            query=CatalogMapper.to_query_response(snapshot.query),
            selected_category=snapshot.selected_category,
            search_text=snapshot.search_text,
            status=snapshot.result.status,
            items=[ProductMapper.to_product_response(product) for product in snapshot.items],
            error=snapshot.error_message,
            categories=[
                ProductMapper.to_category_response(category)
                for category in snapshot.display_categories
            ],
        )

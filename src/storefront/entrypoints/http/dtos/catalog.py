from typing import Literal

from pydantic import BaseModel, Field

from storefront.entrypoints.http.dtos.product import CategoryResponseDTO, ProductResponseDTO


class SelectCategoryRequestDTO(BaseModel):
    """Body for selecting a category ("all" selects the unfiltered list)."""

    slug: str = Field(
        min_length=1,
        max_length=100,
        description="Category slug",
        examples=["smartphones"],
    )


class SearchTextRequestDTO(BaseModel):
    """Body for editing the pending search text."""

    text: str = Field(
        default="",
        max_length=200,
        description="Search text; an empty value clears an active search",
        examples=["phone"],
    )


class CatalogQueryDTO(BaseModel):
    mode: Literal["all", "category", "search"]
    slug: str | None = None
    term: str | None = None


class CatalogStateResponseDTO(BaseModel):
    query: CatalogQueryDTO
    selected_category: str
    search_text: str
    status: Literal["idle", "loading", "loaded", "failed"]
    items: list[ProductResponseDTO]
    error: str | None = None
    categories: list[CategoryResponseDTO]

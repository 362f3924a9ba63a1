from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Query, Response, status

from storefront.domain.catalog import CatalogResultState
from storefront.entrypoints.http.dependencies import get_catalog_state_machine
from storefront.entrypoints.http.dtos.catalog import (
    CatalogStateResponseDTO,
    SearchTextRequestDTO,
    SelectCategoryRequestDTO,
)
from storefront.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from storefront.use_cases.catalog_state_machine import CatalogStateMachine


router = APIRouter(tags=["Catalog"])

WAIT_DESCRIPTION = (
    "Wait for this request to settle before answering. The returned state is "
    "whatever is current by then, which may belong to a newer request."
)


async def _settle(
    catalog: CatalogStateMachine,
    task: asyncio.Task[CatalogResultState | None] | None,
    wait: bool,
    response: Response,
) -> CatalogStateResponseDTO:
    if task is not None:
        if wait:
            await task
        else:
            response.status_code = status.HTTP_202_ACCEPTED
    return CatalogMapper.to_response(catalog.snapshot())


@router.get(
    "/catalog",
    response_model=CatalogStateResponseDTO,
    summary="Current catalog state",
    description="""
    Current product list state for rendering.

    ## Status
    - `idle`: nothing requested yet
    - `loading`: a request is outstanding; `items` holds what was on screen before
    - `loaded`: `items` holds the latest result
    - `failed`: `error` holds the message; `items` holds what was on screen before

    Clients show a full-screen error with retry when `failed` and `items` is
    empty, and an inline banner otherwise.
    """,
)
async def get_catalog(
    catalog: CatalogStateMachine = Depends(get_catalog_state_machine),
) -> CatalogStateResponseDTO:
    return CatalogMapper.to_response(catalog.snapshot())


@router.post(
    "/catalog/activate",
    response_model=CatalogStateResponseDTO,
    summary="First activation: load all products and categories",
)
async def activate_catalog(
    response: Response,
    wait: bool = Query(default=True, description=WAIT_DESCRIPTION),
    catalog: CatalogStateMachine = Depends(get_catalog_state_machine),
) -> CatalogStateResponseDTO:
    task = catalog.activate()
    if task is not None and wait:
        await catalog.load_categories()
    return await _settle(catalog, task, wait, response)


@router.put(
    "/catalog/category",
    response_model=CatalogStateResponseDTO,
    summary="Select a category",
    description="Clears any search text. Slug `all` selects the unfiltered list.",
)
async def select_category(
    body: SelectCategoryRequestDTO,
    response: Response,
    wait: bool = Query(default=True, description=WAIT_DESCRIPTION),
    catalog: CatalogStateMachine = Depends(get_catalog_state_machine),
) -> CatalogStateResponseDTO:
    task = catalog.select_category(body.slug)
    return await _settle(catalog, task, wait, response)


@router.put(
    "/catalog/search-text",
    response_model=CatalogStateResponseDTO,
    summary="Edit the search text",
    description="Clearing the text while a search is active reloads the selected category.",
)
async def set_search_text(
    body: SearchTextRequestDTO,
    response: Response,
    wait: bool = Query(default=True, description=WAIT_DESCRIPTION),
    catalog: CatalogStateMachine = Depends(get_catalog_state_machine),
) -> CatalogStateResponseDTO:
    task = catalog.set_search_text(body.text)
    return await _settle(catalog, task, wait, response)


@router.post(
    "/catalog/search",
    response_model=CatalogStateResponseDTO,
    summary="Submit the current search text",
    description="A blank search text reloads the selected category instead.",
)
async def submit_search(
    response: Response,
    wait: bool = Query(default=True, description=WAIT_DESCRIPTION),
    catalog: CatalogStateMachine = Depends(get_catalog_state_machine),
) -> CatalogStateResponseDTO:
    task = catalog.submit_search()
    return await _settle(catalog, task, wait, response)


@router.post(
    "/catalog/refresh",
    response_model=CatalogStateResponseDTO,
    summary="Pull-to-refresh",
    description="Resubmits the active search, or the selected category. Items stay on screen meanwhile.",
)
async def refresh_catalog(
    response: Response,
    wait: bool = Query(default=True, description=WAIT_DESCRIPTION),
    catalog: CatalogStateMachine = Depends(get_catalog_state_machine),
) -> CatalogStateResponseDTO:
    task = catalog.refresh()
    return await _settle(catalog, task, wait, response)


@router.post(
    "/catalog/dismiss-error",
    response_model=CatalogStateResponseDTO,
    summary="Dismiss the current error banner",
)
async def dismiss_error(
    catalog: CatalogStateMachine = Depends(get_catalog_state_machine),
) -> CatalogStateResponseDTO:
    catalog.dismiss_error()
    return CatalogMapper.to_response(catalog.snapshot())

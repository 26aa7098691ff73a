"""Catalog API routes"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..models.product import (
    CatalogView,
    CategoryRequest,
    LoadRequest,
    Product,
    ProductCategory,
    SearchRequest,
)
from ..state import StorefrontState, get_state

router = APIRouter(prefix="/api/catalog", tags=["Catalog"])


@router.get("", response_model=CatalogView)
async def get_catalog(state: StorefrontState = Depends(get_state)):
    """Current products, facets and filtered view"""
    return state.catalog.view()


@router.post("/load", response_model=CatalogView)
async def load_catalog(
    request: Optional[LoadRequest] = None,
    state: StorefrontState = Depends(get_state),
):
    """(Re)load products, by the given or selected category"""
    await state.catalog.load(request.category if request else None)
    return state.catalog.view()


@router.put("/category", response_model=CatalogView)
async def set_category(
    request: CategoryRequest,
    state: StorefrontState = Depends(get_state),
):
    """Select a category facet; clears the search query"""
    state.catalog.set_category(request.category)
    return state.catalog.view()


@router.put("/search", response_model=CatalogView)
async def set_search(
    request: SearchRequest,
    state: StorefrontState = Depends(get_state),
):
    """Set the search query"""
    state.catalog.set_search(request.query)
    return state.catalog.view()


@router.delete("/search", response_model=CatalogView)
async def clear_search(state: StorefrontState = Depends(get_state)):
    """Clear the search query"""
    state.catalog.clear_search()
    return state.catalog.view()


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List all product categories"""
    return [c.value for c in ProductCategory]


@router.get("/products/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    state: StorefrontState = Depends(get_state),
):
    """Get a product by ID"""
    product = await state.catalog.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

"""Retailer inventory API routes"""

from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.errors import DocumentNotFoundError, InventoryError
from ..models.product import NewProduct, Product, StockUpdateRequest
from ..state import StorefrontState, get_state

router = APIRouter(prefix="/api/retailer", tags=["Retailer"])


def _http_error(error: InventoryError) -> HTTPException:
    if isinstance(error.cause, DocumentNotFoundError):
        return HTTPException(status_code=404, detail="Product not found")
    return HTTPException(status_code=502, detail=str(error))


@router.get("/{owner_id}/products", response_model=list[Product])
async def list_products(
    owner_id: str,
    state: StorefrontState = Depends(get_state),
):
    """List products owned by a retailer"""
    try:
        return await state.inventory.list_owned(owner_id)
    except InventoryError as e:
        raise _http_error(e) from e


@router.post("/{owner_id}/products", response_model=Product, status_code=201)
async def add_product(
    owner_id: str,
    request: NewProduct,
    owner_name: str = Query("Unknown", description="Shop name shown to shoppers"),
    state: StorefrontState = Depends(get_state),
):
    """Add a product to a retailer's inventory"""
    try:
        return await state.inventory.add_product(owner_id, owner_name, request)
    except InventoryError as e:
        raise _http_error(e) from e


@router.put("/products/{product_id}/stock", status_code=204)
async def set_stock(
    product_id: str,
    request: StockUpdateRequest,
    state: StorefrontState = Depends(get_state),
):
    """Set a product's stock flag"""
    try:
        await state.inventory.set_stock(product_id, request.in_stock)
    except InventoryError as e:
        raise _http_error(e) from e


@router.delete("/products/{product_id}", status_code=204)
async def delete_product(
    product_id: str,
    state: StorefrontState = Depends(get_state),
):
    """Delete a product"""
    try:
        await state.inventory.remove(product_id)
    except InventoryError as e:
        raise _http_error(e) from e

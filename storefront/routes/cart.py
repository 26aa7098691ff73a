"""Cart API routes"""

from fastapi import APIRouter, Depends, HTTPException

from ..models.cart import AddToCartRequest, CartView, UpdateCartItemRequest
from ..state import StorefrontState, get_state

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.get("", response_model=CartView)
def get_cart(state: StorefrontState = Depends(get_state)):
    """Get the cart"""
    return state.cart.view()


@router.post("/items", response_model=CartView)
async def add_to_cart(
    request: AddToCartRequest,
    state: StorefrontState = Depends(get_state),
):
    """Add an item to the cart"""
    # Snapshot from the loaded catalog, else look the product up
    product = next(
        (p for p in state.catalog.products if p.id == request.product_id),
        None,
    )
    if not product:
        product = await state.catalog.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    state.cart.add(product, request.quantity)
    return state.cart.view()


@router.put("/items/{product_id}", response_model=CartView)
def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    state: StorefrontState = Depends(get_state),
):
    """Set item quantity; zero or less removes it"""
    state.cart.set_quantity(product_id, request.quantity)
    return state.cart.view()


@router.delete("/items/{product_id}", response_model=CartView)
def remove_from_cart(
    product_id: str,
    state: StorefrontState = Depends(get_state),
):
    """Remove an item from the cart"""
    state.cart.remove(product_id)
    return state.cart.view()


@router.delete("", response_model=CartView)
def clear_cart(state: StorefrontState = Depends(get_state)):
    """Clear all items from cart"""
    state.cart.clear()
    return state.cart.view()

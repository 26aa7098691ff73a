"""Cart models for the storefront"""

from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from .product import Price, Product


class CartLine(BaseModel):
    """One line in the cart, keyed by product id"""
    product: Product
    quantity: int = Field(gt=0)

    @computed_field
    @property
    def line_total(self) -> Price:
        return self.product.price * self.quantity


class CartView(BaseModel):
    """Cart state as read by the rendering layer"""
    lines: list[CartLine] = []
    total_count: int = 0
    total_price: Price = Decimal(0)


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: str
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    """Request to set a cart line's quantity (<= 0 removes it)"""
    quantity: int

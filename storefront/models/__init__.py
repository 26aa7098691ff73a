# Storefront Models

from .product import (
    Product,
    ProductCategory,
    NewProduct,
    CatalogView,
    CategoryRequest,
    SearchRequest,
    LoadRequest,
    StockUpdateRequest,
)
from .cart import CartLine, CartView, AddToCartRequest, UpdateCartItemRequest

__all__ = [
    "Product",
    "ProductCategory",
    "NewProduct",
    "CatalogView",
    "CategoryRequest",
    "SearchRequest",
    "LoadRequest",
    "StockUpdateRequest",
    "CartLine",
    "CartView",
    "AddToCartRequest",
    "UpdateCartItemRequest",
]

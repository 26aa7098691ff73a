# API Routes

from .catalog import router as catalog_router
from .cart import router as cart_router
from .retailer import router as retailer_router

__all__ = ["catalog_router", "cart_router", "retailer_router"]

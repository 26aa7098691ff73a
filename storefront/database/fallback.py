"""Fallback product catalog, served when the remote store is empty or unreachable"""

from typing import Optional

from ..models.product import Product, ProductCategory

_FIELD_IMAGE = "https://images.unsplash.com/photo-1416879595882-3373a0480b5b?w=400"

# Hand-authored seed catalog. Never merged with remote data.
FALLBACK_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Premium Wheat Seeds",
        price=450,
        image="https://images.unsplash.com/photo-1574323347407-f5e1ad6d020b?w=400",
        category=ProductCategory.SEEDS,
        description="High-quality wheat seeds with excellent yield potential. Suitable for all soil types.",
        rating=4.5,
        reviews=128,
        in_stock=True,
    ),
    Product(
        id="2",
        name="Organic Rice Seeds",
        price=380,
        image="https://images.unsplash.com/photo-1586201375761-83865001e31c?w=400",
        category=ProductCategory.SEEDS,
        description="Certified organic rice seeds for sustainable farming practices.",
        rating=4.7,
        reviews=95,
        in_stock=True,
    ),
    Product(
        id="3",
        name="NPK Fertilizer",
        price=850,
        image=_FIELD_IMAGE,
        category=ProductCategory.FERTILIZERS,
        description="Balanced NPK fertilizer for healthy plant growth and maximum yield.",
        rating=4.3,
        reviews=203,
        in_stock=True,
    ),
    Product(
        id="4",
        name="Organic Compost",
        price=320,
        image=_FIELD_IMAGE,
        category=ProductCategory.FERTILIZERS,
        description="Natural organic compost to improve soil health and fertility.",
        rating=4.6,
        reviews=156,
        in_stock=True,
    ),
    Product(
        id="5",
        name="Bio Pesticide",
        price=680,
        image=_FIELD_IMAGE,
        category=ProductCategory.PESTICIDES,
        description="Eco-friendly bio pesticide for effective pest control without harmful chemicals.",
        rating=4.4,
        reviews=87,
        in_stock=True,
    ),
    Product(
        id="6",
        name="Insect Repellent Spray",
        price=420,
        image=_FIELD_IMAGE,
        category=ProductCategory.PESTICIDES,
        description="Safe and effective insect repellent spray for crop protection.",
        rating=4.2,
        reviews=74,
        in_stock=False,
    ),
)


class FallbackCatalog:
    """Read-only selection over a fixed product set"""

    def __init__(self, products: tuple[Product, ...] = FALLBACK_PRODUCTS):
        self._products = products

    def by_category(self, category: Optional[ProductCategory] = None) -> list[Product]:
        """Products in a category, or all of them when category is None"""
        return [
            p.snapshot() for p in self._products
            if category is None or p.category == category
        ]

    def by_id(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        product = next((p for p in self._products if p.id == product_id), None)
        return product.snapshot() if product else None


fallback_catalog = FallbackCatalog()

"""Catalog state: fetched products, filter facets and the derived view"""

import logging
from typing import Optional, Union

from ..models.product import CatalogView, Product, ProductCategory
from ..services.catalog_fetcher import CatalogFetcher

logger = logging.getLogger(__name__)

CategoryInput = Union[ProductCategory, str, None]


def category_matches(product: Product, category: Optional[ProductCategory]) -> bool:
    """No category matches everything"""
    return category is None or product.category == category


def search_matches(product: Product, query: str) -> bool:
    """Case-insensitive substring match on name, description or category"""
    needle = query.strip().lower()
    if not needle:
        return True
    return (
        needle in product.name.lower()
        or needle in product.description.lower()
        or needle in product.category.value
    )


def _as_category(category: CategoryInput) -> Optional[ProductCategory]:
    if category is None or isinstance(category, ProductCategory):
        return category
    return ProductCategory(category)


class CatalogStore:
    """
    Process-local catalog state.

    filtered_products is derived from products, selected_category and
    search_query, and is recomputed whenever any of them changes.

    Overlapping load() calls are not cancelled: whichever fetch completes
    last replaces products.
    """

    def __init__(self, fetcher: CatalogFetcher):
        self.fetcher = fetcher
        self._products: list[Product] = []
        self._filtered: list[Product] = []
        self._selected_category: Optional[ProductCategory] = None
        self._search_query = ""
        self._loads_in_flight = 0

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def filtered_products(self) -> list[Product]:
        return list(self._filtered)

    @property
    def selected_category(self) -> Optional[ProductCategory]:
        return self._selected_category

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def loading(self) -> bool:
        return self._loads_in_flight > 0

    def _recompute(self) -> None:
        self._filtered = [
            p for p in self._products
            if category_matches(p, self._selected_category)
            and search_matches(p, self._search_query)
        ]

    async def load(self, category: CategoryInput = None) -> list[Product]:
        """
        Fetch products and replace the loaded set.

        Queries by category when one is given or selected, otherwise
        fetches everything. The previous products stay visible while
        the fetch is in flight.
        """
        category = _as_category(category) or self._selected_category
        self._loads_in_flight += 1
        try:
            if category is None:
                products = await self.fetcher.fetch_all()
            else:
                products = await self.fetcher.fetch_by_category(category)
        finally:
            self._loads_in_flight -= 1

        self._products = list(products)
        self._recompute()
        logger.debug(
            f"Loaded {len(self._products)} products, {len(self._filtered)} visible"
        )
        return self.filtered_products

    def set_category(self, category: CategoryInput) -> None:
        """Select a category (None for all). Always clears the search query."""
        self._selected_category = _as_category(category)
        self._search_query = ""
        self._recompute()

    def set_search(self, text: str) -> None:
        """Set the search query as typed"""
        self._search_query = text
        self._recompute()

    def clear_search(self) -> None:
        self._search_query = ""
        self._recompute()

    async def get_product(self, product_id: str) -> Optional[Product]:
        """Product detail lookup"""
        return await self.fetcher.fetch_by_id(product_id)

    def view(self) -> CatalogView:
        return CatalogView(
            products=self._products,
            filtered_products=self._filtered,
            loading=self.loading,
            selected_category=self._selected_category,
            search_query=self._search_query,
        )

"""
Catalog Fetcher

Reads products from the remote catalog source and degrades to the
fallback catalog instead of failing. Callers always get a list back.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from ..core.errors import DocumentNotFoundError, OrderingUnsupportedError
from ..database.documents import Document, RemoteCatalogSource
from ..database.fallback import FallbackCatalog, fallback_catalog
from ..models.product import Product, ProductCategory

logger = logging.getLogger(__name__)


def to_products(documents: list[Document]) -> list[Product]:
    """Parse documents in order, skipping malformed ones"""
    products = []
    for document in documents:
        try:
            products.append(Product.from_document(document.id, document.data))
        except ValidationError as e:
            logger.warning(f"Skipping malformed product document {document.id}: {e.error_count()} error(s)")
    return products


class CatalogFetcher:
    """
    Product reads with a degrade policy.

    1. Query ordered by recency.
    2. If ordering is unsupported, repeat the same query once, unordered.
    3. If the result is empty, or the store fails in any other way,
       return the fallback catalog's matching subset.
    """

    def __init__(
        self,
        source: RemoteCatalogSource,
        fallback: FallbackCatalog = fallback_catalog,
    ):
        self.source = source
        self.fallback = fallback

    async def fetch_all(self) -> list[Product]:
        """Get all products"""
        return await self._fetch(None)

    async def fetch_by_category(self, category: ProductCategory) -> list[Product]:
        """Get products in a specific category"""
        return await self._fetch(category)

    async def fetch_by_id(self, product_id: str) -> Optional[Product]:
        """Get a product by ID, falling back to the fixed catalog on any miss"""
        try:
            document = await self.source.get_document(product_id)
            return Product.from_document(document.id, document.data)
        except DocumentNotFoundError:
            logger.info(f"Product {product_id} not in remote catalog, checking fallback")
        except Exception as e:
            logger.warning(f"Fetching product {product_id} failed, using fallback: {e!r}")
        return self.fallback.by_id(product_id)

    async def _query(self, category: Optional[ProductCategory], order_by_recent: bool) -> list[Document]:
        if category is None:
            return await self.source.list_documents(order_by_recent=order_by_recent)
        return await self.source.query_documents(
            "category",
            category.value,
            order_by_recent=order_by_recent,
        )

    async def _fetch(self, category: Optional[ProductCategory]) -> list[Product]:
        label = category.value if category else "all"
        try:
            try:
                documents = await self._query(category, order_by_recent=True)
            except OrderingUnsupportedError:
                logger.info(f"Ordered query unavailable for '{label}', retrying without ordering")
                documents = await self._query(category, order_by_recent=False)
        except Exception as e:
            logger.warning(f"Fetching '{label}' products failed, using fallback catalog: {e!r}")
            return self.fallback.by_category(category)

        products = to_products(documents)
        if not products:
            logger.info(f"Remote catalog returned no '{label}' products, using fallback catalog")
            return self.fallback.by_category(category)

        logger.debug(f"Fetched {len(products)} '{label}' products from remote catalog")
        return products

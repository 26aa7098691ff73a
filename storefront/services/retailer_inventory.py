"""
Retailer Inventory

A retailer's view of their own products. Reads never fall back to the
fixed catalog and writes surface their failures to the caller.
"""

import logging

from ..core.errors import (
    InventoryReadError,
    InventoryWriteError,
    OrderingUnsupportedError,
    RemoteSourceError,
)
from ..database.documents import RemoteCatalogSource, created_at_key
from ..models.product import NewProduct, Product
from .catalog_fetcher import to_products

logger = logging.getLogger(__name__)


class RetailerInventoryView:
    """Products owned by one retailer, with stock and delete mutations"""

    OWNER_FIELD = "retailerId"

    def __init__(self, source: RemoteCatalogSource):
        self.source = source

    async def list_owned(self, owner_id: str) -> list[Product]:
        """
        List a retailer's products, most recent first.

        An empty inventory is returned as an empty list.

        Raises:
            InventoryReadError: if the remote store cannot be read
        """
        try:
            try:
                documents = await self.source.query_documents(self.OWNER_FIELD, owner_id)
            except OrderingUnsupportedError:
                logger.info("Ordered inventory query unavailable, sorting locally")
                documents = await self.source.query_documents(
                    self.OWNER_FIELD,
                    owner_id,
                    order_by_recent=False,
                )
                documents.sort(key=created_at_key, reverse=True)
        except RemoteSourceError as e:
            logger.error(f"Loading inventory for retailer {owner_id} failed: {e}")
            raise InventoryReadError("Failed to load products", cause=e) from e

        return to_products(documents)

    async def add_product(self, owner_id: str, owner_name: str, product: NewProduct) -> Product:
        """Create a product owned by the retailer"""
        data = product.to_document(owner_id, owner_name)
        # Validate before the write so a stored document always parses
        created = Product.from_document("", data)
        try:
            product_id = await self.source.create_document(data)
        except RemoteSourceError as e:
            logger.error(f"Adding product for retailer {owner_id} failed: {e}")
            raise InventoryWriteError("Failed to add product", cause=e) from e

        logger.info(f"Retailer {owner_id} added product {product_id}")
        return created.model_copy(update={"id": product_id})

    async def set_stock(self, product_id: str, in_stock: bool) -> None:
        """Set the stock flag of one product"""
        try:
            await self.source.update_document(product_id, {"inStock": in_stock})
        except RemoteSourceError as e:
            logger.error(f"Updating stock for product {product_id} failed: {e}")
            raise InventoryWriteError("Failed to update stock status", cause=e) from e

    async def remove(self, product_id: str) -> None:
        """Delete one product"""
        try:
            await self.source.delete_document(product_id)
        except RemoteSourceError as e:
            logger.error(f"Deleting product {product_id} failed: {e}")
            raise InventoryWriteError("Failed to delete product", cause=e) from e

    async def toggle_stock(self, products: list[Product], product_id: str) -> list[Product]:
        """
        Flip a listed product's stock flag on the remote store, then patch
        the caller's list in place. The list is untouched if the write fails.

        Raises:
            KeyError: if product_id is not in products
            InventoryWriteError: if the remote update fails
        """
        product = next((p for p in products if p.id == product_id), None)
        if product is None:
            raise KeyError(product_id)

        await self.set_stock(product_id, not product.in_stock)
        return patch_stock(products, product_id, not product.in_stock)

    async def delete_listed(self, products: list[Product], product_id: str) -> list[Product]:
        """Delete a product on the remote store, then drop it from the caller's list"""
        await self.remove(product_id)
        return drop_product(products, product_id)


def patch_stock(products: list[Product], product_id: str, in_stock: bool) -> list[Product]:
    """Replace the matching entry with a stock-patched copy, keeping its position"""
    for index, product in enumerate(products):
        if product.id == product_id:
            products[index] = product.model_copy(update={"in_stock": in_stock})
    return products


def drop_product(products: list[Product], product_id: str) -> list[Product]:
    """Remove the matching entry from the list"""
    products[:] = [p for p in products if p.id != product_id]
    return products

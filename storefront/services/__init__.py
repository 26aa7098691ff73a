# Services

from .catalog_fetcher import CatalogFetcher
from .remote_source import HttpDocumentSource
from .retailer_inventory import RetailerInventoryView, patch_stock, drop_product

__all__ = [
    "CatalogFetcher",
    "HttpDocumentSource",
    "RetailerInventoryView",
    "patch_stock",
    "drop_product",
]

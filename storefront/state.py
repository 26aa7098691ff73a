"""Storefront state, created once per application and handed to routes"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from fastapi import Request

from .core.config import Settings
from .database.documents import InMemoryDocumentSource, RemoteCatalogSource
from .database.fallback import FALLBACK_PRODUCTS, FallbackCatalog, fallback_catalog
from .services.catalog_fetcher import CatalogFetcher
from .services.remote_source import HttpDocumentSource
from .services.retailer_inventory import RetailerInventoryView
from .stores.cart import CartStore
from .stores.catalog import CatalogStore

logger = logging.getLogger(__name__)


@dataclass
class StorefrontState:
    """Owned state: catalog source, stores and the retailer view"""
    source: RemoteCatalogSource
    fetcher: CatalogFetcher
    catalog: CatalogStore
    inventory: RetailerInventoryView
    cart: CartStore = field(default_factory=CartStore)

    async def close(self) -> None:
        await self.source.close()


def build_state(
    source: RemoteCatalogSource,
    fallback: FallbackCatalog = fallback_catalog,
) -> StorefrontState:
    """Wire stores around a catalog source: empty products, no filters, empty cart"""
    fetcher = CatalogFetcher(source, fallback)
    return StorefrontState(
        source=source,
        fetcher=fetcher,
        catalog=CatalogStore(fetcher),
        inventory=RetailerInventoryView(source),
    )


def create_source(settings: Settings) -> RemoteCatalogSource:
    """Create the catalog source selected by settings"""
    if settings.uses_http_catalog:
        logger.info(f"Using HTTP catalog at {settings.catalog_base_url}/{settings.catalog_collection}")
        return HttpDocumentSource(
            base_url=settings.catalog_base_url,
            collection=settings.catalog_collection,
            api_key=settings.catalog_api_key,
            timeout=settings.catalog_timeout_seconds,
        )

    source = InMemoryDocumentSource()
    if settings.seed_memory_catalog:
        source.seed(FALLBACK_PRODUCTS)
        logger.info(f"Seeded in-memory catalog with {len(FALLBACK_PRODUCTS)} products")
    return source


def get_state(request: Request) -> StorefrontState:
    """FastAPI dependency returning the application's state"""
    state: Optional[StorefrontState] = getattr(request.app.state, "storefront", None)
    if state is None:
        raise RuntimeError("Storefront state is not initialized")
    return state

# Database modules

from .documents import Document, RemoteCatalogSource, InMemoryDocumentSource
from .fallback import FALLBACK_PRODUCTS, FallbackCatalog, fallback_catalog

__all__ = [
    "Document",
    "RemoteCatalogSource",
    "InMemoryDocumentSource",
    "FALLBACK_PRODUCTS",
    "FallbackCatalog",
    "fallback_catalog",
]

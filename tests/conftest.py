"""Pytest fixtures for catalog, cart and inventory tests."""

from typing import Any

import pytest

from storefront.core.errors import RemoteUnavailableError
from storefront.database.documents import Document, InMemoryDocumentSource, RemoteCatalogSource
from storefront.models.product import Product, ProductCategory


class ScriptedSource(RemoteCatalogSource):
    """Source whose queries return or raise what the test scripts, recording every call"""

    def __init__(self, ordered: Any = None, unordered: Any = None, document: Any = None):
        self.ordered = ordered if ordered is not None else []
        self.unordered = unordered if unordered is not None else []
        self.document = document
        self.calls: list[tuple] = []

    @staticmethod
    def _result(outcome: Any) -> Any:
        if isinstance(outcome, Exception):
            raise outcome
        return list(outcome)

    async def list_documents(self, order_by_recent: bool = True) -> list[Document]:
        self.calls.append(("list", None, order_by_recent))
        return self._result(self.ordered if order_by_recent else self.unordered)

    async def query_documents(self, field_name, value, order_by_recent=True) -> list[Document]:
        self.calls.append(("query", (field_name, value), order_by_recent))
        return self._result(self.ordered if order_by_recent else self.unordered)

    async def get_document(self, document_id: str) -> Document:
        self.calls.append(("get", document_id, None))
        if isinstance(self.document, Exception):
            raise self.document
        return self.document

    async def update_document(self, document_id, fields) -> None:
        raise RemoteUnavailableError("read-only")

    async def delete_document(self, document_id) -> None:
        raise RemoteUnavailableError("read-only")

    async def create_document(self, data) -> str:
        raise RemoteUnavailableError("read-only")


@pytest.fixture
def make_product():
    """Factory for valid products with overridable fields."""

    def _make(product_id: str, name: str = "Product", category: str = "seeds", **fields) -> Product:
        data = {
            "id": product_id,
            "name": name,
            "price": 100,
            "category": ProductCategory(category),
            "description": "",
        }
        data.update(fields)
        return Product(**data)

    return _make


@pytest.fixture
def memory_source():
    """Empty in-memory document source."""
    return InMemoryDocumentSource()


@pytest.fixture
def scripted_source():
    return ScriptedSource

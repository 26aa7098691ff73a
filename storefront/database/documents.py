"""Document-store access for the product collection"""

import copy
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable

from pydantic import TypeAdapter, ValidationError

from ..core.errors import DocumentNotFoundError, OrderingUnsupportedError
from ..models.product import Product

CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)
_TIMESTAMP = TypeAdapter(datetime)


@dataclass
class Document:
    """A stored document and its store-assigned id"""
    id: str
    data: dict[str, Any] = field(default_factory=dict)


def created_at_key(document: Document) -> datetime:
    """Sort key for recency ordering; documents without a valid timestamp sort last"""
    value = document.data.get(CREATED_AT)
    if value is None:
        return _EPOCH
    try:
        value = _TIMESTAMP.validate_python(value)
    except ValidationError:
        return _EPOCH
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


class RemoteCatalogSource(ABC):
    """
    Contract for the remote product collection.

    Queries may raise OrderingUnsupportedError when recency ordering is
    requested but not available, RemoteUnavailableError on transport or
    permission failures, and DocumentNotFoundError for a missing id.
    """

    @abstractmethod
    async def list_documents(self, order_by_recent: bool = True) -> list[Document]:
        """List every document in the collection."""

    @abstractmethod
    async def query_documents(
        self,
        field_name: str,
        value: Any,
        order_by_recent: bool = True,
    ) -> list[Document]:
        """List documents whose field equals value."""

    @abstractmethod
    async def get_document(self, document_id: str) -> Document:
        """Get one document by id."""

    @abstractmethod
    async def update_document(self, document_id: str, fields: dict[str, Any]) -> None:
        """Update selected fields of one document."""

    @abstractmethod
    async def delete_document(self, document_id: str) -> None:
        """Delete one document."""

    @abstractmethod
    async def create_document(self, data: dict[str, Any]) -> str:
        """Create a document and return its new id."""

    async def close(self) -> None:
        """Release any held resources"""


class InMemoryDocumentSource(RemoteCatalogSource):
    """
    In-memory document collection.

    Set supports_ordering=False to behave like a store without the
    recency index: ordered queries then raise OrderingUnsupportedError.
    """

    def __init__(self, supports_ordering: bool = True):
        self.documents: dict[str, dict[str, Any]] = {}
        self.supports_ordering = supports_ordering

    def seed(self, products: Iterable[Product]) -> None:
        """Store products under their existing ids"""
        for product in products:
            data = product.model_dump(by_alias=True, exclude={"id"}, exclude_none=True, mode="json")
            data.setdefault(CREATED_AT, datetime.now(timezone.utc))
            self.documents[product.id] = data

    def _select(self, documents: list[Document], order_by_recent: bool) -> list[Document]:
        if order_by_recent:
            if not self.supports_ordering:
                raise OrderingUnsupportedError("The query requires an index on createdAt")
            documents.sort(key=created_at_key, reverse=True)
        return documents

    def _all(self) -> list[Document]:
        return [Document(id=doc_id, data=copy.deepcopy(data)) for doc_id, data in self.documents.items()]

    async def list_documents(self, order_by_recent: bool = True) -> list[Document]:
        return self._select(self._all(), order_by_recent)

    async def query_documents(
        self,
        field_name: str,
        value: Any,
        order_by_recent: bool = True,
    ) -> list[Document]:
        matches = [doc for doc in self._all() if doc.data.get(field_name) == value]
        return self._select(matches, order_by_recent)

    async def get_document(self, document_id: str) -> Document:
        if document_id not in self.documents:
            raise DocumentNotFoundError(document_id)
        return Document(id=document_id, data=copy.deepcopy(self.documents[document_id]))

    async def update_document(self, document_id: str, fields: dict[str, Any]) -> None:
        if document_id not in self.documents:
            raise DocumentNotFoundError(document_id)
        self.documents[document_id].update(fields)
        self.documents[document_id][UPDATED_AT] = datetime.now(timezone.utc)

    async def delete_document(self, document_id: str) -> None:
        if document_id not in self.documents:
            raise DocumentNotFoundError(document_id)
        del self.documents[document_id]

    async def create_document(self, data: dict[str, Any]) -> str:
        document_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc)
        self.documents[document_id] = {**data, CREATED_AT: now, UPDATED_AT: now}
        return document_id

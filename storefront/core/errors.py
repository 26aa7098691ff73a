"""Storefront domain exceptions"""

from typing import Optional


class RemoteSourceError(Exception):
    """Base exception for remote catalog source errors"""


class OrderingUnsupportedError(RemoteSourceError):
    """The remote store cannot order this query (e.g. missing index)"""


class RemoteUnavailableError(RemoteSourceError):
    """Transport, permission or server failure talking to the remote store"""


class DocumentNotFoundError(RemoteSourceError):
    """The requested document does not exist"""

    def __init__(self, document_id: str):
        super().__init__(f"Document not found: {document_id}")
        self.document_id = document_id


class InventoryError(Exception):
    """Base exception for retailer inventory operations"""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class InventoryWriteError(InventoryError):
    """An authoritative write (create/update/delete) failed"""


class InventoryReadError(InventoryError):
    """A retailer's own inventory could not be read"""

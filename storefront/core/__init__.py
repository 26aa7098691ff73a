# Core modules

from .config import Settings, get_settings
from .errors import (
    RemoteSourceError,
    OrderingUnsupportedError,
    RemoteUnavailableError,
    DocumentNotFoundError,
    InventoryError,
    InventoryWriteError,
    InventoryReadError,
)

__all__ = [
    "Settings",
    "get_settings",
    "RemoteSourceError",
    "OrderingUnsupportedError",
    "RemoteUnavailableError",
    "DocumentNotFoundError",
    "InventoryError",
    "InventoryWriteError",
    "InventoryReadError",
]

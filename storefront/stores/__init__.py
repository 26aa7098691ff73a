# State stores

from .catalog import CatalogStore, category_matches, search_matches
from .cart import CartStore

__all__ = ["CatalogStore", "CartStore", "category_matches", "search_matches"]

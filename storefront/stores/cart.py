"""Cart state"""

import logging
import threading
from decimal import Decimal
from typing import Optional

from ..models.cart import CartLine, CartView
from ..models.product import Product

logger = logging.getLogger(__name__)


class CartStore:
    """
    Process-local shopping cart.

    Holds at most one line per product id, in insertion order. A product
    removed and added again gets a new line at the end. Non-positive
    quantities passed to add() are ignored.

    Mutations hold a lock so the exists-then-increment/insert decision in
    add() is atomic when endpoints run on a thread pool.
    """

    def __init__(self):
        self._lines: list[CartLine] = []
        self._lock = threading.Lock()

    @property
    def lines(self) -> list[CartLine]:
        with self._lock:
            return [line.model_copy() for line in self._lines]

    def _find(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self._lines if line.product.id == product_id), None)

    def get_line(self, product_id: str) -> Optional[CartLine]:
        with self._lock:
            line = self._find(product_id)
            return line.model_copy() if line else None

    def add(self, product: Product, quantity: int = 1) -> None:
        """Add a product, merging with its existing line"""
        if quantity <= 0:
            logger.debug(f"Ignoring add of {product.id} with quantity {quantity}")
            return

        with self._lock:
            existing_line = self._find(product.id)
            if existing_line:
                existing_line.quantity += quantity
            else:
                self._lines.append(CartLine(product=product.snapshot(), quantity=quantity))

    def remove(self, product_id: str) -> None:
        """Remove a line; absent ids are ignored"""
        with self._lock:
            self._lines = [line for line in self._lines if line.product.id != product_id]

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Replace a line's quantity; zero or less removes the line"""
        if quantity <= 0:
            self.remove(product_id)
            return

        with self._lock:
            line = self._find(product_id)
            if line:
                line.quantity = quantity

    def clear(self) -> None:
        """Clear all items from cart"""
        with self._lock:
            self._lines = []

    def total_count(self) -> int:
        with self._lock:
            return sum(line.quantity for line in self._lines)

    def total_price(self) -> Decimal:
        with self._lock:
            return sum((line.product.price * line.quantity for line in self._lines), Decimal(0))

    def line_count(self) -> int:
        with self._lock:
            return len(self._lines)

    def view(self) -> CartView:
        return CartView(
            lines=self.lines,
            total_count=self.total_count(),
            total_price=self.total_price(),
        )

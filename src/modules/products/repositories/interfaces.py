"""Product repository interface.

Extends ``IRepository[Product]`` with the pessimistic lock acquisition
and stock write used by the order placement transaction.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_for_update(self, id: str, nowait: bool = False) -> Optional["Product"]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction; the lock is held until it
        ends.  With ``nowait=True`` a contended row raises
        ``django.db.DatabaseError`` immediately instead of waiting.
        Returns ``None`` if the product does not exist.
        """

    @abstractmethod
    def update_stock(self, product: "Product") -> "Product":
        """Persist ``product.stock_quantity`` (and nothing else)."""

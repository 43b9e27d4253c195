"""Order repository interface.

Extends ``IRepository[Order]`` with the writes the placement
transaction performs: creating the order header and its line.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order, OrderLine


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate (Order + OrderLine)."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Insert an order header.

        ``data`` must include ``customer_id`` and ``order_amount``, and
        optionally ``delivery_fee`` and ``discount_applied``.
        """

    @abstractmethod
    def add_line(self, data: Dict[str, Any]) -> OrderLine:
        """Insert an order line.

        ``data`` must include ``order_id``, ``product_id``, ``quantity``,
        ``unit_price`` and optionally ``discount``.
        """

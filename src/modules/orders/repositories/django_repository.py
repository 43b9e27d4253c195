"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.  The write
methods do not open their own transaction: they run inside the
placement transaction owned by the service, so a failure in any later
step undoes them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.orders.constants import ZERO
from modules.orders.models import Order, OrderLine
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, data: Dict[str, Any]) -> Order:
        order = Order(
            customer_id=data["customer_id"],
            order_amount=data["order_amount"],
            delivery_fee=data.get("delivery_fee", ZERO),
            discount_applied=data.get("discount_applied", ZERO),
        )
        order.save(force_insert=True)
        logger.info(
            "order.header_inserted",
            order_id=str(order.id),
            order_amount=str(order.order_amount),
        )
        return order

    def add_line(self, data: Dict[str, Any]) -> OrderLine:
        line = OrderLine(
            order_id=data["order_id"],
            product_id=data["product_id"],
            quantity=data["quantity"],
            unit_price=data["unit_price"],
            discount=data.get("discount", ZERO),
        )
        line.save(force_insert=True)
        logger.info(
            "order.line_inserted",
            order_id=str(line.order_id),
            product_id=str(line.product_id),
            quantity=line.quantity,
        )
        return line

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its customer and lines eagerly loaded.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return (
                Order.objects.select_related("customer")
                .prefetch_related("lines__product")
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """List orders with optional filters and eager-loaded lines.

        Supported filter keys are plain ORM look-ups, e.g.
        ``customer_id`` or ``order_date__range``.
        """
        queryset = self.queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def queryset(self):
        """Unevaluated queryset for DRF filtering and pagination."""
        return Order.objects.select_related("customer").prefetch_related(
            "lines__product"
        )

    def save(self, entity: Order) -> Order:
        entity.save()
        logger.info("order.saved", order_id=str(entity.id))
        return entity

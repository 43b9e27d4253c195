"""Order placement service (Use Case).

Places a single-product order as one atomic unit of work:

1. Lock the product row (SELECT FOR UPDATE) and read stock + price.
2. Reject if the product is missing or stock is insufficient.
3. Reject if the product has no price.
4-6. Insert the order header (UUIDv7 id, amount = quantity * price).
7. Decrement stock from the value read under the lock.
8. Insert the order line with the snapshotted unit price.
9. Commit.

Failures never escape as exceptions: ``place_order`` returns a
``PlaceOrderResult`` carrying either the new order id or one of the
``PlaceOrderError`` kinds, and in the failure case nothing was written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog
from django.conf import settings
from django.db import DatabaseError, transaction

from modules.orders.constants import PlaceOrderError
from modules.orders.dtos import PlaceOrderResult
from modules.orders.exceptions import (
    InsufficientStock,
    MissingPrice,
    OrderPlacementError,
    ProductNotFound,
)

if TYPE_CHECKING:
    from modules.orders.dtos import PlaceOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderPlacementService:
    """Application service for order placement.

    Receives repositories via constructor injection (DIP).  ``lock_nowait``
    defaults to the ``ORDER_LOCK_NOWAIT`` setting.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        lock_nowait: Optional[bool] = None,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository
        if lock_nowait is None:
            lock_nowait = getattr(settings, "ORDER_LOCK_NOWAIT", False)
        self._lock_nowait = lock_nowait

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def place_order(self, dto: PlaceOrderDTO) -> PlaceOrderResult:
        """Place an order and report the outcome as a tagged result."""
        log = logger.bind(
            customer_id=str(dto.customer_id),
            product_id=str(dto.product_id),
            quantity=dto.quantity,
        )
        log.info("order.placement_started")

        try:
            order = self._place_atomically(dto)
        except OrderPlacementError as exc:
            log.warning(
                "order.placement_rejected",
                error=exc.kind.value,
                detail=str(exc),
            )
            return PlaceOrderResult.failure(exc.kind, str(exc))
        except DatabaseError as exc:
            # Lock timeouts, NOWAIT conflicts, constraint violations and
            # lost connections all end here; the atomic block has rolled back.
            log.error(
                "order.storage_failure",
                error_class=exc.__class__.__name__,
                detail=str(exc),
            )
            return PlaceOrderResult.failure(PlaceOrderError.STORAGE_FAILURE, str(exc))

        log.info(
            "order.placed",
            order_id=str(order.id),
            order_amount=str(order.order_amount),
        )
        return PlaceOrderResult.success(order.id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @transaction.atomic
    def _place_atomically(self, dto: PlaceOrderDTO) -> Order:
        product = self._product_repo.get_for_update(
            str(dto.product_id), nowait=self._lock_nowait
        )
        if product is None:
            raise ProductNotFound(f"Product {dto.product_id} not found.")
        if product.stock_quantity < dto.quantity:
            raise InsufficientStock(
                f"Product {product.id}: requested {dto.quantity}, "
                f"available {product.stock_quantity}."
            )
        if not product.has_price:
            raise MissingPrice(f"Product {product.id} has no price per unit.")

        unit_price = product.price_per_unit
        order = self._order_repo.create(
            {
                "customer_id": dto.customer_id,
                "order_amount": unit_price * dto.quantity,
                "delivery_fee": dto.delivery_fee,
                "discount_applied": dto.discount,
            }
        )

        product.stock_quantity -= dto.quantity
        self._product_repo.update_stock(product)
        logger.info(
            "order.stock_reserved",
            product_id=str(product.id),
            quantity=dto.quantity,
            remaining=product.stock_quantity,
        )

        self._order_repo.add_line(
            {
                "order_id": order.id,
                "product_id": product.id,
                "quantity": dto.quantity,
                "unit_price": unit_price,
                "discount": dto.discount,
            }
        )
        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Optional[Order]:
        """Retrieve a placed order with its line, or ``None``."""
        return self._order_repo.get_by_id(order_id)

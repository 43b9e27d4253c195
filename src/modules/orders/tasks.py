"""Async order placement.

Queued callers (imports, batch jobs) place orders through Celery.
The task runs the same transaction as the HTTP API and returns the
tagged result as a JSON-compatible dict, so a failure kind travels
back through the result backend instead of an exception traceback.
"""

from decimal import Decimal

import structlog
from celery import shared_task

from modules.orders.dtos import PlaceOrderDTO
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderPlacementService
from modules.products.repositories.django_repository import ProductDjangoRepository

logger = structlog.get_logger(__name__)


@shared_task(name="orders.place_order")
def place_order_task(
    customer_id: str,
    product_id: str,
    quantity: int,
    discount: str = "0",
    delivery_fee: str = "0",
) -> dict:
    """Place an order; returns ``PlaceOrderResult.model_dump(mode="json")``.

    Monetary arguments are strings so they survive JSON serialization
    without float rounding.
    """
    service = OrderPlacementService(
        order_repository=OrderDjangoRepository(),
        product_repository=ProductDjangoRepository(),
    )
    dto = PlaceOrderDTO(
        customer_id=customer_id,
        product_id=product_id,
        quantity=quantity,
        discount=Decimal(discount),
        delivery_fee=Decimal(delivery_fee),
    )
    result = service.place_order(dto)
    logger.info(
        "order.task_completed",
        ok=result.ok,
        order_id=str(result.order_id) if result.order_id else None,
        error=result.error.value if result.error else None,
    )
    return result.model_dump(mode="json")

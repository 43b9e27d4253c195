"""Order and OrderLine models.

Business rules implemented:
- Order identifier is a generated UUIDv7 (inherited from BaseModel).
- Customer FK uses PROTECT to preserve purchase history.
- OrderLine snapshots the product price at placement time (``unit_price``).
- One line per (order, product) pair.
- Amounts, fees and discounts are non-negative (check constraints).

Rows are written once by ``OrderPlacementService`` and never updated.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.constants import ZERO


class Order(BaseModel):
    """Order header.

    ``order_amount`` is ``quantity * unit_price`` of the order line;
    ``delivery_fee`` and ``discount_applied`` are recorded as supplied by
    the caller.
    """

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    order_date = models.DateTimeField(default=timezone.now)
    # Wide enough for the largest price_per_unit times the largest quantity.
    order_amount = models.DecimalField(
        max_digits=20,
        decimal_places=2,
        default=ZERO,
    )
    delivery_fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=ZERO,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    discount_applied = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=ZERO,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    class Meta:
        db_table = "orders"
        ordering = ["-order_date"]
        indexes = [
            models.Index(fields=["-order_date"], name="orders_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(order_amount__gte=0),
                name="orders_amount_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(delivery_fee__gte=0),
                name="orders_delivery_fee_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(discount_applied__gte=0),
                name="orders_discount_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"Order {self.id} ({self.order_amount})"


class OrderLine(BaseModel):
    """Line detail linking an Order to a Product.

    ``unit_price`` is a **snapshot** of the product price at the time of
    purchase; later price changes on the product do not affect it.
    """

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="lines",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_lines",
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    discount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=ZERO,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    class Meta:
        db_table = "order_lines"
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["order", "product"],
                name="order_lines_order_product_uniq",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_lines_quantity_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(discount__gte=0),
                name="order_lines_discount_non_negative",
            ),
        ]

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * self.unit_price

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity} @ {self.unit_price}"

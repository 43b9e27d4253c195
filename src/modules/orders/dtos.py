"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the callers (DRF views, Celery task)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``PlaceOrderDTO``: input for placing a single-product order.
- ``PlaceOrderResult``: tagged result, either an order id or a failure kind.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from modules.orders.constants import ZERO, PlaceOrderError


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class PlaceOrderDTO(BaseModel):
    """Immutable DTO for an order placement request.

    ``discount`` and ``delivery_fee`` are supplied by the caller and only
    recorded; they do not change the computed order amount.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: UUID
    product_id: UUID
    quantity: int
    discount: Decimal = Field(default=ZERO, max_digits=10, decimal_places=2)
    delivery_fee: Decimal = Field(default=ZERO, max_digits=10, decimal_places=2)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v

    @field_validator("discount", "delivery_fee")
    @classmethod
    def must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Value cannot be negative.")
        return v


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class PlaceOrderResult(BaseModel):
    """Outcome of ``OrderPlacementService.place_order``.

    Exactly one of ``order_id`` / ``error`` is set.  ``detail`` is a
    human-readable explanation for failures.
    """

    model_config = ConfigDict(frozen=True)

    order_id: Optional[UUID] = None
    error: Optional[PlaceOrderError] = None
    detail: str = ""

    @model_validator(mode="after")
    def exactly_one_outcome(self):
        if (self.order_id is None) == (self.error is None):
            raise ValueError("Result must carry either an order_id or an error.")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, order_id: UUID) -> PlaceOrderResult:
        return cls(order_id=order_id)

    @classmethod
    def failure(cls, error: PlaceOrderError, detail: str = "") -> PlaceOrderResult:
        return cls(error=error, detail=detail)


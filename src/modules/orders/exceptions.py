"""Order placement domain exceptions.

Raised inside the placement transaction to abort it; leaving the
``transaction.atomic`` block with an exception is what rolls the work
back.  The service converts them into a ``PlaceOrderResult`` before
returning, so callers never handle these directly.
"""

from __future__ import annotations

from modules.orders.constants import PlaceOrderError


class OrderPlacementError(Exception):
    """Base class; ``kind`` is the failure reported to the caller."""

    kind: PlaceOrderError


class InsufficientStock(OrderPlacementError):
    """Available stock is lower than the requested quantity."""

    kind = PlaceOrderError.INSUFFICIENT_STOCK


class MissingPrice(OrderPlacementError):
    """The product has no usable price per unit."""

    kind = PlaceOrderError.MISSING_PRICE


class ProductNotFound(OrderPlacementError):
    """The product referenced by the order does not exist."""

    kind = PlaceOrderError.PRODUCT_NOT_FOUND

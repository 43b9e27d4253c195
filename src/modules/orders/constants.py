"""Order placement constants.

``PlaceOrderError`` is the closed set of failure kinds a caller of
``OrderPlacementService.place_order`` can receive.
"""

from decimal import Decimal

from django.db import models


class PlaceOrderError(models.TextChoices):
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK", "Insufficient stock"
    MISSING_PRICE = "MISSING_PRICE", "Missing price"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND", "Product not found"
    STORAGE_FAILURE = "STORAGE_FAILURE", "Storage failure"


ZERO = Decimal("0.00")

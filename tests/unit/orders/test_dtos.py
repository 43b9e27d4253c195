"""Unit tests for order placement DTOs."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.orders.constants import PlaceOrderError
from modules.orders.dtos import PlaceOrderDTO, PlaceOrderResult

pytestmark = pytest.mark.unit


class TestPlaceOrderDTO:
    def test_defaults(self):
        dto = PlaceOrderDTO(customer_id=uuid4(), product_id=uuid4(), quantity=1)
        assert dto.discount == Decimal("0.00")
        assert dto.delivery_fee == Decimal("0.00")

    def test_accepts_string_identifiers(self):
        customer_id = uuid4()
        dto = PlaceOrderDTO(
            customer_id=str(customer_id), product_id=str(uuid4()), quantity=2
        )
        assert dto.customer_id == customer_id

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_rejects_non_positive_quantity(self, quantity):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            PlaceOrderDTO(customer_id=uuid4(), product_id=uuid4(), quantity=quantity)

    @pytest.mark.parametrize("field", ["discount", "delivery_fee"])
    def test_rejects_negative_money(self, field):
        with pytest.raises(ValidationError):
            PlaceOrderDTO(
                customer_id=uuid4(),
                product_id=uuid4(),
                quantity=1,
                **{field: Decimal("-1.00")},
            )

    def test_rejects_invalid_uuid(self):
        with pytest.raises(ValidationError):
            PlaceOrderDTO(customer_id="not-a-uuid", product_id=uuid4(), quantity=1)

    def test_is_frozen(self):
        dto = PlaceOrderDTO(customer_id=uuid4(), product_id=uuid4(), quantity=1)
        with pytest.raises(ValidationError):
            dto.quantity = 5


class TestPlaceOrderResult:
    def test_success(self):
        order_id = uuid4()
        result = PlaceOrderResult.success(order_id)
        assert result.ok
        assert result.order_id == order_id
        assert result.error is None

    def test_failure(self):
        result = PlaceOrderResult.failure(
            PlaceOrderError.INSUFFICIENT_STOCK, "requested 5, available 3"
        )
        assert not result.ok
        assert result.order_id is None
        assert result.error == PlaceOrderError.INSUFFICIENT_STOCK
        assert result.detail == "requested 5, available 3"

    def test_requires_an_outcome(self):
        with pytest.raises(ValidationError):
            PlaceOrderResult()

    def test_rejects_both_outcomes(self):
        with pytest.raises(ValidationError):
            PlaceOrderResult(
                order_id=uuid4(), error=PlaceOrderError.MISSING_PRICE
            )

    def test_json_dump(self):
        result = PlaceOrderResult.failure(PlaceOrderError.STORAGE_FAILURE, "timeout")
        assert result.model_dump(mode="json") == {
            "order_id": None,
            "error": "STORAGE_FAILURE",
            "detail": "timeout",
        }

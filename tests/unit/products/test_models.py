"""Unit tests for catalog models."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.models import Category, Product, Review, Subcategory

pytestmark = pytest.mark.unit


class TestProduct:
    def test_price_may_be_unset(self, unpriced_product):
        unpriced_product.refresh_from_db()
        assert unpriced_product.price_per_unit is None
        assert not unpriced_product.has_price

    def test_has_price(self, mango):
        assert mango.has_price

    def test_negative_price_rejected_by_database(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(
                name="Broken", price_per_unit=Decimal("-1.00"), stock_quantity=1
            )

    def test_negative_stock_rejected_by_database(self, mango):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.filter(id=mango.id).update(stock_quantity=-1)

    def test_clean_rejects_negative_price(self):
        product = Product(name="Broken", price_per_unit=Decimal("-1.00"))
        with pytest.raises(ValidationError):
            product.clean()

    def test_str(self, mango):
        assert str(mango) == "Alphonso Mango (1 kg)"


class TestCategories:
    def test_subcategory_unique_per_category(self, subcategory):
        with pytest.raises(IntegrityError), transaction.atomic():
            Subcategory.objects.create(
                category=subcategory.category, name="Fresh Fruits"
            )

    def test_same_subcategory_name_in_other_category(self, subcategory):
        dairy = Category.objects.create(name="Dairy")
        other = Subcategory.objects.create(category=dairy, name="Fresh Fruits")
        assert str(other) == "Dairy / Fresh Fruits"


class TestReview:
    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range_rejected(self, mango, customer, rating):
        with pytest.raises(IntegrityError), transaction.atomic():
            Review.objects.create(product=mango, customer=customer, rating=rating)

    def test_valid_review(self, mango, customer):
        review = Review.objects.create(product=mango, customer=customer, rating=5)
        assert mango.reviews.get() == review

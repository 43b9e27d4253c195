"""Unit tests for ProductDjangoRepository."""

from __future__ import annotations

from uuid import uuid4

import pytest
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


class TestProductRepository:
    def test_implements_interface(self, repo):
        assert isinstance(repo, IProductRepository)

    def test_get_by_id(self, repo, mango):
        assert repo.get_by_id(str(mango.id)) == mango

    def test_get_by_id_unknown(self, repo):
        assert repo.get_by_id(str(uuid4())) is None

    def test_get_by_id_malformed(self, repo):
        assert repo.get_by_id("not-a-uuid") is None

    def test_get_for_update_returns_product(self, repo, mango):
        with transaction.atomic():
            locked = repo.get_for_update(str(mango.id))
        assert locked == mango
        assert locked.stock_quantity == 10

    def test_get_for_update_unknown(self, repo):
        with transaction.atomic():
            assert repo.get_for_update(str(uuid4())) is None

    def test_update_stock(self, repo, mango):
        mango.stock_quantity = 4
        repo.update_stock(mango)
        assert Product.objects.get(id=mango.id).stock_quantity == 4

    def test_list_filters_by_category(self, repo, mango, unpriced_product):
        assert set(repo.list({"subcategory__category__name": "Fruits"})) == {
            mango,
            unpriced_product,
        }
        assert repo.list({"stock_quantity__gt": 20}) == [unpriced_product]

    def test_save(self, repo, mango):
        mango.name = "Kesar Mango (1 kg)"
        repo.save(mango)
        assert Product.objects.get(id=mango.id).name == "Kesar Mango (1 kg)"

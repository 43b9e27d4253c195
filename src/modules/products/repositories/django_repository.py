"""Django ORM implementation of the Product repository.

Error handling follows the Null Object pattern: look-ups return ``None``
for missing or malformed IDs instead of raising, and the service layer
decides what a missing product means.  Database errors are not caught
here; they propagate so the enclosing transaction rolls back.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"stock_quantity__gt": 0}
            {"subcategory__category__name": "Fruits"}
        """
        queryset = Product.objects.select_related("subcategory__category")
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=str(entity.id))
        return entity

    def get_for_update(self, id: str, nowait: bool = False) -> Optional[Product]:
        """Lock the product row and return it.

        Stock and price come from this single locked read; callers must
        not re-read the row while the lock is held.
        """
        try:
            return (
                Product.objects.select_for_update(nowait=nowait)
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def update_stock(self, product: Product) -> Product:
        product.save(update_fields=["stock_quantity"])
        return product

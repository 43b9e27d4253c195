"""Order API views.

Exposes ``OrderPlacementService`` via HTTP using a DRF ViewSet.
Each ``PlaceOrderError`` kind maps to its own HTTP status; the body
is rendered in the standard error format by the DRF exception handler.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.filters import OrderingFilter
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import ServiceError
from modules.core.pagination import StandardResultsSetPagination
from modules.orders.constants import PlaceOrderError
from modules.orders.dtos import PlaceOrderDTO
from modules.orders.filters import OrderFilter
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    OrderListSerializer,
    OrderSerializer,
    PlaceOrderSerializer,
)
from modules.orders.services import OrderPlacementService
from modules.products.repositories.django_repository import ProductDjangoRepository

ERROR_STATUS = {
    PlaceOrderError.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    PlaceOrderError.INSUFFICIENT_STOCK: status.HTTP_409_CONFLICT,
    PlaceOrderError.MISSING_PRICE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    PlaceOrderError.STORAGE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class OrderViewSet(GenericViewSet):
    """ViewSet for placing and reading orders.

    Does **not** extend ``ModelViewSet``: writes go through
    ``OrderPlacementService`` only, and orders are never updated or
    deleted through the API.
    """

    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    ordering_fields = ["order_date", "order_amount"]
    ordering = ["-order_date", "-id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    pagination_class = StandardResultsSetPagination

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._order_repo = OrderDjangoRepository()
        self._service = OrderPlacementService(
            order_repository=self._order_repo,
            product_repository=ProductDjangoRepository(),
        )

    def get_throttles(self) -> list[BaseThrottle]:
        """Select a throttle scope per action."""
        throttle_scope: str | None
        if self.action == "create":
            throttle_scope = "order_creation"
        elif self.action in {"list", "retrieve"}:
            throttle_scope = "order_listing"
        else:
            throttle_scope = None
        self.throttle_scope = throttle_scope
        return super().get_throttles()

    def get_queryset(self):
        return self._order_repo.queryset()

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/

        Returns 201 with the placed order, or the status mapped from the
        failure kind (404, 409, 422, 503).
        """
        serializer = PlaceOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = PlaceOrderDTO(**serializer.validated_data)
        result = self._service.place_order(dto)

        if not result.ok:
            raise ServiceError(
                detail=result.detail,
                code=result.error.value.lower(),
                http_status=ERROR_STATUS[result.error],
            )

        order = self._service.get_order(str(result.order_id))
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/

        Filtering is handled by ``OrderFilter``, ordering by
        ``OrderingFilter``.  Results are paginated.
        """
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        serializer = OrderListSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        order = self._service.get_order(pk) if pk else None
        if order is None:
            raise NotFound("Order not found.")
        return Response(OrderSerializer(order).data)

"""Standard pagination for list endpoints."""

from rest_framework.pagination import PageNumberPagination


class StandardResultsSetPagination(PageNumberPagination):
    """Page-number pagination with a client-tunable, capped page size.

    ``?page_size=`` is honoured up to ``max_page_size``; the default size
    comes from ``REST_FRAMEWORK["PAGE_SIZE"]``.
    """

    page_size_query_param = "page_size"
    max_page_size = 100

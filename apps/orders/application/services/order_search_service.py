"""
Order search application service.
"""
import logging
import time
from typing import List

from django.conf import settings

from shared.domain import ValidationError
from ...domain.exceptions import OrderSearchError
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import OrderDTO
from ..dtos.order_search_dto import (
    DEFAULT_SUGGESTION_LIMIT,
    MIN_SUGGESTION_LENGTH,
    SUGGESTION_FIELDS,
    OrderSearchCriteria,
    OrderSearchResult,
    OrderSearchStats,
)

logger = logging.getLogger(__name__)


class OrderSearchService:
    """Multi-criteria order search with suggestions and statistics."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    @property
    def slow_query_ms(self) -> int:
        return getattr(settings, 'ORDER_SEARCH_SLOW_QUERY_MS', 100)

    def search(self, criteria: OrderSearchCriteria) -> OrderSearchResult:
        """
        Search orders.

        Args:
            criteria: Filters, paging and sorting

        Returns:
            One page of results with the total match count

        Raises:
            OrderSearchError: If the storage layer fails
        """
        started = time.monotonic()
        try:
            orders, total = self.order_repository.search(criteria)
        except OrderSearchError:
            duration_ms = (time.monotonic() - started) * 1000
            logger.error(
                f"Order search failed after {duration_ms:.0f}ms - criteria: {criteria.summary()}",
                exc_info=True,
            )
            raise

        result = OrderSearchResult(
            items=[OrderDTO.from_entity(order) for order in orders],
            total=total,
            page=criteria.page,
            limit=criteria.limit,
        )

        duration_ms = (time.monotonic() - started) * 1000
        logger.info(
            f"Order search completed in {duration_ms:.0f}ms - found {total} results, "
            f"returned {len(result.items)} orders (page {result.page}/{result.total_pages})"
        )
        if duration_ms > self.slow_query_ms:
            logger.warning(
                f"Slow order search: {duration_ms:.0f}ms (target <{self.slow_query_ms}ms) "
                f"- criteria: {criteria.summary()}"
            )
        return result

    def get_suggestions(
        self,
        field: str,
        query: str,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> List[str]:
        """Autocomplete values for ``field``; short queries return nothing."""
        if field not in SUGGESTION_FIELDS:
            raise ValidationError(
                f"Unknown suggestion field '{field}'. Use one of: customer, order_number",
                field="field",
            )
        if not query or len(query) < MIN_SUGGESTION_LENGTH:
            return []
        return self.order_repository.get_suggestions(SUGGESTION_FIELDS[field], query, limit)

    def get_stats(self, criteria: OrderSearchCriteria) -> OrderSearchStats:
        stats = self.order_repository.get_search_stats(criteria)
        return OrderSearchStats(
            total_matching=stats['total_matching'],
            urgent_count=stats['urgent_count'],
            status_breakdown=stats['status_breakdown'],
            average_value=stats['average_value'],
        )

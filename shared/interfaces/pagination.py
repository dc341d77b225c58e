"""
Custom pagination classes.
"""
from typing import Callable, List

from rest_framework.pagination import PageNumberPagination


class StandardPagination(PageNumberPagination):
    """Standard pagination with configurable page size."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class RepositoryPage:
    """Lazy sequence over a repository, so paginators slice in storage.

    ``fetch(offset, limit)`` loads one window; ``count()`` totals the rows.
    """

    def __init__(self, fetch: Callable[[int, int], List], count: Callable[[], int]):
        self._fetch = fetch
        self._count = count

    def count(self) -> int:
        return self._count()

    def __len__(self) -> int:
        return self._count()

    def __getitem__(self, item):
        if isinstance(item, slice):
            start = item.start or 0
            stop = item.stop if item.stop is not None else start + StandardPagination.max_page_size
            return self._fetch(start, max(stop - start, 0))
        rows = self._fetch(item, 1)
        if not rows:
            raise IndexError(item)
        return rows[0]

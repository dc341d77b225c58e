from .order_search_service import OrderSearchService

__all__ = ['OrderSearchService']

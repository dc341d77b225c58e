from .django_order_repository import DjangoOrderRepository

__all__ = ['DjangoOrderRepository']

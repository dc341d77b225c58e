# Domain entities
from .order import Order, DEPOSIT_RATIO

__all__ = ['Order', 'DEPOSIT_RATIO']

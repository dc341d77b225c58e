# Django models
from .order_model import OrderModel

__all__ = ['OrderModel']

# Django discovers models here
from .infrastructure.models import OrderModel

__all__ = ['OrderModel']

# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .pagination import RepositoryPage, StandardPagination

__all__ = ['custom_exception_handler', 'RepositoryPage', 'StandardPagination']

"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    InvalidOperationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Codes of domain errors that mean the storage layer failed
SERVER_ERROR_CODES = {'SEARCH_FAILED'}


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    # Handle domain exceptions
    if isinstance(exc, EntityNotFoundError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'entity': exc.entity_name,
                'entity_id': exc.entity_id,
            },
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, ValidationError):
        body = {
            'error': exc.message,
            'code': exc.code,
            'field': exc.field,
        }
        valid_values = getattr(exc, 'valid_values', None)
        if valid_values:
            body['valid_values'] = list(valid_values)
        return Response(body, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, InvalidOperationError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'operation': exc.operation,
                'state': exc.state,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, ConflictError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, DomainException):
        if exc.code in SERVER_ERROR_CODES:
            view = context.get('view')
            logger.error(f"{exc.code} in {type(view).__name__}: {exc.message}")
            return Response(
                {
                    'error': exc.message,
                    'code': exc.code,
                },
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    return response

# exceptions.py
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import exceptions, status
from django.db import IntegrityError
from django.http import Http404
import logging

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for failures raised by the service layer."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Request could not be processed'

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Malformed, out of range or missing input, or a dangling reference."""
    status_code = 422
    default_message = 'Validation Error'


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Resource not found'


class InvalidState(ServiceError):
    """A domain rule forbids the operation in the entity's current state."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Operation not allowed in the current state'


def error_response(message, status_code, errors=None):
    body = {'status': False, 'message': message}
    if errors is not None:
        body['errors'] = errors
    return Response(body, status=status_code)


def custom_exception_handler(exc, context):
    """
    Render every handled failure in the API envelope:
    {"status": false, "message": ..., "errors": {...}}
    """
    if isinstance(exc, ServiceError):
        return error_response(exc.message, exc.status_code, exc.errors)

    if isinstance(exc, exceptions.ValidationError):
        errors = exc.detail if isinstance(exc.detail, dict) else {'non_field_errors': exc.detail}
        return error_response('Validation Error', 422, errors)

    if isinstance(exc, IntegrityError):
        logger.error(f"Integrity Error: {exc}")
        return error_response('This operation violates database constraints', status.HTTP_400_BAD_REQUEST)

    # Call REST framework's default exception handler for everything else
    response = exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, Http404):
            message = 'Resource not found'
        else:
            detail = response.data.get('detail') if isinstance(response.data, dict) else None
            message = str(detail) if detail else 'An error occurred'
        response.data = {'status': False, 'message': message}
        return response

    view = context.get('view')
    logger.error(f"Unexpected Error in {view.__class__.__name__ if view else 'unknown view'}: {exc}")
    return None

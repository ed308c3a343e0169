"""
Custom exceptions and the API exception handler for HeBrews
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class InvalidOrderStatus(APIException):
    status_code = 400
    default_detail = 'Invalid order status.'
    default_code = 'invalid_order_status'


class InvalidStatusTransition(APIException):
    status_code = 400
    default_detail = 'Order status can only move forward.'
    default_code = 'invalid_status_transition'


class InsufficientInventory(APIException):
    status_code = 400
    default_detail = 'Insufficient inventory.'
    default_code = 'insufficient_inventory'


class UsageSessionClosed(APIException):
    status_code = 400
    default_detail = 'Usage session is already closed.'
    default_code = 'usage_session_closed'


class UsageSessionIncomplete(APIException):
    status_code = 400
    default_detail = 'All items must have ending quantities before closing the session.'
    default_code = 'usage_session_incomplete'


class NoEligibleParticipants(APIException):
    status_code = 400
    default_detail = 'No eligible participants found.'
    default_code = 'no_eligible_participants'


class InvalidAdminPassword(APIException):
    status_code = 401
    default_detail = 'Invalid admin password.'
    default_code = 'invalid_admin_password'


def _flatten_detail(detail):
    """Pick a single human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _flatten_detail(value)
            if field in ('non_field_errors', 'detail'):
                return message
            return f"{field}: {message}"
        return 'Invalid request.'
    if isinstance(detail, (list, tuple)):
        return _flatten_detail(detail[0]) if detail else 'Invalid request.'
    return str(detail)


def api_exception_handler(exc, context):
    """
    Wrap DRF's handler so every error leaves as
    {"success": false, "error": "...", "details": ...}.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'unknown view'
        )
        return Response(
            {'success': False, 'error': 'An unexpected error occurred.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    payload = {'success': False, 'error': _flatten_detail(response.data)}
    if isinstance(exc, ValidationError):
        payload['details'] = response.data
    response.data = payload
    return response

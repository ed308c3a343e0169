"""
Utility functions for HeBrews
"""
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP

from django.utils import timezone
from rest_framework.exceptions import ValidationError

CENTS = Decimal('0.01')


def get_date_range(days=7):
    """Get date range for last N days"""
    end_date = timezone.localdate()
    start_date = end_date - timedelta(days=days)
    return start_date, end_date


def parse_date_param(value, field_name, default=None):
    """Parse a YYYY-MM-DD query/body value, raising a 400 on bad input."""
    if value in (None, ''):
        return default
    try:
        return datetime.strptime(str(value), '%Y-%m-%d').date()
    except ValueError:
        raise ValidationError({field_name: f"Invalid date '{value}'. Use YYYY-MM-DD."})


def local_day_bounds(day):
    """Aware [start, end) datetimes covering a calendar day in the local timezone."""
    start = timezone.make_aware(datetime.combine(day, datetime.min.time()))
    end = timezone.make_aware(datetime.combine(day + timedelta(days=1), datetime.min.time()))
    return start, end


def quantize_money(amount):
    """Round a Decimal (or number) to cents."""
    return Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount):
    """Format amount as dollars"""
    return f"${Decimal(str(amount)):.2f}"


def str_to_bool(value):
    """Convert query-string style values to booleans"""
    if isinstance(value, bool):
        return value
    return str(value).lower() in ('true', '1', 'yes', 'on')


def format_quantity(value):
    """Render a Decimal quantity without trailing zeros (10.00 -> 10, 2.50 -> 2.5)."""
    value = Decimal(str(value))
    if value == value.to_integral_value():
        return str(value.quantize(Decimal(1)))
    return str(value.normalize())

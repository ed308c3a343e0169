"""
Sales analytics: order overview and time-bucketed order counts

Both builders take plain iterables of orders so they can be exercised without
the HTTP layer; the views only pick the querysets and parse parameters.
"""
import math
from collections import Counter, OrderedDict
from datetime import timedelta
from decimal import Decimal

from django.utils import timezone
from rest_framework.exceptions import ValidationError

GROUP_BY_CHOICES = ('hour', 'day', 'week')
MAX_RANGE_DAYS = 366
TOP_CUSTOMER_LIMIT = 5


def _count_by(orders, attribute):
    counts = OrderedDict()
    for order in orders:
        value = getattr(order, attribute)
        if value:
            counts[value] = counts.get(value, 0) + 1
    return counts


def most_popular(counts):
    """[name, count] with the highest count; the first one seen wins a tie."""
    if not counts:
        return ['None', 0]
    name, count = max(counts.items(), key=lambda item: item[1])
    return [name, count]


def wait_minutes(order):
    """Whole minutes from creation to completion, never negative."""
    delta = order.wait_reference_time - order.created_at
    return max(0, math.floor(delta.total_seconds() / 60))


def build_overview(orders, thresholds=None):
    """
    Summarize completed orders.

    Args:
        orders: Completed orders, newest first
        thresholds: Wait-time thresholds to echo back to the dashboard

    Returns:
        dict of totals, per-category counts, most popular items and top customers
    """
    orders = list(orders)
    total_orders = len(orders)
    total_revenue = sum((order.price for order in orders), Decimal('0'))

    revenue_by_drink = OrderedDict()
    for order in orders:
        revenue_by_drink[order.drink] = revenue_by_drink.get(order.drink, Decimal('0')) + order.price

    drink_counts = _count_by(orders, 'drink')
    milk_counts = _count_by(orders, 'milk')
    syrup_counts = _count_by(orders, 'syrup')
    temperature_counts = _count_by(orders, 'temperature')
    customer_counts = _count_by(orders, 'customer_name')

    # sorted() is stable, so equal counts keep first-seen order
    top_customers = sorted(customer_counts.items(), key=lambda item: -item[1])[:TOP_CUSTOMER_LIMIT]

    return {
        'total_orders': total_orders,
        'total_revenue': float(total_revenue),
        'average_order_value': round(float(total_revenue) / total_orders, 2) if total_orders else 0,
        'average_wait_time': (
            round(sum(wait_minutes(order) for order in orders) / total_orders, 2) if total_orders else 0
        ),
        'total_extra_shots': sum(order.extra_shots or 0 for order in orders),
        'drink_counts': drink_counts,
        'milk_counts': milk_counts,
        'syrup_counts': syrup_counts,
        'temperature_counts': temperature_counts,
        'customer_counts': customer_counts,
        'revenue_by_drink': {drink: float(revenue) for drink, revenue in revenue_by_drink.items()},
        'most_popular': {
            'drink': most_popular(drink_counts),
            'milk': most_popular(milk_counts),
            'syrup': most_popular(syrup_counts),
            'temperature': most_popular(temperature_counts),
        },
        'top_customers': [{'name': name, 'count': count} for name, count in top_customers],
        'wait_time_thresholds': thresholds,
    }


# ---------------------------
# Time series
# ---------------------------
def validate_time_series_params(start_date, end_date, group_by):
    if group_by not in GROUP_BY_CHOICES:
        raise ValidationError({'group_by': f"Must be one of: {', '.join(GROUP_BY_CHOICES)}."})
    if start_date > end_date:
        raise ValidationError({'start_date': 'Start date must be on or before end date.'})
    if (end_date - start_date).days + 1 > MAX_RANGE_DAYS:
        raise ValidationError({'end_date': f"Date range cannot exceed {MAX_RANGE_DAYS} days."})


def week_start(day):
    """Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _hour_12(hour):
    return 12 if hour % 12 == 0 else hour % 12, 'PM' if hour >= 12 else 'AM'


def format_hour_label(hour):
    display, period = _hour_12(hour)
    return f"{display}:00 {period}"


def bucket_key(moment, group_by):
    if group_by == 'hour':
        return f"{moment:%Y-%m-%d} {moment.hour:02d}:00"
    if group_by == 'week':
        return week_start(moment.date()).isoformat()
    return moment.date().isoformat()


def bucket_label(day, group_by, hour=None):
    if group_by == 'hour':
        display, period = _hour_12(hour)
        return f"{day:%b} {day.day}, {display} {period}"
    if group_by == 'week':
        return f"Week of {day:%b} {day.day}"
    return f"{day:%a}, {day:%b} {day.day}"


def iter_buckets(start_date, end_date, group_by):
    """Yield (key, label) for every bucket in the inclusive date range, in order."""
    if group_by == 'week':
        day = week_start(start_date)
        while day <= end_date:
            yield day.isoformat(), bucket_label(day, group_by)
            day += timedelta(days=7)
        return

    day = start_date
    while day <= end_date:
        if group_by == 'hour':
            for hour in range(24):
                yield f"{day:%Y-%m-%d} {hour:02d}:00", bucket_label(day, group_by, hour)
        else:
            yield day.isoformat(), bucket_label(day, group_by)
        day += timedelta(days=1)


def build_time_series(orders, start_date, end_date, group_by='day'):
    """
    Bucket order creation times into zero-filled hour, day or week slots.

    Args:
        orders: Orders created within the local-time date range
        start_date: First day of the range (inclusive)
        end_date: Last day of the range (inclusive)
        group_by: 'hour', 'day' or 'week'

    Returns:
        dict with time_series, busy_hours, total_orders, date_range and group_by
    """
    validate_time_series_params(start_date, end_date, group_by)

    local_times = [timezone.localtime(order.created_at) for order in orders]
    counts = Counter(bucket_key(moment, group_by) for moment in local_times)

    time_series = [
        {'time': key, 'count': counts.get(key, 0), 'label': label}
        for key, label in iter_buckets(start_date, end_date, group_by)
    ]

    busy_hours = []
    if group_by == 'hour':
        hourly = Counter(moment.hour for moment in local_times)
        busy_hours = [
            {'hour': hour, 'count': count, 'label': format_hour_label(hour)}
            for hour, count in sorted(hourly.items(), key=lambda item: (-item[1], item[0]))
        ]

    return {
        'time_series': time_series,
        'busy_hours': busy_hours,
        'total_orders': len(local_times),
        'date_range': {'start_date': start_date.isoformat(), 'end_date': end_date.isoformat()},
        'group_by': group_by,
    }

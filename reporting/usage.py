"""
Inventory usage analytics built from simple inventory quantity logs
"""
import math
from collections import OrderedDict
from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

USAGE_WINDOW_DAYS = 30
RECENT_PATTERN_DAYS = 7


def _as_float(value):
    return float(value) if value is not None else None


def _item_pattern(item, logs, now):
    """logs must be oldest first."""
    usage_by_date = OrderedDict()
    stock_by_date = {}
    for log in logs:
        day = timezone.localtime(log.created_at).date().isoformat()
        usage_by_date.setdefault(day, Decimal('0'))
        if log.change_amount < 0:
            usage_by_date[day] += -log.change_amount
        stock_by_date[day] = log.new_quantity

    since = now - timedelta(days=USAGE_WINDOW_DAYS)
    recent_usage = sum(
        (-log.change_amount for log in logs if log.created_at >= since and log.change_amount < 0),
        Decimal('0'),
    )
    average_daily_usage = float(recent_usage) / USAGE_WINDOW_DAYS
    days_until_empty = (
        math.floor(float(item.current_stock) / average_daily_usage) if average_daily_usage > 0 else -1
    )

    recent_dates = sorted(usage_by_date)[-RECENT_PATTERN_DAYS:]
    return {
        'item_id': str(item.id),
        'item_name': item.item_name,
        'category': item.category,
        'unit': item.unit,
        'current_stock': float(item.current_stock),
        'initial_quantity': float(item.initial_quantity),
        'reorder_level': _as_float(item.reorder_level),
        'usage_by_date': {day: float(amount) for day, amount in usage_by_date.items()},
        'recent_usage_pattern': [
            {'date': day, 'usage': float(usage_by_date[day]), 'stock': float(stock_by_date[day])}
            for day in recent_dates
        ],
        'average_daily_usage': round(average_daily_usage, 4),
        'total_changes': len(logs),
        'first_stocked': logs[0].created_at if logs else item.created_at,
        'last_changed': logs[-1].created_at if logs else item.created_at,
        'is_low_stock': item.is_low_stock,
        'days_until_empty': days_until_empty,
    }


def build_usage_report(items, now=None):
    """
    Usage patterns per simple inventory item plus overall and per-category totals.

    Args:
        items: SimpleInventory rows with quantity_logs prefetched
        now: Reference time for the 30 day average

    Returns:
        dict with overview, category_breakdown, usage_patterns, low_stock_items and daily_totals
    """
    now = now or timezone.now()
    items = list(items)

    patterns = []
    daily_totals = {}
    total_logs = 0
    for item in items:
        logs = sorted(item.quantity_logs.all(), key=lambda log: log.created_at)
        total_logs += len(logs)
        patterns.append(_item_pattern(item, logs, now))
        for log in logs:
            day = timezone.localtime(log.created_at).date().isoformat()
            totals = daily_totals.setdefault(day, {'date': day, 'total_usage': 0.0, 'net_change': 0.0})
            if log.change_amount < 0:
                totals['total_usage'] += float(-log.change_amount)
            totals['net_change'] += float(log.change_amount)

    total_current = sum(float(item.current_stock) for item in items)
    total_initial = sum(float(item.initial_quantity) for item in items)
    total_used = total_initial - total_current

    categories = OrderedDict()
    for pattern in patterns:
        breakdown = categories.setdefault(pattern['category'], {
            'count': 0, 'total_stock': 0.0, 'total_initial': 0.0, 'average_usage': 0.0,
        })
        breakdown['count'] += 1
        breakdown['total_stock'] += pattern['current_stock']
        breakdown['total_initial'] += pattern['initial_quantity']
        breakdown['average_usage'] += pattern['average_daily_usage']
    for breakdown in categories.values():
        breakdown['average_usage'] = round(breakdown['average_usage'] / breakdown['count'], 4)

    low_stock = [pattern for pattern in patterns if pattern['is_low_stock']]

    return {
        'overview': {
            'total_items': len(items),
            'total_current_stock': total_current,
            'total_initial_stock': total_initial,
            'total_used': total_used,
            'low_stock_count': len(low_stock),
            'total_logs': total_logs,
            'turnover_rate': round(total_used / total_initial * 100, 2) if total_initial > 0 else 0,
        },
        'category_breakdown': categories,
        'usage_patterns': patterns,
        'low_stock_items': [
            {
                'id': pattern['item_id'],
                'item_name': pattern['item_name'],
                'category': pattern['category'],
                'current_stock': pattern['current_stock'],
                'reorder_level': pattern['reorder_level'],
                'days_until_empty': pattern['days_until_empty'],
            }
            for pattern in low_stock
        ],
        'daily_totals': [daily_totals[day] for day in sorted(daily_totals)],
    }

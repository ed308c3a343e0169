"""
Profit estimation from the inventory cost catalog

Costs are heuristics per drink: one espresso shot plus extras, 0.75 units of
milk, 0.5 units of syrup when present and one of every supply item. Any
ingredient without a matching cost entry contributes nothing.
"""
import logging
from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from core.utils import quantize_money

logger = logging.getLogger(__name__)

MILK_PORTION = Decimal('0.75')
SYRUP_PORTION = Decimal('0.5')
ZERO = Decimal('0')


def _match_by_name(costs, needle):
    if not needle:
        return None
    needle = needle.lower()
    for cost in costs:
        if needle in cost.item_name.lower():
            return cost
    return None


class CostEstimator:
    """Per-order ingredient cost from a snapshot of InventoryCost rows."""

    def __init__(self, costs):
        by_category = {}
        for cost in sorted(costs, key=lambda c: c.item_name.lower()):
            by_category.setdefault(cost.category, []).append(cost)

        beans = by_category.get('COFFEE_BEANS', [])
        espresso = _match_by_name(beans, 'espresso') or (beans[0] if beans else None)
        if espresso is None:
            logger.info("No coffee bean cost configured; espresso shots are costed at 0")
        self.shot_cost = espresso.unit_cost if espresso else ZERO
        self.milk_costs = by_category.get('MILK', [])
        self.syrup_costs = by_category.get('SYRUP', [])
        self.supplies_cost = sum((cost.unit_cost for cost in by_category.get('SUPPLIES', [])), ZERO)

    def estimate(self, order):
        shots = (1 + (order.extra_shots or 0)) * self.shot_cost

        milk = _match_by_name(self.milk_costs, order.milk)
        milk_cost = MILK_PORTION * milk.unit_cost if milk else ZERO

        syrup_cost = ZERO
        if order.syrup:
            syrup = _match_by_name(self.syrup_costs, order.syrup)
            syrup_cost = SYRUP_PORTION * syrup.unit_cost if syrup else ZERO

        return shots + milk_cost + syrup_cost + self.supplies_cost


def margin(profit, revenue):
    if not revenue:
        return 0
    return round(float(profit / revenue * 100), 2)


def _summary(order_count, revenue, cost):
    profit = revenue - cost
    return {
        'orders': order_count,
        'revenue': float(quantize_money(revenue)),
        'estimated_cost': float(quantize_money(cost)),
        'profit': float(quantize_money(profit)),
        'margin': margin(profit, revenue),
    }


def build_profit_report(orders, costs, inventory_items=(), now=None):
    """
    Estimate profit for completed orders.

    Args:
        orders: Completed orders
        costs: InventoryCost rows used to price ingredients
        inventory_items: InventoryItem rows used for the stock value
        now: Reference time for the 30 and 7 day windows

    Returns:
        dict with all_time, last_30_days and last_7_days summaries, a per-drink
        breakdown and the current inventory value. The shorter windows use the
        all-time average cost per order rather than their own order mix.
    """
    now = now or timezone.now()
    orders = list(orders)
    estimator = CostEstimator(list(costs))

    total_revenue = ZERO
    total_cost = ZERO
    by_drink = {}
    for order in orders:
        cost = estimator.estimate(order)
        total_revenue += order.price
        total_cost += cost
        drink = by_drink.setdefault(order.drink, {'orders': 0, 'revenue': ZERO, 'cost': ZERO})
        drink['orders'] += 1
        drink['revenue'] += order.price
        drink['cost'] += cost

    average_cost = total_cost / len(orders) if orders else ZERO

    def window(days):
        since = now - timedelta(days=days)
        recent = [order for order in orders if order.created_at >= since]
        revenue = sum((order.price for order in recent), ZERO)
        return _summary(len(recent), revenue, average_cost * len(recent))

    inventory_value = sum(
        (item.current_stock * item.cost_item.unit_cost for item in inventory_items), ZERO
    )

    return {
        'all_time': _summary(len(orders), total_revenue, total_cost),
        'last_30_days': window(30),
        'last_7_days': window(7),
        'average_cost_per_order': float(quantize_money(average_cost)),
        'by_drink': {
            name: _summary(values['orders'], values['revenue'], values['cost'])
            for name, values in sorted(by_drink.items(), key=lambda item: -item[1]['revenue'])
        },
        'inventory_value': float(quantize_money(inventory_value)),
    }

"""
Order pricing: base drink price plus add-ons, computed once at order creation.
"""
import logging
from decimal import Decimal

from core.services import SettingsService
from core.utils import quantize_money
from menu.models import MenuConfig

logger = logging.getLogger(__name__)


def get_base_price(drink):
    item = MenuConfig.objects.filter(item_type='DRINK', item_name=drink).first()
    if item is None:
        logger.warning("Drink %r is not on the menu; pricing it at 0.00", drink)
        return Decimal('0.00')
    return item.price if item.price is not None else Decimal('0.00')


def calculate_order_price(drink, extra_shots=0, foam=None, pricing=None):
    """
    Price a drink order.

    Args:
        drink: Drink name, matched exactly against DRINK menu options
        extra_shots: Number of extra espresso shots
        foam: Foam option name, if any
        pricing: ExtraPricing to use; the stored settings when omitted

    Returns:
        Decimal price rounded to cents
    """
    pricing = pricing or SettingsService.get_extra_pricing()

    price = get_base_price(drink)
    price += pricing.extra_shot_price * int(extra_shots or 0)
    if pricing.is_premium_foam(foam):
        price += pricing.cold_foam_price
    return quantize_money(price)

"""
Typed access to the Setting key/value store
"""
import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from .models import Setting
from .utils import quantize_money

logger = logging.getLogger(__name__)

EXTRA_SHOT_PRICE_KEY = 'extra_shot_price'
COLD_FOAM_PRICE_KEY = 'cold_foam_price'
PREMIUM_FOAM_OPTIONS_KEY = 'premium_foam_options'
WAIT_TIME_YELLOW_KEY = 'wait_time_yellow_threshold'
WAIT_TIME_RED_KEY = 'wait_time_red_threshold'
DEFAULT_LABEL_CONFIG_KEY = 'default_label_config_id'

DEFAULT_EXTRA_SHOT_PRICE = Decimal('1.00')
DEFAULT_COLD_FOAM_PRICE = Decimal('1.00')
DEFAULT_PREMIUM_FOAM_OPTIONS = ['Regular Foam', 'Extra Foam', 'Light Foam', 'Cold Foam']
DEFAULT_WAIT_TIME_YELLOW = 5
DEFAULT_WAIT_TIME_RED = 10


@dataclass
class ExtraPricing:
    extra_shot_price: Decimal = DEFAULT_EXTRA_SHOT_PRICE
    cold_foam_price: Decimal = DEFAULT_COLD_FOAM_PRICE
    premium_foam_options: list = field(default_factory=lambda: list(DEFAULT_PREMIUM_FOAM_OPTIONS))

    def is_premium_foam(self, foam):
        """A foam carries the surcharge when its name is in the configured set (case-insensitive)."""
        if not foam:
            return False
        premium = {name.strip().casefold() for name in self.premium_foam_options}
        return foam.strip().casefold() in premium

    def as_dict(self):
        return {
            'extra_shot_price': float(self.extra_shot_price),
            'cold_foam_price': float(self.cold_foam_price),
            'premium_foam_options': list(self.premium_foam_options),
        }


class SettingsService:
    """Read and write Setting rows with defaults for missing or corrupt values."""

    @staticmethod
    def get(key, default=None):
        setting = Setting.objects.filter(key=key).first()
        return setting.value if setting else default

    @staticmethod
    def set(key, value):
        setting, _ = Setting.objects.update_or_create(key=key, defaults={'value': str(value)})
        return setting

    @staticmethod
    def delete(key):
        deleted, _ = Setting.objects.filter(key=key).delete()
        return deleted

    @staticmethod
    def get_decimal(key, default):
        raw = SettingsService.get(key)
        if raw is None:
            return default
        try:
            return quantize_money(Decimal(raw))
        except (InvalidOperation, ValueError):
            logger.warning("Setting %s has non-numeric value %r; using default", key, raw)
            return default

    @staticmethod
    def get_int(key, default):
        raw = SettingsService.get(key)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            logger.warning("Setting %s has non-integer value %r; using default", key, raw)
            return default

    @staticmethod
    def get_extra_pricing():
        """
        Current add-on pricing used when an order is created.

        Returns:
            ExtraPricing with the extra shot price, cold foam price and the
            set of foam names that carry the foam surcharge.
        """
        premium_foams = list(DEFAULT_PREMIUM_FOAM_OPTIONS)
        raw_foams = SettingsService.get(PREMIUM_FOAM_OPTIONS_KEY)
        if raw_foams is not None:
            try:
                parsed = json.loads(raw_foams)
                if isinstance(parsed, list):
                    premium_foams = [str(name) for name in parsed]
            except ValueError:
                logger.warning("Setting %s is not valid JSON; using default", PREMIUM_FOAM_OPTIONS_KEY)

        return ExtraPricing(
            extra_shot_price=SettingsService.get_decimal(EXTRA_SHOT_PRICE_KEY, DEFAULT_EXTRA_SHOT_PRICE),
            cold_foam_price=SettingsService.get_decimal(COLD_FOAM_PRICE_KEY, DEFAULT_COLD_FOAM_PRICE),
            premium_foam_options=premium_foams,
        )

    @staticmethod
    def set_extra_pricing(extra_shot_price, cold_foam_price, premium_foam_options=None):
        SettingsService.set(EXTRA_SHOT_PRICE_KEY, f"{quantize_money(extra_shot_price):.2f}")
        SettingsService.set(COLD_FOAM_PRICE_KEY, f"{quantize_money(cold_foam_price):.2f}")
        if premium_foam_options is not None:
            SettingsService.set(PREMIUM_FOAM_OPTIONS_KEY, json.dumps(premium_foam_options))
        return SettingsService.get_extra_pricing()

    @staticmethod
    def get_wait_time_thresholds():
        return {
            'yellow': SettingsService.get_int(WAIT_TIME_YELLOW_KEY, DEFAULT_WAIT_TIME_YELLOW),
            'red': SettingsService.get_int(WAIT_TIME_RED_KEY, DEFAULT_WAIT_TIME_RED),
        }

    @staticmethod
    def set_wait_time_thresholds(yellow, red):
        SettingsService.set(WAIT_TIME_YELLOW_KEY, int(yellow))
        SettingsService.set(WAIT_TIME_RED_KEY, int(red))
        return SettingsService.get_wait_time_thresholds()

"""
Inventory Service Layer - stock mutations, quantity logs and daily usage sessions

Every change to current_stock goes through InventoryService.apply_stock_change so
the stock row and its QuantityLog are written in the same transaction.
"""
import logging
from decimal import Decimal

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from core.exceptions import InsufficientInventory, UsageSessionClosed, UsageSessionIncomplete
from core.utils import format_quantity
from .models import (
    InventoryItem,
    InventoryUsageEntry,
    InventoryUsageSession,
    QuantityLog,
    SimpleInventory,
)

logger = logging.getLogger(__name__)


def _log_owner(item):
    if isinstance(item, SimpleInventory):
        return {'simple_inventory': item}
    if isinstance(item, InventoryItem):
        return {'inventory_item': item}
    raise TypeError(f"Unsupported stock item type: {type(item).__name__}")


class InventoryService:
    """Service for stock level changes"""

    @staticmethod
    def log_initial_stock(item):
        """Record the opening stock of a newly created item, if any."""
        if item.current_stock <= 0:
            return None
        return QuantityLog.objects.create(
            previous_quantity=Decimal('0'),
            new_quantity=item.current_stock,
            change_amount=item.current_stock,
            change_type='initial_stock',
            notes='Initial stock',
            **_log_owner(item),
        )

    @staticmethod
    def apply_stock_change(item, new_quantity, change_type, notes=None):
        """
        Set an item's current stock and write the matching QuantityLog.

        Args:
            item: SimpleInventory or InventoryItem instance
            new_quantity: Target stock level (must be >= 0)
            change_type: One of QuantityLog.CHANGE_TYPE_CHOICES
            notes: Free text stored on the log row

        Returns:
            The QuantityLog created, or None when the stock did not change
        """
        new_quantity = Decimal(str(new_quantity))
        if new_quantity < 0:
            raise InsufficientInventory(f"Stock for {item.item_name} cannot go below zero.")

        with transaction.atomic():
            locked = type(item).objects.select_for_update().get(pk=item.pk)
            previous = locked.current_stock
            if previous == new_quantity:
                item.current_stock = previous
                return None

            locked.current_stock = new_quantity
            update_fields = ['current_stock', 'updated_at']
            if isinstance(locked, InventoryItem) and new_quantity > previous:
                locked.last_restocked = timezone.now()
                update_fields.append('last_restocked')
            locked.save(update_fields=update_fields)

            log = QuantityLog.objects.create(
                previous_quantity=previous,
                new_quantity=new_quantity,
                change_amount=new_quantity - previous,
                change_type=change_type,
                notes=notes,
                **_log_owner(locked),
            )

        for field in update_fields:
            setattr(item, field, getattr(locked, field))
        logger.info(
            "Stock for %s changed %s -> %s (%s)",
            item.item_name, format_quantity(previous), format_quantity(new_quantity), change_type,
        )
        return log

    @staticmethod
    def adjust_stock(item, new_quantity):
        """Manual edit from the inventory screen."""
        previous = item.current_stock
        change_type = 'adjustment'
        if isinstance(item, InventoryItem) and Decimal(str(new_quantity)) > previous:
            change_type = 'restock'
        return InventoryService.apply_stock_change(
            item,
            new_quantity,
            change_type,
            notes=f"Stock updated from {format_quantity(previous)} to {format_quantity(new_quantity)}",
        )

    @staticmethod
    def record_usage(item, quantity, notes=None):
        """
        Consume ``quantity`` units of an item.

        Raises:
            ValidationError: quantity is not positive
            InsufficientInventory: not enough stock on hand
        """
        quantity = Decimal(str(quantity))
        if quantity <= 0:
            raise ValidationError({'quantity': 'Usage quantity must be greater than zero.'})

        with transaction.atomic():
            current = type(item).objects.select_for_update().get(pk=item.pk).current_stock
            if quantity > current:
                raise InsufficientInventory(
                    f"Only {format_quantity(current)} {item.unit} of {item.item_name} in stock."
                )
            return InventoryService.apply_stock_change(
                item,
                current - quantity,
                'usage',
                notes=notes or f"Used {format_quantity(quantity)} {item.unit}",
            )


class UsageSessionService:
    """Service for daily stock count sessions"""

    @staticmethod
    def get_session(date):
        return (
            InventoryUsageSession.objects
            .filter(date=date)
            .prefetch_related('entries__item')
            .first()
        )

    @staticmethod
    def save_session(date, entries, notes=None):
        """
        Create or update the session for ``date`` and upsert each entry by item.

        Args:
            date: Calendar date of the count
            entries: dicts with item, starting_quantity, ending_quantity (optional), notes (optional)
            notes: Session notes; left untouched when None

        Returns:
            InventoryUsageSession
        """
        with transaction.atomic():
            session, created = InventoryUsageSession.objects.select_for_update().get_or_create(
                date=date, defaults={'notes': notes}
            )
            if not session.is_active:
                raise UsageSessionClosed()
            if not created and notes is not None:
                session.notes = notes
                session.save(update_fields=['notes', 'updated_at'])

            for entry in entries:
                starting = entry['starting_quantity']
                ending = entry.get('ending_quantity')
                InventoryUsageEntry.objects.update_or_create(
                    session=session,
                    item=entry['item'],
                    defaults={
                        'starting_quantity': starting,
                        'ending_quantity': ending,
                        'used_quantity': starting - ending if ending is not None else None,
                        'notes': entry.get('notes') or None,
                    },
                )

        logger.info("Usage session %s saved with %d entries", date, len(entries))
        return UsageSessionService.get_session(date)

    @staticmethod
    def close_session(date):
        """
        Close the session for ``date``, applying each ending count to stock.

        Raises:
            NotFound: no session for that date
            UsageSessionClosed: already closed
            UsageSessionIncomplete: an entry has no ending quantity
        """
        with transaction.atomic():
            session = InventoryUsageSession.objects.select_for_update().filter(date=date).first()
            if session is None:
                raise NotFound('No usage session found for this date.')
            if not session.is_active:
                raise UsageSessionClosed()

            entries = list(session.entries.select_related('item'))
            missing = [entry.item.item_name for entry in entries if entry.ending_quantity is None]
            if missing:
                raise UsageSessionIncomplete(
                    f"All items must have ending quantities before closing the session. "
                    f"Missing: {', '.join(missing)}."
                )

            for entry in entries:
                InventoryService.apply_stock_change(
                    entry.item,
                    entry.ending_quantity,
                    'daily_usage',
                    notes=f"Daily usage {date.isoformat()}: used {format_quantity(entry.used_quantity or 0)}",
                )

            session.is_active = False
            session.closed_at = timezone.now()
            session.save(update_fields=['is_active', 'closed_at', 'updated_at'])

        logger.info("Usage session %s closed", date)
        return UsageSessionService.get_session(date)

"""
POS Service Layer - order numbering, creation and status changes
"""
import logging

from django.db import transaction
from django.db.models import Max, Count
from django.utils import timezone

from core.exceptions import InvalidOrderStatus, InvalidStatusTransition
from .models import Order, OrderNumberSequence
from .pricing import calculate_order_price

logger = logging.getLogger(__name__)

STATUS_RANK = {
    Order.STATUS_PENDING: 0,
    Order.STATUS_IN_PROGRESS: 1,
    Order.STATUS_COMPLETED: 2,
}


class OrderService:
    """Service for handling order operations"""

    @staticmethod
    def next_order_number():
        """
        Reserve the next order number. Must run inside a transaction; the
        sequence row stays locked until it commits.
        """
        OrderNumberSequence.objects.get_or_create(name='order_number')
        sequence = OrderNumberSequence.objects.select_for_update().get(name='order_number')

        highest = Order.objects.aggregate(highest=Max('order_number'))['highest'] or 0
        sequence.last_value = max(sequence.last_value, highest) + 1
        sequence.save(update_fields=['last_value', 'updated_at'])
        return sequence.last_value

    @staticmethod
    def reset_order_numbers():
        """Restart numbering at 1. Used by the admin reset after orders are wiped."""
        updated = OrderNumberSequence.objects.filter(name='order_number').update(last_value=0)
        if not updated:
            OrderNumberSequence.objects.create(name='order_number', last_value=0)
        logger.info("Order number sequence reset")

    @staticmethod
    def create_order(customer_name, drink, milk, temperature, syrup=None, foam=None,
                     extra_shots=0, notes=None):
        """
        Create a PENDING order with its price fixed from the current menu and pricing settings.

        Returns:
            Order instance
        """
        with transaction.atomic():
            price = calculate_order_price(drink, extra_shots=extra_shots, foam=foam)
            order = Order.objects.create(
                order_number=OrderService.next_order_number(),
                customer_name=customer_name,
                drink=drink,
                milk=milk,
                syrup=syrup,
                foam=foam,
                temperature=temperature,
                extra_shots=extra_shots,
                notes=notes,
                price=price,
                status=Order.STATUS_PENDING,
            )
        logger.info("Order #%s created for %s: %s ($%s)", order.order_number, customer_name, drink, price)
        return order

    @staticmethod
    def change_status(order, new_status):
        """
        Move an order forward through PENDING -> IN_PROGRESS -> COMPLETED.

        Args:
            order: Order instance
            new_status: Target status string

        Returns:
            The updated Order

        Raises:
            InvalidOrderStatus: target is not a known status
            InvalidStatusTransition: target is behind the current status
        """
        if new_status not in STATUS_RANK:
            raise InvalidOrderStatus(
                f"Invalid status '{new_status}'. Must be one of: {', '.join(STATUS_RANK)}."
            )
        if new_status == order.status:
            return order
        if STATUS_RANK[new_status] < STATUS_RANK[order.status]:
            raise InvalidStatusTransition(
                f"Cannot move order #{order.order_number} from {order.status} back to {new_status}."
            )

        now = timezone.now()
        order.status = new_status
        update_fields = ['status', 'updated_at']
        if order.started_at is None and new_status in (Order.STATUS_IN_PROGRESS, Order.STATUS_COMPLETED):
            order.started_at = now
            update_fields.append('started_at')
        if new_status == Order.STATUS_COMPLETED:
            order.completed_at = now
            update_fields.append('completed_at')
        order.save(update_fields=update_fields)

        logger.info("Order #%s moved to %s", order.order_number, new_status)
        return order

    @staticmethod
    def status_counts():
        counts = {row['status']: row['total'] for row in Order.objects.values('status').annotate(total=Count('id'))}
        pending = counts.get(Order.STATUS_PENDING, 0)
        in_progress = counts.get(Order.STATUS_IN_PROGRESS, 0)
        completed = counts.get(Order.STATUS_COMPLETED, 0)
        return {
            'pending': pending,
            'in_progress': in_progress,
            'completed': completed,
            'total': pending + in_progress + completed,
        }

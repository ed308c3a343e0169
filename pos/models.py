from django.db import models
import uuid


class Order(models.Model):
    """A drink order taken at the stand"""
    STATUS_PENDING = 'PENDING'
    STATUS_IN_PROGRESS = 'IN_PROGRESS'
    STATUS_COMPLETED = 'COMPLETED'
    STATUS_CHOICES = (
        (STATUS_PENDING, 'Pending'),
        (STATUS_IN_PROGRESS, 'In Progress'),
        (STATUS_COMPLETED, 'Completed'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.PositiveIntegerField(unique=True)

    customer_name = models.CharField(max_length=255)
    drink = models.CharField(max_length=100)
    milk = models.CharField(max_length=100)
    syrup = models.CharField(max_length=100, blank=True, null=True)
    foam = models.CharField(max_length=100, blank=True, null=True)
    temperature = models.CharField(max_length=50)
    extra_shots = models.PositiveSmallIntegerField(default=0)
    notes = models.TextField(blank=True, null=True)

    # Fixed at creation; later menu or pricing changes never touch it
    price = models.DecimalField(max_digits=8, decimal_places=2)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    started_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'orders'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['status', 'created_at'], name='orders_status_created_idx'),
            models.Index(fields=['customer_name'], name='orders_customer_idx'),
        ]

    def __str__(self):
        return f"#{self.order_number} {self.customer_name} - {self.drink} ({self.status})"

    @property
    def wait_reference_time(self):
        """When the order stopped waiting: completion time, or last update for legacy rows."""
        return self.completed_at or self.updated_at


class OrderNumberSequence(models.Model):
    """Single-row counter backing the human-facing order number."""
    name = models.CharField(max_length=50, unique=True, default='order_number')
    last_value = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'order_number_sequence'

    def __str__(self):
        return f"{self.name}={self.last_value}"

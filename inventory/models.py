from django.db import models
import uuid

CATEGORY_CHOICES = (
    ('COFFEE_BEANS', 'Coffee Beans'),
    ('MILK', 'Milk'),
    ('SYRUP', 'Syrup'),
    ('SUPPLIES', 'Supplies'),
    ('EQUIPMENT', 'Equipment'),
    ('OTHER', 'Other'),
)


class InventoryCost(models.Model):
    """Unit cost catalog used for profit estimation; not tied to stock levels."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    item_name = models.CharField(max_length=255)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    unit_cost = models.DecimalField(max_digits=10, decimal_places=4)
    unit = models.CharField(max_length=50)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'inventory_costs'
        ordering = ['category', 'item_name']

    def __str__(self):
        return f"{self.item_name} (${self.unit_cost}/{self.unit})"


class StockedItemMixin:
    """Shared stock helpers for SimpleInventory and InventoryItem."""

    @property
    def is_low_stock(self):
        return self.reorder_level is not None and self.current_stock <= self.reorder_level


class InventoryItem(StockedItemMixin, models.Model):
    """Stock tracked against a cost catalog entry."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cost_item = models.OneToOneField(InventoryCost, on_delete=models.CASCADE, related_name='inventory_item')
    initial_quantity = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    current_stock = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    reorder_level = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    last_restocked = models.DateTimeField(null=True, blank=True)
    total_cost = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'inventory_items'
        ordering = ['cost_item__category', 'cost_item__item_name']

    def __str__(self):
        return f"{self.cost_item.item_name} ({self.current_stock} {self.cost_item.unit})"

    @property
    def item_name(self):
        return self.cost_item.item_name

    @property
    def unit(self):
        return self.cost_item.unit

    @property
    def category(self):
        return self.cost_item.category


class SimpleInventory(StockedItemMixin, models.Model):
    """Free-standing stock item (beans, milk cartons, cups...)."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    item_name = models.CharField(max_length=255)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    initial_quantity = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    current_stock = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    unit = models.CharField(max_length=50)
    reorder_level = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'simple_inventory'
        ordering = ['category', 'item_name']
        unique_together = ['item_name', 'category']

    def __str__(self):
        return f"{self.item_name} ({self.current_stock} {self.unit})"


class QuantityLog(models.Model):
    """Append-only audit row written for every stock mutation."""
    CHANGE_TYPE_CHOICES = (
        ('initial_stock', 'Initial Stock'),
        ('adjustment', 'Adjustment'),
        ('usage', 'Usage'),
        ('daily_usage', 'Daily Usage'),
        ('restock', 'Restock'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # Exactly one of these is set
    simple_inventory = models.ForeignKey(
        SimpleInventory, on_delete=models.CASCADE, null=True, blank=True, related_name='quantity_logs'
    )
    inventory_item = models.ForeignKey(
        InventoryItem, on_delete=models.CASCADE, null=True, blank=True, related_name='quantity_logs'
    )
    previous_quantity = models.DecimalField(max_digits=10, decimal_places=2)
    new_quantity = models.DecimalField(max_digits=10, decimal_places=2)
    change_amount = models.DecimalField(max_digits=10, decimal_places=2)
    change_type = models.CharField(max_length=20, choices=CHANGE_TYPE_CHOICES)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'quantity_logs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['created_at'], name='quantity_logs_created_idx'),
        ]

    def __str__(self):
        return f"{self.change_type}: {self.previous_quantity} -> {self.new_quantity}"


class InventoryUsageSession(models.Model):
    """One stock count session per calendar day; closed once every entry has an ending count."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateField(unique=True)
    is_active = models.BooleanField(default=True)
    notes = models.TextField(blank=True, null=True)
    closed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'inventory_usage_sessions'
        ordering = ['-date']

    def __str__(self):
        return f"Usage session {self.date} ({'open' if self.is_active else 'closed'})"


class InventoryUsageEntry(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(InventoryUsageSession, on_delete=models.CASCADE, related_name='entries')
    item = models.ForeignKey(SimpleInventory, on_delete=models.CASCADE, related_name='usage_entries')
    starting_quantity = models.DecimalField(max_digits=10, decimal_places=2)
    ending_quantity = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    used_quantity = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'inventory_usage_entries'
        ordering = ['item__category', 'item__item_name']
        unique_together = ['session', 'item']

    def __str__(self):
        return f"{self.item.item_name}: {self.starting_quantity} -> {self.ending_quantity}"

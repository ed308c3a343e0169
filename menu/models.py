from django.db import models
import uuid


class MenuConfig(models.Model):
    """A selectable option on the order form; DRINK rows carry the base price."""
    ITEM_TYPE_CHOICES = (
        ('DRINK', 'Drink'),
        ('MILK', 'Milk'),
        ('SYRUP', 'Syrup'),
        ('FOAM', 'Foam'),
        ('TEMPERATURE', 'Temperature'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    item_type = models.CharField(max_length=20, choices=ITEM_TYPE_CHOICES)
    item_name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'menu_config'
        verbose_name = "Menu Option"
        ordering = ['item_type', 'item_name']
        indexes = [
            models.Index(fields=['item_type', 'item_name'], name='menu_type_name_idx'),
        ]

    def __str__(self):
        return f"{self.item_type}: {self.item_name}"

import uuid
import django.db.models.deletion
from django.db import migrations, models

CATEGORY_CHOICES = [
    ('COFFEE_BEANS', 'Coffee Beans'),
    ('MILK', 'Milk'),
    ('SYRUP', 'Syrup'),
    ('SUPPLIES', 'Supplies'),
    ('EQUIPMENT', 'Equipment'),
    ('OTHER', 'Other'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='InventoryCost',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('item_name', models.CharField(max_length=255)),
                ('category', models.CharField(choices=CATEGORY_CHOICES, max_length=20)),
                ('unit_cost', models.DecimalField(decimal_places=4, max_digits=10)),
                ('unit', models.CharField(max_length=50)),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'inventory_costs',
                'ordering': ['category', 'item_name'],
            },
        ),
        migrations.CreateModel(
            name='InventoryItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('initial_quantity', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('current_stock', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('reorder_level', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('last_restocked', models.DateTimeField(blank=True, null=True)),
                ('total_cost', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('cost_item', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='inventory_item', to='inventory.inventorycost')),
            ],
            options={
                'db_table': 'inventory_items',
                'ordering': ['cost_item__category', 'cost_item__item_name'],
            },
        ),
        migrations.CreateModel(
            name='SimpleInventory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('item_name', models.CharField(max_length=255)),
                ('category', models.CharField(choices=CATEGORY_CHOICES, max_length=20)),
                ('initial_quantity', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('current_stock', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('unit', models.CharField(max_length=50)),
                ('reorder_level', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'simple_inventory',
                'ordering': ['category', 'item_name'],
                'unique_together': {('item_name', 'category')},
            },
        ),
        migrations.CreateModel(
            name='QuantityLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('previous_quantity', models.DecimalField(decimal_places=2, max_digits=10)),
                ('new_quantity', models.DecimalField(decimal_places=2, max_digits=10)),
                ('change_amount', models.DecimalField(decimal_places=2, max_digits=10)),
                ('change_type', models.CharField(choices=[('initial_stock', 'Initial Stock'), ('adjustment', 'Adjustment'), ('usage', 'Usage'), ('daily_usage', 'Daily Usage'), ('restock', 'Restock')], max_length=20)),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('simple_inventory', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='quantity_logs', to='inventory.simpleinventory')),
                ('inventory_item', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='quantity_logs', to='inventory.inventoryitem')),
            ],
            options={
                'db_table': 'quantity_logs',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['created_at'], name='quantity_logs_created_idx')],
            },
        ),
        migrations.CreateModel(
            name='InventoryUsageSession',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField(unique=True)),
                ('is_active', models.BooleanField(default=True)),
                ('notes', models.TextField(blank=True, null=True)),
                ('closed_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'inventory_usage_sessions',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='InventoryUsageEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('starting_quantity', models.DecimalField(decimal_places=2, max_digits=10)),
                ('ending_quantity', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('used_quantity', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('session', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='inventory.inventoryusagesession')),
                ('item', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='usage_entries', to='inventory.simpleinventory')),
            ],
            options={
                'db_table': 'inventory_usage_entries',
                'ordering': ['item__category', 'item__item_name'],
                'unique_together': {('session', 'item')},
            },
        ),
    ]

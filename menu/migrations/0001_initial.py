import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='MenuConfig',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('item_type', models.CharField(choices=[('DRINK', 'Drink'), ('MILK', 'Milk'), ('SYRUP', 'Syrup'), ('FOAM', 'Foam'), ('TEMPERATURE', 'Temperature')], max_length=20)),
                ('item_name', models.CharField(max_length=100)),
                ('price', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Menu Option',
                'db_table': 'menu_config',
                'ordering': ['item_type', 'item_name'],
                'indexes': [models.Index(fields=['item_type', 'item_name'], name='menu_type_name_idx')],
            },
        ),
    ]

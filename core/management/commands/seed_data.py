from decimal import Decimal

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from core.services import (
    DEFAULT_WAIT_TIME_RED,
    DEFAULT_WAIT_TIME_YELLOW,
    WAIT_TIME_RED_KEY,
    WAIT_TIME_YELLOW_KEY,
)
from core.models import Setting
from menu.models import MenuConfig

User = get_user_model()

DEFAULT_MENU = {
    'DRINK': [
        ('Latte', Decimal('4.00')),
        ('Coffee', Decimal('3.00')),
        ('Cappuccino', Decimal('4.50')),
        ('Americano', Decimal('3.50')),
        ('Mocha', Decimal('5.00')),
        ('Macchiato', Decimal('4.50')),
        ('Espresso', Decimal('2.50')),
    ],
    'MILK': ['Whole', 'Oat', 'Almond', 'Soy', '2%', 'Skim', 'Coconut'],
    'SYRUP': ['Vanilla', 'Caramel', 'Hazelnut', 'Cinnamon', 'Peppermint', 'Chocolate'],
    'FOAM': ['Regular Foam', 'Extra Foam', 'Light Foam', 'No Foam'],
    'TEMPERATURE': ['Hot', 'Iced', 'Extra Hot'],
}


class Command(BaseCommand):
    help = 'Seeds the default menu, wait-time settings and the admin account (only where missing)'

    def handle(self, *args, **kwargs):
        self.stdout.write('Starting seeding process...')

        with transaction.atomic():
            self.seed_admin()
            self.seed_menu()
            self.seed_settings()

        self.stdout.write(self.style.SUCCESS('Seeding complete.'))

    def seed_admin(self):
        if User.objects.exists():
            self.stdout.write('Users already exist; skipping admin account')
            return
        User.objects.create_user(
            username=settings.APP_USERNAME,
            password=settings.APP_PASSWORD,
            role='ADMIN',
            is_staff=True,
        )
        self.stdout.write(f'Created admin user: {settings.APP_USERNAME}')

    def seed_menu(self):
        if MenuConfig.objects.exists():
            self.stdout.write('Menu already configured; skipping default menu')
            return
        items = []
        for item_type, entries in DEFAULT_MENU.items():
            for entry in entries:
                name, price = entry if isinstance(entry, tuple) else (entry, None)
                items.append(MenuConfig(item_type=item_type, item_name=name, price=price))
        MenuConfig.objects.bulk_create(items)
        self.stdout.write(f'Created {len(items)} menu items')

    def seed_settings(self):
        for key, value in ((WAIT_TIME_YELLOW_KEY, DEFAULT_WAIT_TIME_YELLOW), (WAIT_TIME_RED_KEY, DEFAULT_WAIT_TIME_RED)):
            _, created = Setting.objects.get_or_create(key=key, defaults={'value': str(value)})
            if created:
                self.stdout.write(f'Created setting {key}={value}')

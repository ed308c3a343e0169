from io import StringIO

from django.core.management import call_command
from django.test import TestCase, override_settings

from accounts.models import User
from core.services import SettingsService
from menu.models import MenuConfig


@override_settings(APP_USERNAME='stand-admin', APP_PASSWORD='SeedPass123!')
class SeedDataCommandTest(TestCase):
    def test_seeds_admin_menu_and_settings(self):
        call_command('seed_data', stdout=StringIO())

        admin = User.objects.get(username='stand-admin')
        self.assertEqual(admin.role, 'ADMIN')
        self.assertTrue(admin.check_password('SeedPass123!'))
        self.assertEqual(MenuConfig.objects.filter(item_type='DRINK').count(), 7)
        self.assertEqual(MenuConfig.objects.get(item_type='DRINK', item_name='Latte').price, 4)
        self.assertIsNone(MenuConfig.objects.get(item_type='MILK', item_name='Oat').price)
        self.assertEqual(SettingsService.get('wait_time_red_threshold'), '10')

    def test_is_idempotent(self):
        call_command('seed_data', stdout=StringIO())
        call_command('seed_data', stdout=StringIO())

        self.assertEqual(User.objects.count(), 1)
        self.assertEqual(MenuConfig.objects.filter(item_name='Latte').count(), 1)

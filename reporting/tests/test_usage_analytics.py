from datetime import timedelta
from decimal import Decimal

from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import User
from inventory.models import QuantityLog, SimpleInventory
from inventory.services import InventoryService
from reporting.usage import build_usage_report


class UsageReportTest(TestCase):
    def setUp(self):
        self.milk = SimpleInventory.objects.create(
            item_name='Oat Milk', category='MILK', unit='cartons',
            initial_quantity=Decimal('10'), current_stock=Decimal('10'), reorder_level=Decimal('5'),
        )
        InventoryService.log_initial_stock(self.milk)
        InventoryService.record_usage(self.milk, Decimal('3'))
        InventoryService.record_usage(self.milk, Decimal('3'))

        self.cups = SimpleInventory.objects.create(
            item_name='Cups', category='SUPPLIES', unit='sleeves',
            initial_quantity=Decimal('4'), current_stock=Decimal('4'),
        )

    def report(self):
        return build_usage_report(SimpleInventory.objects.prefetch_related('quantity_logs').order_by('item_name'))

    def test_item_pattern(self):
        report = self.report()
        milk = next(p for p in report['usage_patterns'] if p['item_name'] == 'Oat Milk')

        self.assertEqual(milk['current_stock'], 4.0)
        self.assertEqual(milk['total_changes'], 3)
        self.assertEqual(milk['average_daily_usage'], 0.2)
        self.assertEqual(milk['days_until_empty'], 20)
        self.assertTrue(milk['is_low_stock'])
        today = timezone.localdate().isoformat()
        self.assertEqual(milk['usage_by_date'], {today: 6.0})
        self.assertEqual(milk['recent_usage_pattern'], [{'date': today, 'usage': 6.0, 'stock': 4.0}])

    def test_item_without_usage(self):
        cups = next(p for p in self.report()['usage_patterns'] if p['item_name'] == 'Cups')
        self.assertEqual(cups['days_until_empty'], -1)
        self.assertEqual(cups['recent_usage_pattern'], [])

    def test_old_usage_is_outside_average(self):
        QuantityLog.objects.filter(change_type='usage').update(
            created_at=timezone.now() - timedelta(days=45)
        )
        milk = next(p for p in self.report()['usage_patterns'] if p['item_name'] == 'Oat Milk')
        self.assertEqual(milk['average_daily_usage'], 0)

    def test_overview_and_breakdown(self):
        report = self.report()

        self.assertEqual(report['overview']['total_items'], 2)
        self.assertEqual(report['overview']['total_used'], 6.0)
        self.assertEqual(report['overview']['low_stock_count'], 1)
        self.assertEqual(report['overview']['total_logs'], 3)
        self.assertEqual(report['overview']['turnover_rate'], round(6 / 14 * 100, 2))
        self.assertEqual(report['category_breakdown']['MILK']['count'], 1)
        self.assertEqual(report['low_stock_items'][0]['item_name'], 'Oat Milk')
        self.assertEqual(report['daily_totals'][0]['total_usage'], 6.0)

    def test_usage_endpoint(self):
        client = APIClient()
        client.force_authenticate(user=User.objects.create_user(username='barista', password='StaffPass123!'))
        resp = client.get('/api/analytics/usage')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['data']['overview']['total_items'], 2)

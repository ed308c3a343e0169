from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from accounts.models import User
from inventory.models import InventoryCost, InventoryItem, QuantityLog, SimpleInventory


class SimpleInventoryAPITest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(username='owner', password='AdminPass123!', role='ADMIN')
        self.staff = User.objects.create_user(username='barista', password='StaffPass123!', role='STAFF')
        self.url = '/api/simple-inventory'

    def create_item(self, **overrides):
        payload = {'item_name': 'Oat Milk', 'category': 'MILK', 'unit': 'cartons', 'initial_quantity': '12'}
        payload.update(overrides)
        self.client.force_authenticate(user=self.admin)
        return self.client.post(self.url, payload, format='json')

    def test_create_logs_initial_stock(self):
        resp = self.create_item()

        self.assertEqual(resp.status_code, 201)
        item = SimpleInventory.objects.get()
        self.assertEqual(item.current_stock, Decimal('12'))
        log = QuantityLog.objects.get()
        self.assertEqual(log.change_type, 'initial_stock')
        self.assertEqual(log.change_amount, Decimal('12'))
        self.assertEqual(len(resp.data['recent_logs']), 1)

    def test_create_without_quantity_writes_no_log(self):
        self.create_item(initial_quantity='0')
        self.assertFalse(QuantityLog.objects.exists())

    def test_duplicate_name_in_category_rejected(self):
        self.create_item()
        resp = self.create_item(item_name='oat milk')

        self.assertEqual(resp.status_code, 400)
        self.assertIn('item_name', resp.json()['details'])
        self.assertEqual(self.create_item(category='OTHER').status_code, 201)

    def test_negative_quantity_rejected(self):
        self.assertEqual(self.create_item(initial_quantity='-1').status_code, 400)

    def test_staff_cannot_create(self):
        self.client.force_authenticate(user=self.staff)
        resp = self.client.post(self.url, {'item_name': 'Cups', 'category': 'SUPPLIES', 'unit': 'sleeves'}, format='json')
        self.assertEqual(resp.status_code, 403)

    def test_patch_stock_writes_adjustment(self):
        item_id = self.create_item().data['id']

        resp = self.client.patch(f'{self.url}/{item_id}', {'current_stock': '8', 'notes': 'recount'}, format='json')

        self.assertEqual(resp.status_code, 200)
        log = QuantityLog.objects.filter(change_type='adjustment').get()
        self.assertEqual(log.previous_quantity, Decimal('12'))
        self.assertEqual(log.change_amount, Decimal('-4'))
        self.assertEqual(log.notes, 'Stock updated from 12 to 8')
        item = SimpleInventory.objects.get()
        self.assertEqual(item.initial_quantity, Decimal('12'))
        self.assertEqual(item.notes, 'recount')

    def test_patch_same_stock_writes_nothing(self):
        item_id = self.create_item().data['id']
        self.client.patch(f'{self.url}/{item_id}', {'current_stock': '12'}, format='json')
        self.assertEqual(QuantityLog.objects.count(), 1)

    def test_usage_by_staff(self):
        item_id = self.create_item().data['id']
        self.client.force_authenticate(user=self.staff)

        resp = self.client.post(f'{self.url}/{item_id}/usage', {'quantity': '2.5'}, format='json')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data['current_stock'], '9.50')
        log = QuantityLog.objects.get(change_type='usage')
        self.assertEqual(log.change_amount, Decimal('-2.5'))

    def test_usage_beyond_stock_rejected(self):
        item_id = self.create_item(initial_quantity='1').data['id']

        resp = self.client.post(f'{self.url}/{item_id}/usage', {'quantity': '2'}, format='json')

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(SimpleInventory.objects.get().current_stock, Decimal('1'))
        self.assertEqual(QuantityLog.objects.count(), 1)

    def test_usage_must_be_positive(self):
        item_id = self.create_item().data['id']
        resp = self.client.post(f'{self.url}/{item_id}/usage', {'quantity': '0'}, format='json')
        self.assertEqual(resp.status_code, 400)

    def test_logs_and_low_stock_filter(self):
        low_id = self.create_item(reorder_level='15').data['id']
        self.create_item(item_name='Cups', category='SUPPLIES', unit='sleeves', reorder_level='2')
        self.client.post(f'{self.url}/{low_id}/usage', {'quantity': '1'}, format='json')

        logs = self.client.get(f'{self.url}/{low_id}/logs').data
        self.assertEqual([log['change_type'] for log in logs], ['usage', 'initial_stock'])

        low = self.client.get(self.url, {'low_stock': 'true'}).data
        self.assertEqual([row['item_name'] for row in low], ['Oat Milk'])
        self.assertEqual(len(self.client.get(self.url, {'category': 'supplies'}).data), 1)

    def test_delete_cascades_logs(self):
        item_id = self.create_item().data['id']

        resp = self.client.delete(f'{self.url}/{item_id}')

        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()['success'])
        self.assertFalse(QuantityLog.objects.exists())


class InventoryCostAndItemAPITest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(
            user=User.objects.create_user(username='owner', password='AdminPass123!', role='ADMIN')
        )
        self.cost = InventoryCost.objects.create(
            item_name='Espresso Roast', category='COFFEE_BEANS', unit_cost=Decimal('0.5000'), unit='shot',
        )

    def test_cost_requires_positive_unit_cost(self):
        resp = self.client.post('/api/inventory-costs', {
            'item_name': 'Cups', 'category': 'SUPPLIES', 'unit_cost': '0', 'unit': 'each',
        }, format='json')
        self.assertEqual(resp.status_code, 400)

    def test_cost_category_filter(self):
        InventoryCost.objects.create(item_name='Cups', category='SUPPLIES', unit_cost=Decimal('0.1'), unit='each')
        resp = self.client.get('/api/inventory-costs', {'category': 'SUPPLIES'})
        self.assertEqual([row['item_name'] for row in resp.data], ['Cups'])

    def test_item_total_cost_and_logs(self):
        resp = self.client.post('/api/inventory-items', {
            'cost_item': str(self.cost.pk), 'initial_quantity': '100',
        }, format='json')

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data['total_cost'], '50.00')
        self.assertEqual(resp.data['current_stock'], '100.00')
        item = InventoryItem.objects.get()
        self.assertEqual(QuantityLog.objects.get(inventory_item=item).change_type, 'initial_stock')

        resp = self.client.patch(f'/api/inventory-items/{item.pk}', {'initial_quantity': '10'}, format='json')
        self.assertEqual(resp.data['total_cost'], '5.00')

    def test_restock_logged_for_increase(self):
        item_id = self.client.post('/api/inventory-items', {
            'cost_item': str(self.cost.pk), 'initial_quantity': '10',
        }, format='json').data['id']

        resp = self.client.patch(f'/api/inventory-items/{item_id}', {'current_stock': '30'}, format='json')

        self.assertEqual(resp.status_code, 200)
        self.assertIsNotNone(resp.data['last_restocked'])
        self.assertTrue(QuantityLog.objects.filter(change_type='restock', change_amount=Decimal('20')).exists())

    def test_duplicate_or_unknown_cost_item(self):
        payload = {'cost_item': str(self.cost.pk), 'initial_quantity': '1'}
        self.assertEqual(self.client.post('/api/inventory-items', payload, format='json').status_code, 201)
        self.assertEqual(self.client.post('/api/inventory-items', payload, format='json').status_code, 400)

        payload['cost_item'] = '00000000-0000-0000-0000-000000000000'
        self.assertEqual(self.client.post('/api/inventory-items', payload, format='json').status_code, 400)

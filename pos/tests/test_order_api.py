from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from accounts.models import User
from menu.models import MenuConfig
from pos.models import Order, OrderNumberSequence
from pos.services import OrderService


class OrderAPITest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.staff = User.objects.create_user(username='barista', password='StaffPass123!', role='STAFF')
        self.client.force_authenticate(user=self.staff)
        MenuConfig.objects.create(item_type='DRINK', item_name='Latte', price=Decimal('4.00'))
        self.url = '/api/orders'

    def create_order(self, **overrides):
        payload = {
            'customer_name': 'Alice', 'drink': 'Latte', 'milk': 'Whole', 'temperature': 'Hot',
        }
        payload.update(overrides)
        return self.client.post(self.url, payload, format='json')

    def test_create_prices_order(self):
        resp = self.create_order(extra_shots=2, foam='Regular Foam', syrup='', notes='  ')

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data['price'], '7.00')
        self.assertEqual(resp.data['status'], 'PENDING')
        self.assertEqual(resp.data['order_number'], 1)
        order = Order.objects.get()
        self.assertIsNone(order.syrup)
        self.assertIsNone(order.notes)

    def test_create_response_is_enveloped(self):
        body = self.create_order().json()
        self.assertTrue(body['success'])
        self.assertEqual(body['data']['customer_name'], 'Alice')

    def test_order_numbers_are_sequential(self):
        numbers = [self.create_order().data['order_number'] for _ in range(3)]
        self.assertEqual(numbers, [1, 2, 3])
        self.assertEqual(OrderNumberSequence.objects.get().last_value, 3)

    def test_numbering_skips_past_existing_orders(self):
        Order.objects.create(
            order_number=41, customer_name='Old', drink='Latte', milk='Whole', temperature='Hot',
            price=Decimal('4.00'),
        )
        self.assertEqual(self.create_order().data['order_number'], 42)

    def test_missing_fields_rejected(self):
        resp = self.client.post(self.url, {'customer_name': 'Alice'}, format='json')

        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.json()['success'])
        self.assertIn('drink', resp.json()['details'])

    def test_extra_shots_bounds(self):
        self.assertEqual(self.create_order(extra_shots=-1).status_code, 400)

        resp = self.create_order(extra_shots=12)
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data['extra_shots'], 12)
        self.assertEqual(resp.data['price'], '16.00')

    def test_price_is_fixed_at_creation(self):
        order_id = self.create_order().data['id']
        MenuConfig.objects.filter(item_name='Latte').update(price=Decimal('9.00'))

        resp = self.client.get(f'{self.url}/{order_id}')
        self.assertEqual(resp.data['price'], '4.00')

    def test_status_moves_forward_with_timestamps(self):
        order_id = self.create_order().data['id']

        resp = self.client.patch(f'{self.url}/{order_id}', {'status': 'IN_PROGRESS'}, format='json')
        self.assertEqual(resp.status_code, 200)
        self.assertIsNotNone(resp.data['started_at'])
        self.assertIsNone(resp.data['completed_at'])

        resp = self.client.patch(f'{self.url}/{order_id}', {'status': 'COMPLETED'}, format='json')
        self.assertEqual(resp.data['status'], 'COMPLETED')
        self.assertIsNotNone(resp.data['completed_at'])

    def test_status_cannot_move_backwards(self):
        order_id = self.create_order().data['id']
        self.client.patch(f'{self.url}/{order_id}', {'status': 'COMPLETED'}, format='json')

        resp = self.client.patch(f'{self.url}/{order_id}', {'status': 'PENDING'}, format='json')

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(Order.objects.get().status, 'COMPLETED')

    def test_unknown_status_rejected(self):
        order_id = self.create_order().data['id']
        resp = self.client.patch(f'{self.url}/{order_id}', {'status': 'CANCELLED'}, format='json')
        self.assertEqual(resp.status_code, 400)

    def test_skipping_to_completed_sets_started_at(self):
        order = OrderService.create_order(customer_name='Bo', drink='Latte', milk='Whole', temperature='Hot')
        order = OrderService.change_status(order, 'COMPLETED')
        self.assertIsNotNone(order.started_at)
        self.assertIsNotNone(order.completed_at)

    def test_list_filters_and_ordering(self):
        first = self.create_order(customer_name='Maria').data['id']
        second = self.create_order(customer_name='Ana').data['id']
        third = self.create_order(customer_name='Mario').data['id']
        self.client.patch(f'{self.url}/{first}', {'status': 'IN_PROGRESS'}, format='json')
        self.client.patch(f'{self.url}/{third}', {'status': 'COMPLETED'}, format='json')

        ids = [row['id'] for row in self.client.get(self.url).data]
        self.assertEqual(ids, [second, first, third])

        active = [row['id'] for row in self.client.get(self.url, {'status': 'active'}).data]
        self.assertEqual(active, [second, first])

        found = [row['customer_name'] for row in self.client.get(self.url, {'search': 'mari'}).data]
        self.assertEqual(sorted(found), ['Maria', 'Mario'])

    def test_invalid_status_filter(self):
        self.assertEqual(self.client.get(self.url, {'status': 'bogus'}).status_code, 400)

    def test_counts(self):
        order_id = self.create_order().data['id']
        self.create_order()
        self.client.patch(f'{self.url}/{order_id}', {'status': 'COMPLETED'}, format='json')

        resp = self.client.get(f'{self.url}/counts')

        self.assertEqual(resp.data, {'pending': 1, 'in_progress': 0, 'completed': 1, 'total': 2})

    def test_delete(self):
        order_id = self.create_order().data['id']
        self.assertEqual(self.client.delete(f'{self.url}/{order_id}').status_code, 204)
        self.assertFalse(Order.objects.exists())

    def test_customers(self):
        self.create_order(customer_name='Maria')
        self.create_order(customer_name='Maria')
        self.create_order(customer_name='Ana')

        self.assertEqual(self.client.get('/api/customers').data, ['Ana', 'Maria'])
        self.assertEqual(self.client.get('/api/customers', {'search': 'an'}).data, ['Ana'])

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        self.assertEqual(self.client.get(self.url).status_code, 401)

from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from accounts.models import User
from inventory.models import QuantityLog, SimpleInventory
from pos.models import Order, OrderNumberSequence
from pos.services import OrderService
from raffle.models import RaffleParticipant


class AdminResetAPITest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(username='owner', password='AdminPass123!', role='ADMIN')
        self.staff = User.objects.create_user(username='barista', password='StaffPass123!', role='STAFF')
        self.url = '/api/admin/reset'

        OrderService.create_order(customer_name='Maria', drink='Latte', milk='Whole', temperature='Hot')
        OrderService.create_order(customer_name='Ana', drink='Mocha', milk='Oat', temperature='Iced')
        item = SimpleInventory.objects.create(
            item_name='Oat Milk', category='MILK', unit='cartons', current_stock=Decimal('4'),
        )
        QuantityLog.objects.create(
            simple_inventory=item, previous_quantity=0, new_quantity=4, change_amount=4,
            change_type='initial_stock',
        )
        RaffleParticipant.objects.create(customer_name='Maria', phone_number='1', entries=1)

    def test_reset_orders_restarts_numbering(self):
        self.client.force_authenticate(user=self.admin)
        resp = self.client.post(self.url, {'password': 'AdminPass123!', 'reset_orders': True}, format='json')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['data']['deleted']['orders'], 2)
        self.assertFalse(Order.objects.exists())
        self.assertEqual(OrderNumberSequence.objects.get().last_value, 0)
        self.assertTrue(SimpleInventory.objects.exists())

        order = OrderService.create_order(customer_name='Maria', drink='Latte', milk='Whole', temperature='Hot')
        self.assertEqual(order.order_number, 1)

    def test_reset_inventory_and_raffle(self):
        self.client.force_authenticate(user=self.admin)
        resp = self.client.post(self.url, {
            'password': 'AdminPass123!', 'reset_inventory': True, 'reset_raffle': True,
        }, format='json')

        self.assertEqual(resp.status_code, 200)
        deleted = resp.json()['data']['deleted']
        self.assertEqual(deleted['inventory']['simple_inventory'], 1)
        self.assertEqual(deleted['raffle_participants'], 1)
        self.assertFalse(QuantityLog.objects.exists())
        self.assertFalse(RaffleParticipant.objects.exists())
        self.assertEqual(Order.objects.count(), 2)

    def test_wrong_password_is_401(self):
        self.client.force_authenticate(user=self.admin)
        resp = self.client.post(self.url, {'password': 'nope', 'reset_orders': True}, format='json')

        self.assertEqual(resp.status_code, 401)
        self.assertEqual(Order.objects.count(), 2)

    def test_missing_password_or_flags_is_400(self):
        self.client.force_authenticate(user=self.admin)
        self.assertEqual(self.client.post(self.url, {'reset_orders': True}, format='json').status_code, 400)
        self.assertEqual(self.client.post(self.url, {'password': 'AdminPass123!'}, format='json').status_code, 400)

    def test_staff_forbidden(self):
        self.client.force_authenticate(user=self.staff)
        resp = self.client.post(self.url, {'password': 'StaffPass123!', 'reset_orders': True}, format='json')
        self.assertEqual(resp.status_code, 403)

from django.test import TestCase
from rest_framework.test import APIClient

from accounts.models import User


class AuthAPITest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username='barista', password='StaffPass123!', role='STAFF')

    def test_login_success(self):
        resp = self.client.post('/api/auth/login', {'username': 'barista', 'password': 'StaffPass123!'}, format='json')

        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body['success'])
        self.assertEqual(body['data']['username'], 'barista')
        self.assertNotIn('password', body['data'])

        me = self.client.get('/api/auth/me')
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.data['role'], 'STAFF')

    def test_login_wrong_password(self):
        resp = self.client.post('/api/auth/login', {'username': 'barista', 'password': 'nope'}, format='json')

        self.assertEqual(resp.status_code, 401)
        self.assertFalse(resp.json()['success'])

    def test_login_inactive_user(self):
        self.user.is_active = False
        self.user.save()
        resp = self.client.post('/api/auth/login', {'username': 'barista', 'password': 'StaffPass123!'}, format='json')
        self.assertEqual(resp.status_code, 401)

    def test_login_missing_fields(self):
        resp = self.client.post('/api/auth/login', {'username': 'barista'}, format='json')

        self.assertEqual(resp.status_code, 400)
        self.assertIn('password', resp.json()['details'])

    def test_me_requires_authentication(self):
        self.assertEqual(self.client.get('/api/auth/me').status_code, 401)

    def test_logout(self):
        self.client.login(username='barista', password='StaffPass123!')

        resp = self.client.post('/api/auth/logout')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get('/api/auth/me').status_code, 401)

    def test_jwt_token_pair(self):
        resp = self.client.post('/api/auth/token/', {'username': 'barista', 'password': 'StaffPass123!'}, format='json')

        self.assertEqual(resp.status_code, 200)
        access = resp.data['access']
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
        self.assertEqual(self.client.get('/api/auth/me').data['username'], 'barista')


class UserManagementAPITest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(username='owner', password='AdminPass123!', role='ADMIN')
        self.staff = User.objects.create_user(username='barista', password='StaffPass123!', role='STAFF')
        self.client.force_authenticate(user=self.admin)

    def test_list_users(self):
        resp = self.client.get('/api/users')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual([row['username'] for row in resp.data], ['barista', 'owner'])

    def test_staff_cannot_manage_users(self):
        self.client.force_authenticate(user=self.staff)
        self.assertEqual(self.client.get('/api/users').status_code, 403)

    def test_create_user(self):
        resp = self.client.post('/api/users', {
            'username': '  cashier ', 'password': 'CashierPass1', 'role': 'STAFF',
        }, format='json')

        self.assertEqual(resp.status_code, 201)
        user = User.objects.get(username='cashier')
        self.assertTrue(user.check_password('CashierPass1'))

    def test_password_rules(self):
        short = self.client.post('/api/users', {'username': 'cashier', 'password': 'short'}, format='json')
        self.assertEqual(short.status_code, 400)

        missing = self.client.post('/api/users', {'username': 'cashier'}, format='json')
        self.assertEqual(missing.status_code, 400)
        self.assertIn('password', missing.json()['details'])

    def test_duplicate_username_rejected(self):
        resp = self.client.post('/api/users', {'username': 'barista', 'password': 'Another123'}, format='json')
        self.assertEqual(resp.status_code, 400)

    def test_update_role_and_password(self):
        resp = self.client.patch(f'/api/users/{self.staff.pk}', {
            'role': 'ADMIN', 'password': 'NewPass1234',
        }, format='json')

        self.assertEqual(resp.status_code, 200)
        self.staff.refresh_from_db()
        self.assertEqual(self.staff.role, 'ADMIN')
        self.assertTrue(self.staff.check_password('NewPass1234'))

    def test_delete_user(self):
        resp = self.client.delete(f'/api/users/{self.staff.pk}')

        self.assertEqual(resp.status_code, 200)
        self.assertFalse(User.objects.filter(pk=self.staff.pk).exists())

    def test_cannot_delete_self(self):
        resp = self.client.delete(f'/api/users/{self.admin.pk}')

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['error'], 'You cannot delete your own account.')
        self.assertTrue(User.objects.filter(pk=self.admin.pk).exists())

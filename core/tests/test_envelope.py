from django.test import SimpleTestCase, TestCase
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.test import APIClient

from accounts.models import User
from core.exceptions import InsufficientInventory, _flatten_detail, api_exception_handler


class ExceptionHandlerTest(SimpleTestCase):
    def test_validation_error_keeps_details(self):
        response = api_exception_handler(ValidationError({'price': ['Must be positive.']}), {})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['error'], 'price: Must be positive.')
        self.assertEqual(response.data['details'], {'price': ['Must be positive.']})
        self.assertFalse(response.data['success'])

    def test_api_exception_has_no_details(self):
        response = api_exception_handler(InsufficientInventory('Only 2 cups left.'), {})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data, {'success': False, 'error': 'Only 2 cups left.'})

    def test_not_found(self):
        response = api_exception_handler(NotFound(), {})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data['error'], 'Not found.')

    def test_unhandled_error_becomes_500(self):
        with self.assertLogs('core.exceptions', level='ERROR'):
            response = api_exception_handler(RuntimeError('boom'), {})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data['error'], 'An unexpected error occurred.')

    def test_flatten_non_field_errors(self):
        self.assertEqual(_flatten_detail({'non_field_errors': ['Bad combo.']}), 'Bad combo.')
        self.assertEqual(_flatten_detail([]), 'Invalid request.')


class EnvelopeRenderingTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(
            user=User.objects.create_user(username='barista', password='StaffPass123!', role='STAFF')
        )

    def test_success_payload_is_wrapped(self):
        with self.assertLogs('core.middleware', level='INFO') as logs:
            resp = self.client.get('/api/menu')

        self.assertEqual(resp.json(), {'success': True, 'data': []})
        self.assertIn('GET /api/menu -> 200', logs.output[0])

    def test_client_error_logged_as_warning(self):
        with self.assertLogs('core.middleware', level='WARNING') as logs:
            resp = self.client.post('/api/menu', {'item_type': 'DRINK', 'item_name': 'Tea'}, format='json')

        self.assertEqual(resp.status_code, 403)
        self.assertIn('user=barista', logs.output[0])

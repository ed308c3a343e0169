import csv
import io
from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from accounts.models import User
from pos.models import Order


class OrderExportTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(
            user=User.objects.create_user(username='owner', password='AdminPass123!', role='ADMIN')
        )
        Order.objects.create(
            order_number=1, customer_name='Smith, Jo', drink='Latte', milk='Oat', syrup='Vanilla',
            temperature='Hot', notes='say "hi"', price=Decimal('5.5'), status=Order.STATUS_COMPLETED,
        )
        Order.objects.create(
            order_number=2, customer_name='Ana', drink='Mocha', milk='Whole',
            temperature='Iced', price=Decimal('6.00'), status=Order.STATUS_PENDING,
        )

    def test_csv_export(self):
        resp = self.client.get('/api/export/csv')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp['Content-Type'], 'text/csv')
        self.assertRegex(resp['Content-Disposition'], r'attachment; filename="orders-export-\d{4}-\d{2}-\d{2}\.csv"')
        rows = list(csv.reader(io.StringIO(resp.content.decode())))
        self.assertEqual(rows[0][0], 'Customer Name')
        self.assertEqual(rows[0][-1], 'Completed At')
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][:4], ['Smith, Jo', 'Latte', 'Oat', 'Vanilla'])
        self.assertEqual(rows[1][7], 'say "hi"')
        self.assertEqual(rows[1][8], '5.50')

    def test_excel_export(self):
        import openpyxl

        resp = self.client.get('/api/export/csv', {'format': 'excel'})

        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp['Content-Disposition'].endswith('.xlsx"'))
        ws = openpyxl.load_workbook(io.BytesIO(resp.content)).active
        self.assertEqual(ws.cell(row=2, column=2).value, 'Latte')
        self.assertEqual(ws.max_row, 2)

    def test_unknown_format(self):
        resp = self.client.get('/api/export/csv', {'format': 'pdf'})
        self.assertEqual(resp.status_code, 400)

    def test_file_accept_headers(self):
        resp = self.client.get('/api/export/csv', HTTP_ACCEPT='text/csv')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp['Content-Type'], 'text/csv')
        self.assertTrue(resp.content.decode().startswith('Customer Name,'))

        resp = self.client.get(
            '/api/export/csv', {'format': 'xlsx'},
            HTTP_ACCEPT='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
        )
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp['Content-Disposition'].endswith('.xlsx"'))

    def test_unknown_format_with_csv_accept(self):
        resp = self.client.get('/api/export/csv', {'format': 'pdf'}, HTTP_ACCEPT='text/csv')
        self.assertEqual(resp.status_code, 400)

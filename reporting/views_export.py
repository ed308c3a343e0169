"""
Completed order export for bookkeeping: CSV (default) and Excel.
"""
import csv
import io
import logging

from django.http import HttpResponse
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes, renderer_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated

from core.renderers import CSVRenderer, EnvelopeJSONRenderer, XLSXRenderer
from pos.models import Order

logger = logging.getLogger(__name__)

EXPORT_HEADERS = [
    'Customer Name', 'Drink', 'Milk', 'Syrup', 'Foam', 'Temperature',
    'Extra Shots', 'Notes', 'Price', 'Created At', 'Completed At',
]


def _export_rows():
    orders = Order.objects.filter(status=Order.STATUS_COMPLETED).order_by('-created_at')
    for order in orders:
        yield [
            order.customer_name,
            order.drink,
            order.milk,
            order.syrup or '',
            order.foam or '',
            order.temperature,
            order.extra_shots or 0,
            order.notes or '',
            f"{order.price:.2f}",
            order.created_at.isoformat(),
            order.wait_reference_time.isoformat(),
        ]


def _export_csv(rows):
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator='\n')
    writer.writerow(EXPORT_HEADERS)
    writer.writerows(rows)
    return buf.getvalue()


def _export_excel(rows):
    import openpyxl
    from openpyxl.styles import Font

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Completed Orders"
    ws.append(EXPORT_HEADERS)
    for h in range(1, len(EXPORT_HEADERS) + 1):
        ws.cell(row=1, column=h).font = Font(bold=True)
    for r in rows:
        ws.append(r)
    buf = io.BytesIO()
    wb.save(buf)
    buf.seek(0)
    return buf.getvalue()


@api_view(["GET"])
@permission_classes([IsAuthenticated])
@renderer_classes([EnvelopeJSONRenderer, CSVRenderer, XLSXRenderer])
def orders_export(request):
    """
    Export completed orders, newest first.
    Query params: format=csv|excel (default csv).
    """
    fmt = (request.query_params.get("format") or "csv").lower().strip()
    if fmt not in ("csv", "excel", "xlsx"):
        raise ValidationError({"format": "format must be 'csv' or 'excel' (or 'xlsx')."})

    rows = list(_export_rows())
    stamp = timezone.localdate().isoformat()
    logger.info("Exporting %d completed orders as %s", len(rows), fmt)

    if fmt == "csv":
        resp = HttpResponse(_export_csv(rows), content_type="text/csv")
        resp["Content-Disposition"] = f'attachment; filename="orders-export-{stamp}.csv"'
        return resp

    resp = HttpResponse(
        _export_excel(rows),
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
    resp["Content-Disposition"] = f'attachment; filename="orders-export-{stamp}.xlsx"'
    return resp

from django.utils import timezone
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.services import SettingsService
from core.utils import get_date_range, local_day_bounds, parse_date_param
from inventory.models import InventoryCost, InventoryItem, SimpleInventory
from pos.models import Order
from .profit import build_profit_report
from .services import build_overview, build_time_series
from .usage import build_usage_report


def completed_orders():
    return Order.objects.filter(status=Order.STATUS_COMPLETED).order_by('-created_at')


class AnalyticsOverviewAPIView(APIView):
    """GET /api/analytics - sales overview of completed orders"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(build_overview(completed_orders(), SettingsService.get_wait_time_thresholds()))


class TimeSeriesAnalyticsAPIView(APIView):
    """
    GET /api/analytics/time-series

    Query params: start_date, end_date (YYYY-MM-DD, default the last 7 days),
    group_by=hour|day|week (default hour).
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        default_start, default_end = get_date_range(7)
        start_date = parse_date_param(request.query_params.get('start_date'), 'start_date', default_start)
        end_date = parse_date_param(request.query_params.get('end_date'), 'end_date', default_end)
        group_by = request.query_params.get('group_by', 'hour').lower()

        range_start, _ = local_day_bounds(start_date)
        _, range_end = local_day_bounds(end_date)
        orders = Order.objects.filter(created_at__gte=range_start, created_at__lt=range_end).only('created_at')
        return Response(build_time_series(orders, start_date, end_date, group_by))


class ProfitAnalyticsAPIView(APIView):
    """GET /api/analytics/profit - estimated ingredient cost and profit"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(build_profit_report(
            completed_orders(),
            InventoryCost.objects.all(),
            InventoryItem.objects.select_related('cost_item'),
            now=timezone.now(),
        ))


class UsageAnalyticsAPIView(APIView):
    """GET /api/analytics/usage - stock usage patterns from quantity logs"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        items = SimpleInventory.objects.prefetch_related('quantity_logs').order_by('category', 'item_name')
        return Response(build_usage_report(items))

from django.urls import path
from .views import (
    AnalyticsOverviewAPIView,
    ProfitAnalyticsAPIView,
    TimeSeriesAnalyticsAPIView,
    UsageAnalyticsAPIView,
)
from .views_export import orders_export

urlpatterns = [
    path('analytics', AnalyticsOverviewAPIView.as_view(), name='analytics-overview'),
    path('analytics/time-series', TimeSeriesAnalyticsAPIView.as_view(), name='analytics-time-series'),
    path('analytics/profit', ProfitAnalyticsAPIView.as_view(), name='analytics-profit'),
    path('analytics/usage', UsageAnalyticsAPIView.as_view(), name='analytics-usage'),

    # Export
    path('export/csv', orders_export, name='orders-export'),
]

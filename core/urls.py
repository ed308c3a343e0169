from django.urls import path
from .views import (
    AdminResetAPIView,
    DefaultLabelConfigAPIView,
    ExtraPricingAPIView,
    WaitTimeThresholdsAPIView,
)

urlpatterns = [
    path('settings/extra-pricing', ExtraPricingAPIView.as_view(), name='settings-extra-pricing'),
    path('settings/wait-time-thresholds', WaitTimeThresholdsAPIView.as_view(), name='settings-wait-time-thresholds'),
    path('settings/default-label-config', DefaultLabelConfigAPIView.as_view(), name='settings-default-label-config'),
    path('admin/reset', AdminResetAPIView.as_view(), name='admin-reset'),
]

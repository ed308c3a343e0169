from django.urls import path
from .views import (
    LabelPreviewAPIView,
    LabelSettingsListCreateAPIView,
    LabelSettingsRetrieveUpdateDestroyAPIView,
    OrderLabelAPIView,
)

urlpatterns = [
    path('label-settings', LabelSettingsListCreateAPIView.as_view(), name='label-settings-list'),
    path('label-settings/<uuid:pk>', LabelSettingsRetrieveUpdateDestroyAPIView.as_view(), name='label-settings-detail'),
    path('orders/<uuid:pk>/label', OrderLabelAPIView.as_view(), name='order-label'),
    path('orders/preview/label', LabelPreviewAPIView.as_view(), name='order-label-preview'),
]

from django.urls import path
from .views import (
    InventoryCostListCreateAPIView,
    InventoryCostRetrieveUpdateDestroyAPIView,
    InventoryItemListCreateAPIView,
    InventoryItemRetrieveUpdateDestroyAPIView,
    InventoryUsageAPIView,
    InventoryUsageCloseAPIView,
    SimpleInventoryListCreateAPIView,
    SimpleInventoryLogListAPIView,
    SimpleInventoryRetrieveUpdateDestroyAPIView,
    SimpleInventoryUsageAPIView,
)

urlpatterns = [
    # Cost catalog
    path('inventory-costs', InventoryCostListCreateAPIView.as_view(), name='inventory-cost-list-create'),
    path('inventory-costs/<uuid:pk>', InventoryCostRetrieveUpdateDestroyAPIView.as_view(), name='inventory-cost-detail'),

    # Cost-linked stock
    path('inventory-items', InventoryItemListCreateAPIView.as_view(), name='inventory-item-list-create'),
    path('inventory-items/<uuid:pk>', InventoryItemRetrieveUpdateDestroyAPIView.as_view(), name='inventory-item-detail'),

    # Simple stock
    path('simple-inventory', SimpleInventoryListCreateAPIView.as_view(), name='simple-inventory-list-create'),
    path('simple-inventory/<uuid:pk>', SimpleInventoryRetrieveUpdateDestroyAPIView.as_view(), name='simple-inventory-detail'),
    path('simple-inventory/<uuid:pk>/usage', SimpleInventoryUsageAPIView.as_view(), name='simple-inventory-usage'),
    path('simple-inventory/<uuid:pk>/logs', SimpleInventoryLogListAPIView.as_view(), name='simple-inventory-logs'),

    # Daily usage sessions
    path('inventory-usage', InventoryUsageAPIView.as_view(), name='inventory-usage'),
    path('inventory-usage/close', InventoryUsageCloseAPIView.as_view(), name='inventory-usage-close'),
]

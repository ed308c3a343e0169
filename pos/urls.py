from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import CustomerListAPIView, OrderViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'orders', OrderViewSet, basename='order')

urlpatterns = [
    path('', include(router.urls)),
    path('customers', CustomerListAPIView.as_view(), name='customer-list'),
]

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .filters import OrderFilter, with_status_rank
from .models import Order
from .serializers import OrderCreateSerializer, OrderSerializer, OrderStatusSerializer
from .services import OrderService


class OrderViewSet(mixins.ListModelMixin,
                   mixins.RetrieveModelMixin,
                   mixins.DestroyModelMixin,
                   viewsets.GenericViewSet):
    """
    ViewSet for drink orders

    Endpoints:
    - GET /api/orders - List orders (?status=active|pending|in_progress|completed, ?search=name)
    - POST /api/orders - Create order
    - GET /api/orders/{id} - Get order details
    - PATCH /api/orders/{id} - Advance order status
    - DELETE /api/orders/{id} - Delete order
    - GET /api/orders/counts - Order counts per status
    """
    permission_classes = [IsAuthenticated]
    serializer_class = OrderSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = OrderFilter
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_queryset(self):
        return with_status_rank(Order.objects.all())

    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderService.create_order(**serializer.validated_data)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):
        order = self.get_object()
        serializer = OrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderService.change_status(order, serializer.validated_data['status'])
        return Response(OrderSerializer(order).data)

    @action(detail=False, methods=['get'])
    def counts(self, request):
        """Order counts per status"""
        return Response(OrderService.status_counts())


class CustomerListAPIView(APIView):
    """Distinct customer names, for order-form autocomplete"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        queryset = Order.objects.all()
        search = request.query_params.get('search', '').strip()
        if search:
            queryset = queryset.filter(customer_name__icontains=search)
        names = queryset.order_by('customer_name').values_list('customer_name', flat=True).distinct()
        return Response(list(names))

from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAdminRole, ReadOnly
from core.utils import parse_date_param, str_to_bool
from .models import InventoryCost, InventoryItem, QuantityLog, SimpleInventory
from .serializers import (
    InventoryCostSerializer,
    InventoryItemSerializer,
    InventoryUsageSessionSerializer,
    QuantityLogSerializer,
    SimpleInventorySerializer,
    StockUsageSerializer,
    UsageSessionCloseSerializer,
    UsageSessionInputSerializer,
)
from .services import InventoryService, UsageSessionService

ADMIN_WRITES = [permissions.IsAuthenticated, ReadOnly | IsAdminRole]


class DeleteWithMessageMixin:
    delete_message = 'Deleted successfully'

    def destroy(self, request, *args, **kwargs):
        self.perform_destroy(self.get_object())
        return Response({'success': True, 'message': self.delete_message}, status=status.HTTP_200_OK)


# ---------------------------
# Inventory costs
# ---------------------------
class InventoryCostListCreateAPIView(generics.ListCreateAPIView):
    serializer_class = InventoryCostSerializer
    permission_classes = ADMIN_WRITES

    def get_queryset(self):
        queryset = InventoryCost.objects.all()
        category = self.request.query_params.get('category')
        if category:
            queryset = queryset.filter(category=category.upper())
        return queryset.order_by('category', 'item_name')


class InventoryCostRetrieveUpdateDestroyAPIView(DeleteWithMessageMixin, generics.RetrieveUpdateDestroyAPIView):
    queryset = InventoryCost.objects.all()
    serializer_class = InventoryCostSerializer
    permission_classes = ADMIN_WRITES
    http_method_names = ['get', 'patch', 'delete', 'head', 'options']
    delete_message = 'Inventory cost deleted successfully'


# ---------------------------
# Cost-linked inventory items
# ---------------------------
class InventoryItemListCreateAPIView(generics.ListCreateAPIView):
    serializer_class = InventoryItemSerializer
    permission_classes = ADMIN_WRITES

    def get_queryset(self):
        return InventoryItem.objects.select_related('cost_item').order_by(
            'cost_item__category', 'cost_item__item_name'
        )


class InventoryItemRetrieveUpdateDestroyAPIView(DeleteWithMessageMixin, generics.RetrieveUpdateDestroyAPIView):
    queryset = InventoryItem.objects.select_related('cost_item')
    serializer_class = InventoryItemSerializer
    permission_classes = ADMIN_WRITES
    http_method_names = ['get', 'patch', 'delete', 'head', 'options']
    delete_message = 'Inventory item deleted successfully'


# ---------------------------
# Simple inventory
# ---------------------------
class SimpleInventoryListCreateAPIView(generics.ListCreateAPIView):
    serializer_class = SimpleInventorySerializer
    permission_classes = ADMIN_WRITES

    def get_queryset(self):
        queryset = SimpleInventory.objects.prefetch_related('quantity_logs')
        category = self.request.query_params.get('category')
        if category:
            queryset = queryset.filter(category=category.upper())
        return queryset.order_by('category', 'item_name')

    def list(self, request, *args, **kwargs):
        response = super().list(request, *args, **kwargs)
        if str_to_bool(request.query_params.get('low_stock', False)):
            response.data = [item for item in response.data if item['is_low_stock']]
        return response


class SimpleInventoryRetrieveUpdateDestroyAPIView(DeleteWithMessageMixin, generics.RetrieveUpdateDestroyAPIView):
    queryset = SimpleInventory.objects.all()
    serializer_class = SimpleInventorySerializer
    permission_classes = ADMIN_WRITES
    http_method_names = ['get', 'patch', 'delete', 'head', 'options']
    delete_message = 'Inventory item deleted successfully'


class SimpleInventoryUsageAPIView(APIView):
    """Record consumption of a simple inventory item (any staff member)."""
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, pk):
        item = get_object_or_404(SimpleInventory, pk=pk)
        serializer = StockUsageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        InventoryService.record_usage(
            item,
            serializer.validated_data['quantity'],
            notes=serializer.validated_data.get('notes') or None,
        )
        item.refresh_from_db()
        return Response(SimpleInventorySerializer(item).data)


class SimpleInventoryLogListAPIView(generics.ListAPIView):
    serializer_class = QuantityLogSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        item = get_object_or_404(SimpleInventory, pk=self.kwargs['pk'])
        return QuantityLog.objects.filter(simple_inventory=item).order_by('-created_at')


# ---------------------------
# Daily usage sessions
# ---------------------------
class InventoryUsageAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        date = parse_date_param(request.query_params.get('date'), 'date', default=timezone.localdate())
        session = UsageSessionService.get_session(date)
        return Response({
            'success': True,
            'data': InventoryUsageSessionSerializer(session).data if session else None,
        })

    def post(self, request):
        serializer = UsageSessionInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        session = UsageSessionService.save_session(
            data['date'],
            data['entries'],
            notes=data.get('notes'),
        )
        return Response({
            'success': True,
            'data': InventoryUsageSessionSerializer(session).data,
            'message': 'Usage session saved',
        })


class InventoryUsageCloseAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        serializer = UsageSessionCloseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        session = UsageSessionService.close_session(serializer.validated_data['date'])
        return Response({
            'success': True,
            'data': InventoryUsageSessionSerializer(session).data,
            'message': 'Usage session closed successfully',
        })

import logging

from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from inventory.models import (
    InventoryCost,
    InventoryItem,
    InventoryUsageEntry,
    InventoryUsageSession,
    QuantityLog,
    SimpleInventory,
)
from labels.layout import get_effective_label_config
from labels.models import LabelSettings
from pos.models import Order
from pos.services import OrderService
from raffle.models import RaffleParticipant
from .exceptions import InvalidAdminPassword
from .permissions import IsAdminRole, ReadOnly
from .serializers import (
    AdminResetSerializer,
    DefaultLabelConfigSerializer,
    ExtraPricingSerializer,
    WaitTimeThresholdsSerializer,
)
from .services import DEFAULT_LABEL_CONFIG_KEY, SettingsService

logger = logging.getLogger(__name__)


class ExtraPricingAPIView(APIView):
    """
    GET /api/settings/extra-pricing - public, used by the order form
    POST /api/settings/extra-pricing - admin only
    """

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated(), IsAdminRole()]

    def get(self, request):
        return Response(SettingsService.get_extra_pricing().as_dict())

    def post(self, request):
        serializer = ExtraPricingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        pricing = SettingsService.set_extra_pricing(**serializer.validated_data)
        logger.info(
            "Extra pricing updated by %s: shot %s, foam %s",
            request.user.username, pricing.extra_shot_price, pricing.cold_foam_price,
        )
        return Response({
            'success': True,
            'data': pricing.as_dict(),
            'message': 'Extra pricing updated successfully',
        })


class WaitTimeThresholdsAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated, ReadOnly | IsAdminRole]

    def get(self, request):
        return Response(SettingsService.get_wait_time_thresholds())

    def post(self, request):
        serializer = WaitTimeThresholdsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        thresholds = SettingsService.set_wait_time_thresholds(
            serializer.validated_data['yellow_threshold'],
            serializer.validated_data['red_threshold'],
        )
        return Response({
            'success': True,
            'data': thresholds,
            'message': 'Wait time thresholds updated successfully',
        })


class DefaultLabelConfigAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated, ReadOnly | IsAdminRole]

    def get(self, request):
        return Response({
            'label_config_id': SettingsService.get(DEFAULT_LABEL_CONFIG_KEY),
            'config': get_effective_label_config(),
        })

    def post(self, request):
        serializer = DefaultLabelConfigSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        label_settings = get_object_or_404(LabelSettings, pk=serializer.validated_data['label_config_id'])
        SettingsService.set(DEFAULT_LABEL_CONFIG_KEY, str(label_settings.pk))
        return Response({
            'success': True,
            'data': {'label_config_id': str(label_settings.pk), 'config': label_settings.as_layout()},
            'message': f"Default label configuration set to {label_settings.name}",
        })

    def delete(self, request):
        SettingsService.delete(DEFAULT_LABEL_CONFIG_KEY)
        return Response({
            'success': True,
            'data': {'label_config_id': None, 'config': get_effective_label_config()},
            'message': 'Default label configuration cleared',
        })


class AdminResetAPIView(APIView):
    """
    POST /api/admin/reset - wipe operational data

    Body: {password, reset_orders, reset_inventory, reset_raffle}. The password
    must be the calling admin's own.
    """
    permission_classes = [permissions.IsAuthenticated, IsAdminRole]

    def post(self, request):
        serializer = AdminResetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if not request.user.check_password(data['password']):
            logger.warning("Admin reset rejected for %s: wrong password", request.user.username)
            raise InvalidAdminPassword()

        deleted = {}
        with transaction.atomic():
            if data['reset_orders']:
                deleted['orders'], _ = Order.objects.all().delete()
                OrderService.reset_order_numbers()
            if data['reset_inventory']:
                deleted['inventory'] = {
                    'usage_entries': InventoryUsageEntry.objects.all().delete()[0],
                    'usage_sessions': InventoryUsageSession.objects.all().delete()[0],
                    'quantity_logs': QuantityLog.objects.all().delete()[0],
                    'simple_inventory': SimpleInventory.objects.all().delete()[0],
                    'inventory_items': InventoryItem.objects.all().delete()[0],
                    'inventory_costs': InventoryCost.objects.all().delete()[0],
                }
            if data['reset_raffle']:
                deleted['raffle_participants'], _ = RaffleParticipant.objects.all().delete()

        logger.warning("Admin reset by %s: %s", request.user.username, deleted)
        return Response({
            'success': True,
            'data': {'deleted': deleted},
            'message': 'Selected data has been reset',
        })

from collections import defaultdict

from rest_framework import generics, permissions
from rest_framework.response import Response

from core.permissions import IsAdminRole, ReadOnly
from core.utils import str_to_bool
from .models import MenuConfig
from .serializers import MenuConfigSerializer


class MenuConfigListCreateAPIView(generics.ListCreateAPIView):
    serializer_class = MenuConfigSerializer
    permission_classes = [permissions.IsAuthenticated, ReadOnly | IsAdminRole]

    def get_queryset(self):
        queryset = MenuConfig.objects.all()
        item_type = self.request.query_params.get('item_type')
        if item_type:
            queryset = queryset.filter(item_type=item_type.upper())
        return queryset.order_by('item_type', 'item_name')

    def list(self, request, *args, **kwargs):
        if not str_to_bool(request.query_params.get('grouped', False)):
            return super().list(request, *args, **kwargs)

        grouped = defaultdict(list)
        for item in self.get_serializer(self.get_queryset(), many=True).data:
            grouped[item['item_type']].append(item)
        return Response({item_type: grouped.get(item_type, []) for item_type, _ in MenuConfig.ITEM_TYPE_CHOICES})


class MenuConfigRetrieveUpdateDestroyAPIView(generics.RetrieveUpdateDestroyAPIView):
    queryset = MenuConfig.objects.all()
    serializer_class = MenuConfigSerializer
    permission_classes = [permissions.IsAuthenticated, ReadOnly | IsAdminRole]
    lookup_field = 'pk'
    http_method_names = ['get', 'patch', 'delete', 'head', 'options']

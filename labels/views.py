import logging

from django.http import HttpResponse
from django.shortcuts import get_object_or_404
from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAdminRole, ReadOnly
from core.renderers import EnvelopeJSONRenderer, PDFRenderer
from core.services import DEFAULT_LABEL_CONFIG_KEY, SettingsService
from pos.models import Order
from .layout import default_label_config, get_effective_label_config
from .models import LabelSettings
from .rendering import LabelOrder, render_label_pdf
from .serializers import LabelPreviewSerializer, LabelSettingsSerializer

logger = logging.getLogger(__name__)


def pdf_response(content, filename):
    response = HttpResponse(content, content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


class LabelSettingsListCreateAPIView(generics.ListCreateAPIView):
    queryset = LabelSettings.objects.all()
    serializer_class = LabelSettingsSerializer
    permission_classes = [permissions.IsAuthenticated, ReadOnly | IsAdminRole]


class LabelSettingsRetrieveUpdateDestroyAPIView(generics.RetrieveUpdateDestroyAPIView):
    queryset = LabelSettings.objects.all()
    serializer_class = LabelSettingsSerializer
    permission_classes = [permissions.IsAuthenticated, ReadOnly | IsAdminRole]
    http_method_names = ['get', 'patch', 'delete', 'head', 'options']

    def destroy(self, request, *args, **kwargs):
        label_settings = self.get_object()
        if SettingsService.get(DEFAULT_LABEL_CONFIG_KEY) == str(label_settings.pk):
            SettingsService.delete(DEFAULT_LABEL_CONFIG_KEY)
            logger.info("Cleared default label config %s before deleting it", label_settings.pk)
        label_settings.delete()
        return Response(
            {'success': True, 'message': 'Label settings deleted successfully'},
            status=status.HTTP_200_OK,
        )


class OrderLabelAPIView(APIView):
    """GET /api/orders/{id}/label?config=<label settings id> - printable PDF label"""
    permission_classes = [permissions.IsAuthenticated]
    renderer_classes = [EnvelopeJSONRenderer, PDFRenderer]

    def get(self, request, pk):
        order = get_object_or_404(Order, pk=pk)
        layout = get_effective_label_config(request.query_params.get('config'))
        content = render_label_pdf(layout, LabelOrder.from_order(order), title=f"Order #{order.order_number}")
        logger.info("Rendered label for order #%s with layout %s", order.order_number, layout['name'])
        return pdf_response(content, f"order-{order.order_number}-label.pdf")


class LabelPreviewAPIView(APIView):
    """POST /api/orders/preview/label - render a sample order with a saved or unsaved layout"""
    permission_classes = [permissions.IsAuthenticated]
    renderer_classes = [EnvelopeJSONRenderer, PDFRenderer]

    def post(self, request):
        serializer = LabelPreviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        layout = serializer.validated_data.get('label_settings')
        if layout:
            layout = {
                **default_label_config(),
                **layout,
                'elements': [dict(element) for element in layout['elements']],
            }
        else:
            layout = get_effective_label_config()

        order = LabelOrder(**serializer.validated_data['order'])
        content = render_label_pdf(layout, order, title='Label Preview')
        return pdf_response(content, 'label-preview.pdf')

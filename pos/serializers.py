from rest_framework import serializers
from .models import Order


class OrderSerializer(serializers.ModelSerializer):
    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'customer_name', 'drink', 'milk', 'syrup', 'foam',
            'temperature', 'extra_shots', 'notes', 'price', 'status',
            'created_at', 'updated_at', 'started_at', 'completed_at',
        ]
        read_only_fields = fields


class OrderCreateSerializer(serializers.Serializer):
    """Input for a new order; price and number are derived server-side."""
    customer_name = serializers.CharField(max_length=255)
    drink = serializers.CharField(max_length=100)
    milk = serializers.CharField(max_length=100)
    temperature = serializers.CharField(max_length=50)
    syrup = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    foam = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    extra_shots = serializers.IntegerField(required=False, default=0, min_value=0)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, data):
        # Blank optional choices are stored as NULL
        for field in ('syrup', 'foam', 'notes'):
            value = data.get(field)
            data[field] = value.strip() if value and value.strip() else None
        return data


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.CharField()

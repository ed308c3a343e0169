from rest_framework import serializers
from .models import MenuConfig


class MenuConfigSerializer(serializers.ModelSerializer):
    price = serializers.DecimalField(max_digits=8, decimal_places=2, required=False, allow_null=True, min_value=0)

    class Meta:
        model = MenuConfig
        fields = ['id', 'item_type', 'item_name', 'price', 'created_at', 'updated_at']
        read_only_fields = ('id', 'created_at', 'updated_at')

    def validate_item_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Item name cannot be blank.")
        return value

    def to_internal_value(self, data):
        # Blank prices from the menu form mean "no price"
        if hasattr(data, 'get') and data.get('price') == '':
            data = data.copy()
            data['price'] = None
        return super().to_internal_value(data)

from django.db import transaction
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from core.utils import quantize_money

from .models import (
    InventoryCost,
    InventoryItem,
    InventoryUsageEntry,
    InventoryUsageSession,
    QuantityLog,
    SimpleInventory,
)
from .services import InventoryService

QUANTITY_FIELD_KWARGS = {'max_digits': 10, 'decimal_places': 2, 'min_value': 0}


class QuantityLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = QuantityLog
        fields = [
            'id', 'simple_inventory', 'inventory_item', 'previous_quantity', 'new_quantity',
            'change_amount', 'change_type', 'notes', 'created_at',
        ]
        read_only_fields = fields


class InventoryCostSerializer(serializers.ModelSerializer):
    class Meta:
        model = InventoryCost
        fields = ['id', 'item_name', 'category', 'unit_cost', 'unit', 'notes', 'created_at', 'updated_at']
        read_only_fields = ('id', 'created_at', 'updated_at')

    def validate_item_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Item name cannot be blank.")
        return value

    def validate_unit_cost(self, value):
        """Validate unit cost is positive"""
        if value <= 0:
            raise serializers.ValidationError("Unit cost must be greater than zero.")
        return value


class SimpleInventorySerializer(serializers.ModelSerializer):
    initial_quantity = serializers.DecimalField(required=False, default=0, **QUANTITY_FIELD_KWARGS)
    current_stock = serializers.DecimalField(required=False, **QUANTITY_FIELD_KWARGS)
    reorder_level = serializers.DecimalField(required=False, allow_null=True, **QUANTITY_FIELD_KWARGS)
    is_low_stock = serializers.BooleanField(read_only=True)
    recent_logs = serializers.SerializerMethodField()

    class Meta:
        model = SimpleInventory
        fields = [
            'id', 'item_name', 'category', 'initial_quantity', 'current_stock', 'unit',
            'reorder_level', 'notes', 'is_low_stock', 'recent_logs', 'created_at', 'updated_at',
        ]
        read_only_fields = ('id', 'created_at', 'updated_at')
        # Duplicate names are checked in validate() with a friendlier message
        validators = []

    def get_recent_logs(self, obj):
        logs = obj.quantity_logs.order_by('-created_at')[:5]
        return QuantityLogSerializer(logs, many=True).data

    def validate_item_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Item name cannot be blank.")
        return value

    def validate(self, data):
        item_name = data.get('item_name', getattr(self.instance, 'item_name', None))
        category = data.get('category', getattr(self.instance, 'category', None))
        duplicates = SimpleInventory.objects.filter(item_name__iexact=item_name, category=category)
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise serializers.ValidationError(
                {'item_name': f"An item named '{item_name}' already exists in this category."}
            )
        return data

    def create(self, validated_data):
        validated_data.setdefault('current_stock', validated_data.get('initial_quantity', 0))
        with transaction.atomic():
            item = SimpleInventory.objects.create(**validated_data)
            InventoryService.log_initial_stock(item)
        return item

    def update(self, instance, validated_data):
        new_stock = validated_data.pop('current_stock', None)
        with transaction.atomic():
            instance = super().update(instance, validated_data)
            if new_stock is not None:
                InventoryService.adjust_stock(instance, new_stock)
        return instance


class StockUsageSerializer(serializers.Serializer):
    quantity = serializers.DecimalField(max_digits=10, decimal_places=2)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class InventoryItemSerializer(serializers.ModelSerializer):
    cost_item = serializers.PrimaryKeyRelatedField(
        queryset=InventoryCost.objects.all(),
        validators=[UniqueValidator(
            queryset=InventoryItem.objects.all(),
            message="An inventory item already exists for this cost item.",
        )],
    )
    cost_item_detail = InventoryCostSerializer(source='cost_item', read_only=True)
    initial_quantity = serializers.DecimalField(required=False, default=0, **QUANTITY_FIELD_KWARGS)
    current_stock = serializers.DecimalField(required=False, **QUANTITY_FIELD_KWARGS)
    reorder_level = serializers.DecimalField(required=False, allow_null=True, **QUANTITY_FIELD_KWARGS)
    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = InventoryItem
        fields = [
            'id', 'cost_item', 'cost_item_detail', 'initial_quantity', 'current_stock',
            'reorder_level', 'last_restocked', 'total_cost', 'is_low_stock', 'created_at', 'updated_at',
        ]
        read_only_fields = ('id', 'last_restocked', 'total_cost', 'created_at', 'updated_at')

    def create(self, validated_data):
        validated_data.setdefault('current_stock', validated_data.get('initial_quantity', 0))
        cost_item = validated_data['cost_item']
        validated_data['total_cost'] = quantize_money(cost_item.unit_cost * validated_data['initial_quantity'])
        with transaction.atomic():
            item = InventoryItem.objects.create(**validated_data)
            InventoryService.log_initial_stock(item)
        return item

    def update(self, instance, validated_data):
        new_stock = validated_data.pop('current_stock', None)
        with transaction.atomic():
            instance = super().update(instance, validated_data)
            if 'initial_quantity' in validated_data or 'cost_item' in validated_data:
                instance.total_cost = quantize_money(instance.cost_item.unit_cost * instance.initial_quantity)
                instance.save(update_fields=['total_cost', 'updated_at'])
            if new_stock is not None:
                InventoryService.adjust_stock(instance, new_stock)
        return instance


class InventoryUsageEntrySerializer(serializers.ModelSerializer):
    item_name = serializers.CharField(source='item.item_name', read_only=True)
    unit = serializers.CharField(source='item.unit', read_only=True)
    category = serializers.CharField(source='item.category', read_only=True)

    class Meta:
        model = InventoryUsageEntry
        fields = [
            'id', 'item', 'item_name', 'unit', 'category', 'starting_quantity',
            'ending_quantity', 'used_quantity', 'notes', 'updated_at',
        ]
        read_only_fields = fields


class InventoryUsageSessionSerializer(serializers.ModelSerializer):
    entries = InventoryUsageEntrySerializer(many=True, read_only=True)

    class Meta:
        model = InventoryUsageSession
        fields = ['id', 'date', 'is_active', 'notes', 'closed_at', 'entries', 'created_at', 'updated_at']
        read_only_fields = fields


class UsageEntryInputSerializer(serializers.Serializer):
    item = serializers.PrimaryKeyRelatedField(queryset=SimpleInventory.objects.all())
    starting_quantity = serializers.DecimalField(**QUANTITY_FIELD_KWARGS)
    ending_quantity = serializers.DecimalField(required=False, allow_null=True, **QUANTITY_FIELD_KWARGS)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class UsageSessionInputSerializer(serializers.Serializer):
    date = serializers.DateField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    entries = UsageEntryInputSerializer(many=True)

    def validate_entries(self, value):
        item_ids = [entry['item'].pk for entry in value]
        if len(item_ids) != len(set(item_ids)):
            raise serializers.ValidationError("Each item may only appear once per session.")
        return value


class UsageSessionCloseSerializer(serializers.Serializer):
    date = serializers.DateField()

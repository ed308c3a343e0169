import uuid

from rest_framework import serializers

from .layout import ALIGNMENTS, ELEMENT_TYPES, FONT_STYLES, FONT_WEIGHTS
from .models import LabelSettings


class LabelElementSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=50)
    type = serializers.ChoiceField(choices=ELEMENT_TYPES)
    x = serializers.FloatField(min_value=0)
    y = serializers.FloatField(min_value=0)
    fontSize = serializers.FloatField(min_value=1, max_value=72)
    fontWeight = serializers.ChoiceField(choices=FONT_WEIGHTS, default='normal')
    fontStyle = serializers.ChoiceField(choices=FONT_STYLES, default='normal')
    align = serializers.ChoiceField(choices=ALIGNMENTS, default='left')
    maxWidth = serializers.FloatField(required=False, allow_null=True, min_value=1)
    maxLines = serializers.IntegerField(required=False, allow_null=True, min_value=1)

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        # Keep the stored JSON free of explicit nulls
        return {key: item for key, item in value.items() if item is not None}


def validate_unique_element_ids(elements):
    ids = [element['id'] for element in elements]
    duplicates = sorted({element_id for element_id in ids if ids.count(element_id) > 1})
    if duplicates:
        raise serializers.ValidationError(f"Duplicate element ids: {', '.join(duplicates)}.")
    return elements


class LabelSettingsSerializer(serializers.ModelSerializer):
    width = serializers.FloatField(min_value=0.1)
    height = serializers.FloatField(min_value=0.1)
    elements = LabelElementSerializer(many=True)

    class Meta:
        model = LabelSettings
        fields = ['id', 'name', 'width', 'height', 'elements', 'created_at', 'updated_at']
        read_only_fields = ('id', 'created_at', 'updated_at')

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required.")
        return value

    def validate_elements(self, value):
        return validate_unique_element_ids(value)

    def create(self, validated_data):
        validated_data['elements'] = [dict(element) for element in validated_data['elements']]
        return super().create(validated_data)

    def update(self, instance, validated_data):
        if 'elements' in validated_data:
            validated_data['elements'] = [dict(element) for element in validated_data['elements']]
        return super().update(instance, validated_data)


class LabelLayoutSerializer(serializers.Serializer):
    """Unsaved layout sent with a preview request."""
    name = serializers.CharField(required=False, allow_blank=True)
    width = serializers.FloatField(min_value=0.1)
    height = serializers.FloatField(min_value=0.1)
    elements = LabelElementSerializer(many=True)

    def validate_elements(self, value):
        return validate_unique_element_ids(value)


class PreviewOrderSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, default=lambda: str(uuid.uuid4()))
    order_number = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    customer_name = serializers.CharField(max_length=255)
    drink = serializers.CharField(max_length=100)
    milk = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    syrup = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    foam = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    temperature = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    extra_shots = serializers.IntegerField(required=False, default=0, min_value=0)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price = serializers.DecimalField(max_digits=8, decimal_places=2, required=False, allow_null=True)


class LabelPreviewSerializer(serializers.Serializer):
    order = PreviewOrderSerializer()
    label_settings = LabelLayoutSerializer(required=False, allow_null=True)

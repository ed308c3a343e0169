from rest_framework import serializers


class ExtraPricingSerializer(serializers.Serializer):
    extra_shot_price = serializers.DecimalField(max_digits=6, decimal_places=4, min_value=0, max_value=10)
    cold_foam_price = serializers.DecimalField(max_digits=6, decimal_places=4, min_value=0, max_value=10)
    premium_foam_options = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False, allow_empty=True
    )

    def validate_premium_foam_options(self, value):
        cleaned = []
        for name in value:
            if name and name.casefold() not in {existing.casefold() for existing in cleaned}:
                cleaned.append(name)
        return cleaned


class WaitTimeThresholdsSerializer(serializers.Serializer):
    yellow_threshold = serializers.IntegerField(min_value=1)
    red_threshold = serializers.IntegerField(min_value=1)

    def validate(self, data):
        if data['yellow_threshold'] >= data['red_threshold']:
            raise serializers.ValidationError("Yellow threshold must be less than red threshold.")
        return data


class DefaultLabelConfigSerializer(serializers.Serializer):
    label_config_id = serializers.UUIDField()


class AdminResetSerializer(serializers.Serializer):
    password = serializers.CharField(trim_whitespace=False)
    reset_orders = serializers.BooleanField(default=False)
    reset_inventory = serializers.BooleanField(default=False)
    reset_raffle = serializers.BooleanField(default=False)

    def validate(self, data):
        if not (data['reset_orders'] or data['reset_inventory'] or data['reset_raffle']):
            raise serializers.ValidationError("Select at least one group of data to reset.")
        return data

from rest_framework import serializers
from .models import RaffleParticipant


class RaffleParticipantSerializer(serializers.ModelSerializer):
    class Meta:
        model = RaffleParticipant
        fields = ['id', 'customer_name', 'phone_number', 'entries', 'has_won', 'created_at', 'updated_at']
        read_only_fields = fields


class RaffleJoinSerializer(serializers.Serializer):
    customer_name = serializers.CharField(max_length=255)
    phone_number = serializers.CharField(max_length=30)

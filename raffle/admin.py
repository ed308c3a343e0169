from django.contrib import admin
from .models import RaffleParticipant


@admin.register(RaffleParticipant)
class RaffleParticipantAdmin(admin.ModelAdmin):
    list_display = ['customer_name', 'phone_number', 'entries', 'has_won', 'created_at']
    list_filter = ['has_won']
    search_fields = ['customer_name', 'phone_number']

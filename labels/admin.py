from django.contrib import admin
from .models import LabelSettings


@admin.register(LabelSettings)
class LabelSettingsAdmin(admin.ModelAdmin):
    list_display = ['name', 'width', 'height', 'updated_at']
    search_fields = ['name']

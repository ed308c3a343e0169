from django.contrib import admin
from .models import MenuConfig


@admin.register(MenuConfig)
class MenuConfigAdmin(admin.ModelAdmin):
    list_display = ['item_type', 'item_name', 'price', 'updated_at']
    list_filter = ['item_type']
    search_fields = ['item_name']

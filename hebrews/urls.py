"""
URL configuration for the hebrews project.

Every API lives under /api/; each app owns its own urls module.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/', include('accounts.urls')),  # Auth + user management
    path('api/', include('core.urls')),      # Settings + admin reset
    path('api/', include('menu.urls')),
    path('api/', include('labels.urls')),    # Label settings + order labels
    path('api/', include('pos.urls')),       # Orders + customers
    path('api/', include('inventory.urls')),
    path('api/', include('reporting.urls')), # Analytics + export
    path('api/', include('raffle.urls')),
]

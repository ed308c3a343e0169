from django.urls import path
from .views import MenuConfigListCreateAPIView, MenuConfigRetrieveUpdateDestroyAPIView

urlpatterns = [
    path('menu', MenuConfigListCreateAPIView.as_view(), name='menu-list-create'),
    path('menu/<uuid:pk>', MenuConfigRetrieveUpdateDestroyAPIView.as_view(), name='menu-detail'),
]

from django.urls import path
from .views import RaffleDrawAPIView, RaffleParticipantsAPIView, RaffleResetAPIView

urlpatterns = [
    path('raffle/participants', RaffleParticipantsAPIView.as_view(), name='raffle-participants'),
    path('raffle/draw', RaffleDrawAPIView.as_view(), name='raffle-draw'),
    path('raffle/reset', RaffleResetAPIView.as_view(), name='raffle-reset'),
]

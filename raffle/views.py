from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAdminRole
from core.utils import str_to_bool
from .models import RaffleParticipant
from .serializers import RaffleJoinSerializer, RaffleParticipantSerializer
from .services import RaffleService


class RaffleParticipantsAPIView(APIView):
    """
    GET /api/raffle/participants?eligible=true - list participants
    POST /api/raffle/participants - join (or refresh entries for) the giveaway
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        queryset = RaffleParticipant.objects.all()
        if str_to_bool(request.query_params.get('eligible', False)):
            queryset = queryset.filter(has_won=False)
        return Response(RaffleParticipantSerializer(queryset, many=True).data)

    def post(self, request):
        serializer = RaffleJoinSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        participant, created = RaffleService.join(**serializer.validated_data)
        return Response(
            {
                'success': True,
                'data': RaffleParticipantSerializer(participant).data,
                'message': 'Successfully joined the giveaway!',
            },
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class RaffleDrawAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsAdminRole]

    def post(self, request):
        winner = RaffleService.draw_winner()
        return Response({
            'success': True,
            'data': RaffleParticipantSerializer(winner).data,
            'message': f"Congratulations to {winner.customer_name}!",
        })


class RaffleResetAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsAdminRole]

    def post(self, request):
        count = RaffleService.reset_winners()
        return Response({
            'success': True,
            'data': {'reset_count': count},
            'message': f"Reset {count} previous winners back to eligible status",
        })

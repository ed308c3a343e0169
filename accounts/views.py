import logging

from django.contrib.auth import login, logout
from rest_framework import permissions, status, viewsets
from rest_framework.exceptions import AuthenticationFailed, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAdminRole
from .models import User
from .serializers import LoginSerializer, UserSerializer

logger = logging.getLogger(__name__)


class LoginView(APIView):
    """Username/password login that starts a Django session."""
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']

        if user is None or not user.is_active:
            logger.warning("Failed login for username=%s", request.data.get('username'))
            raise AuthenticationFailed('Invalid username or password.')

        login(request, user)
        logger.info("User %s logged in", user.username)
        return Response({
            'success': True,
            'data': UserSerializer(user).data,
            'message': 'Logged in successfully',
        })


class LogoutView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        logout(request)
        return Response({'success': True, 'message': 'Logged out successfully'})


class MeView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)


class UserViewSet(viewsets.ModelViewSet):
    """User management, restricted to admins."""
    queryset = User.objects.all().order_by('username')
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminRole]

    def perform_create(self, serializer):
        user = serializer.save()
        logger.info("User %s created by %s", user.username, self.request.user.username)

    def perform_destroy(self, instance):
        if instance.pk == self.request.user.pk:
            raise ValidationError({'detail': 'You cannot delete your own account.'})
        logger.info("User %s deleted by %s", instance.username, self.request.user.username)
        instance.delete()

    def destroy(self, request, *args, **kwargs):
        super().destroy(request, *args, **kwargs)
        return Response({'success': True, 'message': 'User deleted successfully'}, status=status.HTTP_200_OK)

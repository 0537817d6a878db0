from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenObtainPairView
from django.db import connection, DatabaseError
from django.utils import timezone
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
import logging

from restaurant_api.responses import api_response
from .serializers import UserSerializer, LoginSerializer

logger = logging.getLogger(__name__)


class CustomTokenObtainPairView(TokenObtainPairView):
    """
    JWT authentication endpoint.

    Authenticate with email and password; returns an access/refresh pair and
    the user's profile.
    """
    serializer_class = LoginSerializer


@swagger_auto_schema(
    method='get',
    operation_description="Return the authenticated user",
    responses={200: UserSerializer, 401: 'Authentication required'}
)
@api_view(['GET'])
@permission_classes([permissions.IsAuthenticated])
def current_user(request):
    return api_response(UserSerializer(request.user).data)


@swagger_auto_schema(
    method='get',
    operation_description="Check service health",
    responses={
        200: openapi.Schema(
            type=openapi.TYPE_OBJECT,
            properties={
                'status': openapi.Schema(type=openapi.TYPE_STRING),
                'timestamp': openapi.Schema(type=openapi.TYPE_STRING),
                'database': openapi.Schema(type=openapi.TYPE_STRING),
            }
        ),
        503: 'Database unavailable'
    }
)
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health_check(request):
    try:
        # Test database connection
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.error(f"Health check failed: {e}")
        return Response({
            'status': 'unhealthy',
            'timestamp': timezone.now().isoformat(),
            'database': 'disconnected',
        }, status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return Response({
        'status': 'healthy',
        'timestamp': timezone.now().isoformat(),
        'database': 'connected',
    })

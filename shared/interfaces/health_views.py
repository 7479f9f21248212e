"""
Health check views.
"""
import logging

from django.core.cache import cache
from django.db import DatabaseError, connection
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from .responses import success_response

logger = logging.getLogger(__name__)


@extend_schema(tags=['Health'])
class PingView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Liveness check")
    def get(self, request):
        return success_response(
            {'timestamp': timezone.now().isoformat()},
            message="pong",
        )


@extend_schema(tags=['Health'])
class ReadinessCheckView(APIView):
    """Readiness probe - checks the database and the cache."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Readiness check")
    def get(self, request):
        checks = {
            'database': self._check_database(),
            'cache': self._check_cache(),
        }

        all_healthy = all(check['healthy'] for check in checks.values())
        status_code = status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

        return success_response(
            {'checks': checks},
            message='ready' if all_healthy else 'not_ready',
            status_code=status_code,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except DatabaseError as e:
            logger.warning(f"Database readiness check failed: {e}")
            return {'healthy': False, 'error': str(e)}

    def _check_cache(self):
        try:
            cache.set('health_check', 'ok', 10)
            value = cache.get('health_check')
            return {'healthy': value == 'ok'}
        except Exception as e:
            logger.warning(f"Cache readiness check failed: {e}")
            return {'healthy': False, 'error': str(e)}

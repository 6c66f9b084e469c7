import time

from django.conf import settings
from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _db_check(alias='default'):
    started = time.monotonic()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute('SELECT 1')
    except OperationalError as e:
        logger.warning('Database health check failed', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:
        logger.error(
            'Database health check failed unexpectedly',
            alias=alias,
            error=str(e),
            exception=e.__class__.__name__,
        )
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}
    latency = round((time.monotonic() - started) * 1000, 2)
    logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
    return {'status': 'ok', 'latency_ms': latency}


def _channel_layer_check():
    layers = getattr(settings, 'CHANNEL_LAYERS', None) or {}
    backend = layers.get('default', {}).get('BACKEND')
    if not backend:
        logger.warning('Channel layer is not configured')
        return {'status': 'fail', 'error': 'CHANNEL_LAYERS not configured'}
    return {'status': 'ok', 'backend': backend.rsplit('.', 1)[-1]}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: the product store is reachable and broadcasts can be published."""
    checks = {
        'database': _db_check(),
        'channels': _channel_layer_check(),
    }
    failing = [name for name, result in checks.items() if result.get('status') == 'fail']
    overall_status = 'degraded' if failing else 'ok'
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(
        {'status': overall_status, 'checks': checks},
        status=503 if failing else 200,
    )

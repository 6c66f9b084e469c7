import json
import unittest
from unittest import mock

from django.test import override_settings

from apps.common import views


class HealthViewsUnitTests(unittest.TestCase):
    def test_live_health_returns_alive_payload(self):
        response = views.live_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'alive')

    @mock.patch('apps.common.views._db_check', return_value={'status': 'ok', 'latency_ms': 1.23})
    def test_ready_health_ok_when_dependencies_pass(self, mock_db_check):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'ok')
        self.assertEqual(payload['checks']['database'], mock_db_check.return_value)
        self.assertEqual(payload['checks']['channels']['status'], 'ok')
        self.assertEqual(payload['checks']['channels']['backend'], 'InMemoryChannelLayer')

    @mock.patch('apps.common.views._db_check', return_value={'status': 'fail', 'error': 'db down'})
    def test_ready_health_degraded_on_database_failure(self, mock_db_check):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 503)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'degraded')
        self.assertEqual(payload['checks']['database'], mock_db_check.return_value)

    @override_settings(CHANNEL_LAYERS={})
    @mock.patch('apps.common.views._db_check', return_value={'status': 'ok', 'latency_ms': 0.5})
    def test_ready_health_degraded_without_channel_layer(self, _mock_db_check):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 503)
        payload = json.loads(response.content)
        self.assertEqual(payload['checks']['channels']['status'], 'fail')


class AppLoggerTests(unittest.TestCase):
    def test_bind_merges_context_into_rendered_message(self):
        log = views.logger.bind(request_id='abc')
        with self.assertLogs('apps.common.views', level='INFO') as captured:
            log.info('Probe', status='ok')
        self.assertEqual(len(captured.records), 1)
        message = captured.records[0].getMessage()
        self.assertTrue(message.startswith('Probe | '))
        self.assertIn('component=common', message)
        self.assertIn('request_id=abc', message)
        self.assertIn('status=ok', message)

    def test_bind_does_not_mutate_parent(self):
        child = views.logger.bind(extra='1')
        self.assertIn('extra', child.context)
        self.assertNotIn('extra', views.logger.context)

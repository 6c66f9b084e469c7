import unittest

from django.conf import settings

from culturacafe.settings import _running_under_pytest


class DatabaseSelectionTests(unittest.TestCase):
    def test_module_invocation_is_detected(self):
        argv = ['/usr/lib/python3/site-packages/pytest/__main__.py', 'backend']
        self.assertTrue(_running_under_pytest(argv=argv, modules={'pytest': object()}, environ={}))

    def test_loaded_pytest_module_is_enough(self):
        self.assertTrue(_running_under_pytest(argv=['-m'], modules={'pytest': object()}, environ={}))

    def test_pytest_executable_is_detected(self):
        self.assertTrue(_running_under_pytest(argv=['/venv/bin/pytest'], modules={}, environ={}))

    def test_server_process_is_not_a_test_run(self):
        self.assertFalse(
            _running_under_pytest(argv=['manage.py', 'runserver'], modules={}, environ={})
        )

    def test_suite_runs_on_sqlite(self):
        self.assertEqual(settings.DATABASES['default']['ENGINE'], 'django.db.backends.sqlite3')

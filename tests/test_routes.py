import os
import unittest
from unittest.mock import patch

from flask_app import create_app
from tz_bridge.models import BridgeSettings


class TimezoneRoutesTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = create_app('testing', settings=BridgeSettings(strategies=('tzlocal',)))

    def setUp(self):
        self.client = self.app.test_client()
        patcher = patch('tz_bridge.timezone_utils.tzlocal')
        self.mock_tzlocal = patcher.start()
        self.addCleanup(patcher.stop)
        self.mock_tzlocal.get_localzone_name.return_value = 'Europe/Moscow'

    def test_get_timezone(self):
        response = self.client.get('/timezone')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {'timezone': 'Europe/Moscow'})

    def test_get_timezone_utc_is_canonical(self):
        self.mock_tzlocal.get_localzone_name.return_value = 'Etc/UTC'

        response = self.client.get('/timezone')

        self.assertEqual(response.get_json(), {'timezone': 'UTC'})

    def test_get_timezone_failure_returns_error_payload(self):
        self.mock_tzlocal.reload_localzone.side_effect = RuntimeError('no zone database')

        with patch('builtins.print'):
            response = self.client.get('/timezone')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {'error': 'no zone database'})

    def test_channel_get_time_zone(self):
        response = self.client.post('/channel/schelper/timezone', json={'method': 'getTimeZone'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {'status': 'success', 'result': 'Europe/Moscow'})

    def test_channel_error_envelope(self):
        self.mock_tzlocal.get_localzone_name.return_value = None

        with patch('builtins.print'):
            response = self.client.post('/channel/schelper/timezone', json={'method': 'getTimeZone'})

        self.assertEqual(response.status_code, 500)
        body = response.get_json()
        self.assertEqual(body['status'], 'error')
        self.assertEqual(body['code'], 'error')
        self.assertTrue(body['message'])
        self.assertIsNone(body['details'])

    def test_channel_unknown_method_is_not_implemented(self):
        response = self.client.post('/channel/schelper/timezone', json={'method': 'getFoo'})

        self.assertEqual(response.status_code, 501)
        self.assertEqual(response.get_json(), {'status': 'not_implemented'})

    def test_channel_requires_method(self):
        response = self.client.post('/channel/schelper/timezone', json={'arguments': {}})

        self.assertEqual(response.status_code, 400)

    def test_unknown_channel(self):
        response = self.client.post('/channel/other/channel', json={'method': 'getTimeZone'})

        self.assertEqual(response.status_code, 404)

    def test_unknown_route_is_json_not_found(self):
        response = self.client.get('/time-zone')

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {'error': 'Not found'})

    def test_wrong_method_on_timezone_route(self):
        response = self.client.post('/timezone')

        self.assertEqual(response.status_code, 405)

    def test_health(self):
        response = self.client.get('/health')

        self.assertEqual(response.get_json(), {'status': 'ok'})


class SystemTimezoneRouteTests(unittest.TestCase):
    def setUp(self):
        self.old_tz = os.environ.get('TZ')
        self.app = create_app('testing', settings=BridgeSettings())
        self.client = self.app.test_client()

    def tearDown(self):
        if self.old_tz is None:
            os.environ.pop('TZ', None)
        else:
            os.environ['TZ'] = self.old_tz

    def test_get_timezone_uses_system_configuration(self):
        os.environ['TZ'] = 'Europe/Moscow'

        response = self.client.get('/timezone')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {'timezone': 'Europe/Moscow'})

    def test_production_config_carries_no_secret_key(self):
        app = create_app('production', settings=BridgeSettings())

        self.assertFalse(app.config['DEBUG'])
        self.assertIsNone(app.config['SECRET_KEY'])


if __name__ == '__main__':
    unittest.main()

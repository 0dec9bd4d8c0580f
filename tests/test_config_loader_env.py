import os
import tempfile
import unittest

from tz_bridge.config_loader import ConfigLoader, load_config


class ConfigLoaderEnvTests(unittest.TestCase):
    def setUp(self):
        self.env_keys = [
            'TZ_BRIDGE_CHANNEL',
            'TZ_BRIDGE_STRATEGIES',
            'TZ_BRIDGE_HOST',
            'TZ_BRIDGE_PORT',
        ]
        self.original_env = {k: os.environ.get(k) for k in self.env_keys}
        for key in self.env_keys:
            os.environ.pop(key, None)

    def tearDown(self):
        for key, value in self.original_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value

    def test_defaults_when_nothing_configured(self):
        loader = ConfigLoader(config_file='config-does-not-exist.ini')
        self.assertFalse(loader.load_from_file())

        settings = loader.get_settings()

        self.assertEqual(settings.channel_name, 'schelper/timezone')
        self.assertEqual(settings.strategies, ('tzlocal', 'environment'))
        self.assertEqual(settings.port, 8490)

    def test_env_values_are_parsed(self):
        os.environ['TZ_BRIDGE_CHANNEL'] = 'app/tz'
        os.environ['TZ_BRIDGE_STRATEGIES'] = ' environment , tzlocal '
        os.environ['TZ_BRIDGE_HOST'] = '127.0.0.1'
        os.environ['TZ_BRIDGE_PORT'] = '9000'

        settings = load_config('config-does-not-exist.ini')

        self.assertEqual(settings.channel_name, 'app/tz')
        self.assertEqual(settings.strategies, ('environment', 'tzlocal'))
        self.assertEqual(settings.host, '127.0.0.1')
        self.assertEqual(settings.port, 9000)

    def test_unknown_strategy_is_rejected(self):
        os.environ['TZ_BRIDGE_STRATEGIES'] = 'tzlocal,registry'

        with self.assertRaises(ValueError) as ctx:
            load_config('config-does-not-exist.ini')

        self.assertIn('registry', str(ctx.exception))

    def test_invalid_port_is_rejected(self):
        for value in ('abc', '0', '70000'):
            with self.subTest(port=value):
                os.environ['TZ_BRIDGE_PORT'] = value
                with self.assertRaises(ValueError):
                    load_config('config-does-not-exist.ini')

    def test_config_file_takes_precedence_over_env(self):
        os.environ['TZ_BRIDGE_PORT'] = '9000'
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'config.ini')
            with open(path, 'w') as f:
                f.write('[Bridge]\nstrategies = environment\nport = 8600\n')

            settings = load_config(path)

        self.assertEqual(settings.strategies, ('environment',))
        self.assertEqual(settings.port, 8600)
        self.assertEqual(settings.channel_name, 'schelper/timezone')


if __name__ == '__main__':
    unittest.main()

import os
import tempfile
import unittest
from pathlib import Path

from tzmanager.config_loader import ConfigLoader, load_config
from tzmanager.models import DEFAULT_ZONES, ZoneEntry


class ConfigLoaderEnvTests(unittest.TestCase):
    def setUp(self):
        self.env_keys = [
            'TZMANAGER_STATE_DIR',
            'TZMANAGER_TZUTIL',
        ]
        self.original_env = {k: os.environ.get(k) for k in self.env_keys}
        for key in self.env_keys:
            os.environ.pop(key, None)
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        for key, value in self.original_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        self.tmp.cleanup()

    def _write_ini(self, text):
        path = os.path.join(self.tmp.name, 'config.ini')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def test_defaults_when_nothing_configured(self):
        config = load_config(config_file='config-does-not-exist.ini')

        self.assertEqual(config.tzutil_path, 'tzutil.exe')
        self.assertEqual(config.zones, DEFAULT_ZONES)
        self.assertEqual(config.state_file.name, 'prev_tz.txt')
        self.assertEqual(config.menu_length, 8)

    def test_env_overrides_state_dir_and_tzutil(self):
        os.environ['TZMANAGER_STATE_DIR'] = self.tmp.name
        os.environ['TZMANAGER_TZUTIL'] = 'C:\\tools\\tzutil.exe'

        loader = ConfigLoader(config_file='config-does-not-exist.ini')
        config = loader.get_config()

        self.assertEqual(config.state_file, Path(self.tmp.name) / 'prev_tz.txt')
        self.assertEqual(config.tzutil_path, 'C:\\tools\\tzutil.exe')

    def test_ini_settings_take_precedence_over_env(self):
        os.environ['TZMANAGER_TZUTIL'] = 'from-env.exe'
        path = self._write_ini(
            "[Settings]\n"
            f"state_dir = {self.tmp.name}\n"
            "tzutil_path = from-ini.exe\n"
        )

        config = load_config(path)

        self.assertEqual(config.tzutil_path, 'from-ini.exe')
        self.assertEqual(config.state_file.parent, Path(self.tmp.name))

    def test_zones_section_replaces_builtin_list_in_order(self):
        path = self._write_ini(
            "[Zones]\n"
            "Tokyo Standard Time = Tokyo\n"
            "AUS Eastern Standard Time = Sydney\n"
        )

        config = load_config(path)

        self.assertEqual(config.zones, (
            ZoneEntry('Tokyo Standard Time', 'Tokyo'),
            ZoneEntry('AUS Eastern Standard Time', 'Sydney'),
        ))

    def test_empty_zones_section_is_rejected(self):
        path = self._write_ini("[Zones]\n")

        with self.assertRaises(ValueError):
            load_config(path)

    def test_unparseable_file_is_rejected(self):
        path = self._write_ini("state_dir = no section header\n")

        with self.assertRaises(ValueError):
            load_config(path)


if __name__ == '__main__':
    unittest.main()

# Unit tests for utils/config.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'peek-project'))

from utils import config
from utils.errors import ConfigError


@pytest.fixture
def config_path(temp_dir):
    return os.path.join(temp_dir, 'peekconfig')


class TestLoadSettings:
    # Tests for config.load_settings()

    def test_defaults_without_file(self, config_path):
        settings = config.load_settings(config_path)
        assert settings.timestamp_format == '%Y-%m-%d %H:%M:%S'
        assert settings.utc_as_z is True
        assert settings.strict_trees is False

    def test_reads_file_values(self, config_path):
        with open(config_path, 'w') as f:
            f.write('[display]\ntimestamp_format = %d.%m.%Y %H:%M\nutc_as_z = no\n[objects]\nstrict_trees = yes\n')
        settings = config.load_settings(config_path)
        assert settings.timestamp_format == '%d.%m.%Y %H:%M'
        assert settings.utc_as_z is False
        assert settings.strict_trees is True

    def test_bad_boolean_fails(self, config_path):
        with open(config_path, 'w') as f:
            f.write('[objects]\nstrict_trees = maybe\n')
        with pytest.raises(ConfigError):
            config.load_settings(config_path)


class TestWriteConfig:
    # Tests for config.write_config()

    def test_writes_and_reads_back(self, config_path):
        config.write_config('display.timestamp_format', '%H:%M', config_path)
        assert config.load_settings(config_path).timestamp_format == '%H:%M'

    def test_keeps_other_keys(self, config_path):
        config.write_config('objects.strict_trees', 'true', config_path)
        config.write_config('display.utc_as_z', 'false', config_path)
        settings = config.load_settings(config_path)
        assert settings.strict_trees is True
        assert settings.utc_as_z is False

    @pytest.mark.parametrize('key', ['nodot', 'display.colour', 'user.name'])
    def test_rejects_unknown_keys(self, key, config_path):
        with pytest.raises(ConfigError):
            config.write_config(key, 'x', config_path)

    def test_rejects_non_boolean(self, config_path):
        with pytest.raises(ConfigError):
            config.write_config('objects.strict_trees', 'sometimes', config_path)

    def test_malformed_existing_file_fails(self, config_path):
        with open(config_path, 'w') as f:
            f.write('no section header\n')
        with pytest.raises(ConfigError):
            config.write_config('display.utc_as_z', 'false', config_path)

# What it does: Manages all read/write operations for the peek config file (`~/.peekconfig` unless another path is given)
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os
from collections import namedtuple

from .errors import ConfigError

DEFAULTS = {
    'display': {
        'timestamp_format': '%Y-%m-%d %H:%M:%S',
        'utc_as_z': 'true',
    },
    'objects': {
        'strict_trees': 'false',
    },
}
BOOLEAN_KEYS = {('display', 'utc_as_z'), ('objects', 'strict_trees')}

Settings = namedtuple('Settings', ['timestamp_format', 'utc_as_z', 'strict_trees'])


def get_config_path(path=None): # Returns the config file to use
    return path or os.path.join(os.path.expanduser('~'), '.peekconfig')


def _parser():
    # `%` must survive as-is for strftime patterns
    return configparser.ConfigParser(interpolation=None)


def _split_key(key):
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ConfigError("Invalid key format. Should be 'section.key'.")
    if option not in DEFAULTS.get(section, {}):
        raise ConfigError(f"unknown config key '{key}'")
    return section, option


def read_config(path=None): # Reads the config file on top of the defaults and returns the ConfigParser
    config = _parser()
    config.read_dict(DEFAULTS)
    config_path = get_config_path(path)
    if os.path.exists(config_path):
        try:
            config.read(config_path)
        except configparser.Error as e:
            raise ConfigError(f"cannot parse {config_path}: {e}") from e
    return config


def write_config(key, value, path=None): # Sets a configuration key to a value and writes it to the config file
    section, option = _split_key(key)
    if (section, option) in BOOLEAN_KEYS and value.lower() not in configparser.ConfigParser.BOOLEAN_STATES:
        raise ConfigError(f"'{key}' expects a boolean, got '{value}'")

    config_path = get_config_path(path)
    config = _parser()
    if os.path.exists(config_path):
        try:
            config.read(config_path)
        except configparser.Error as e:
            raise ConfigError(f"cannot parse {config_path}: {e}") from e

    if not config.has_section(section):
        config.add_section(section)
    config.set(section, option, value)

    with open(config_path, 'w') as configfile:
        config.write(configfile)


def load_settings(path=None): # The display and decoding options the commands need
    config = read_config(path)
    try:
        return Settings(
            timestamp_format=config.get('display', 'timestamp_format'),
            utc_as_z=config.getboolean('display', 'utc_as_z'),
            strict_trees=config.getboolean('objects', 'strict_trees'),
        )
    except ValueError as e:
        raise ConfigError(f"invalid value in {get_config_path(path)}: {e}") from e

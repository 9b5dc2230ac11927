# What it does: Manages all read/write operations for the `.cairn/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

from .ignore import DEFAULT_PATTERNS
from .repository import REPO_DIR, find_repo_root


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(repo_root, REPO_DIR, 'config')


def read_config(repo_root=None): # Reads and returns the configuration as a ConfigParser object
    repo_root = repo_root or find_repo_root()
    config = configparser.ConfigParser()
    if not repo_root:
        return config

    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def write_config(key, value, repo_root=None): # Sets a configuration key to a value and writes it to the config file
    repo_root = repo_root or find_repo_root()
    if not repo_root:
        raise FileNotFoundError("Not a Cairn repository.")

    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError("Error: Invalid key format. Should be 'section.key'.")

    config = read_config(repo_root)
    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(get_config_path(repo_root), 'w') as configfile:
        config.write(configfile)


def get_restore_excludes(repo_root): # Built-in exclusions plus any listed under core.excludes
    config = read_config(repo_root)
    extra = config.get('core', 'excludes', fallback='')
    return set(DEFAULT_PATTERNS) | set(extra.split())

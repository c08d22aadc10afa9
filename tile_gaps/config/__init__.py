"""
Configuration subsystem for tile gaps.

Modules:
- loader: Load config.toml and environment overrides
- file_watcher: Monitor the configuration file for changes
"""

from .loader import ConfigLoader, DEFAULT_CONFIG_PATH
from .file_watcher import ConfigFileWatcher

__all__ = [
    "ConfigLoader",
    "ConfigFileWatcher",
    "DEFAULT_CONFIG_PATH",
]

"""
Configuration management for the todo service.
Loads and manages YAML configuration files.
"""

import yaml
import os
from typing import Any, Dict, Optional
import logging


DEFAULT_CONFIG = {
    'service': {
        'name': 'aiops-demo-todo-app',
        'version': '1.0.0',
    },
    'server': {
        'host': '0.0.0.0',
        'port': 3000,
        'api_prefix': '/api',
        'threaded': True,
    },
    'todos': {
        'seed': True,
    },
    'logging': {
        'level': 'INFO',
        'console': True,
        'file': None,
        'max_size': '1MB',
        'backup_count': 3,
    },
}


def _merge(base: Dict, overrides: Dict) -> Dict:
    """Recursively merge overrides into a copy of base"""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """
    Application configuration manager
    """

    def __init__(self, config_path: Optional[str] = None, data: Optional[Dict] = None):
        """
        Load configuration from YAML file

        Args:
            config_path: Path to config.yaml
            data: Configuration dictionary, used instead of a file when given
        """
        self.logger = logging.getLogger(__name__)

        if data is None:
            if config_path is None or not os.path.exists(config_path):
                raise FileNotFoundError(f"Configuration file not found: {config_path}")

            with open(config_path, 'r') as f:
                data = yaml.safe_load(f) or {}

            self.logger.info(f"Configuration loaded from {config_path}")

        self._config = _merge(DEFAULT_CONFIG, data)

        # Expand environment variables in paths
        self._expand_paths(self._config)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Config':
        """Build a configuration without a file; missing keys fall back to defaults"""
        return cls(data=data)

    def _expand_paths(self, config: Dict):
        """Recursively expand environment variables in path strings"""
        for key, value in config.items():
            if isinstance(value, dict):
                self._expand_paths(value)
            elif isinstance(value, str) and ('$' in value or '~' in value):
                config[key] = os.path.expandvars(os.path.expanduser(value))

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            path: Configuration path (e.g., 'server.port')
            default: Default value if path doesn't exist

        Returns:
            Configuration value
        """
        keys = path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, path: str, value: Any):
        """
        Set configuration value using dot notation

        Args:
            path: Configuration path (e.g., 'server.port')
            value: Value to set
        """
        keys = path.split('.')
        config = self._config

        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        config[keys[-1]] = value
        self.logger.debug(f"Config set: {path} = {value}")

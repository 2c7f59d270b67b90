"""Configuration management for streamsha.

This module provides a clean interface for reading and writing
both directory-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

from .hash import DEFAULT_CHUNK_SIZE

LOCAL_CONFIG_NAME = '.streamsha'

_TRUE_VALUES = {'1', 'yes', 'true', 'on'}
_FALSE_VALUES = {'0', 'no', 'false', 'off'}


class Config:
    """
    Manages streamsha configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.streamshaconfig
    - Local config: ./.streamsha

    Local config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.streamshaconfig'

    def __init__(self, local_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            local_config_path: Path to the local config file, if any
        """
        self.local_config_path = local_config_path
        self._global_config = None
        self._local_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.GLOBAL_CONFIG_PATH.exists():
                self._global_config.read(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    @property
    def local_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return local configuration."""
        if self._local_config is None and self.local_config_path:
            self._local_config = configparser.ConfigParser()
            if self.local_config_path.exists():
                self._local_config.read(self.local_config_path)
        return self._local_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (STREAMSHA_<SECTION>_<KEY>)
        2. Local config
        3. Global config
        4. Fallback value

        Args:
            section: Config section (e.g., 'hash', 'output')
            key: Config key (e.g., 'chunk_size')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"STREAMSHA_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.local_config and self.local_config.has_option(section, key):
            return self.local_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        return fallback

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise local config
        """
        if global_config:
            config = self.global_config
            config_path = self.GLOBAL_CONFIG_PATH
        else:
            if not self.local_config_path:
                raise ValueError("No local config path available")
            config = self.local_config
            config_path = self.local_config_path

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Args:
            section: Config section
            key: Config key
            global_config: If True, modify global config; otherwise local config

        Returns:
            True if value was removed, False if it didn't exist
        """
        if global_config:
            config = self.global_config
            config_path = self.GLOBAL_CONFIG_PATH
        else:
            if not self.local_config:
                return False
            config = self.local_config
            config_path = self.local_config_path

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)

        return True

    def list_all(self, global_only: bool = False, local_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Args:
            global_only: Only show global config
            local_only: Only show local config

        Returns:
            Dict of sections to key-value dicts
        """
        result = {}

        if not local_only:
            for section in self.global_config.sections():
                result.setdefault(section, {})
                for key, value in self.global_config.items(section):
                    result[section][f"{key} (global)"] = value

        if not global_only and self.local_config:
            for section in self.local_config.sections():
                result.setdefault(section, {})
                for key, value in self.local_config.items(section):
                    result[section][key] = value

        return result

    def get_chunk_size(self) -> int:
        """
        Get the read size used when hashing files.

        Returns:
            Positive chunk size in bytes

        Raises:
            ValueError: If the configured value is not a positive integer
        """
        raw = self.get('hash', 'chunk_size')
        if raw is None:
            return DEFAULT_CHUNK_SIZE
        try:
            size = int(raw)
        except ValueError:
            raise ValueError(f"hash.chunk_size must be an integer, got {raw!r}")
        if size <= 0:
            raise ValueError(f"hash.chunk_size must be positive, got {size}")
        return size

    def get_uppercase(self) -> bool:
        """Whether digests should be printed in uppercase hex."""
        raw = self.get('output', 'uppercase')
        if raw is None:
            return False
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ValueError(f"output.uppercase must be a boolean, got {raw!r}")


def get_config(path: Optional[Path] = None) -> Config:
    """
    Get a Config instance.

    Args:
        path: Local config file, or None for ./.streamsha

    Returns:
        Config instance
    """
    if path is None:
        path = Path.cwd() / LOCAL_CONFIG_NAME
    return Config(Path(path))

"""
Config Module
"""
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import toml

from sizeplot.utils.constants import DEFAULT_TERMINAL_WIDTH, LABEL_MARGIN, MIN_FILE_SIZE
from sizeplot.utils.exceptions import ConfigurationException

DEFAULTS: dict[str, dict[str, Any]] = {
    "scan": {"min_size": MIN_FILE_SIZE},
    "render": {"default_width": DEFAULT_TERMINAL_WIDTH, "label_margin": LABEL_MARGIN},
}


def init_config(conf_file: str | Path | None = None, *, width: int | None = None) -> "Config":
    """Build the run configuration, layering a TOML file and CLI overrides over defaults.

    Args:
        conf_file: optional TOML file whose sections override the defaults.
        width: optional fixed terminal width, stored as ``render.width``.
    """
    config = Config(Path(conf_file) if conf_file else None)
    for section, values in DEFAULTS.items():
        for key, val in values.items():
            if not config.has(section, key):
                config.set(section, key, val)
    config.set("render", "width", width)
    return config


class Config:
    """This is singleton class to hold the configuration information.

    By virtue of it's singleton nature, it can be configured once and used anywhere. Every time a new instance is created,
    we have overridden the `__new__` magic method to return a pre-existing instance of this class.
    """

    _instance = None

    def __new__(cls, conf_file: Path | None = None):
        """Create a new instance of the config class

        Args:
            conf_file (Path, optional): Path to the configuration file. Defaults to None.
        """
        if not cls._instance:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._conf_file = conf_file
            cls._instance._load_config()
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset the singleton instance to None"""
        if cls._instance:
            cls._instance._conf_file = None
            cls._instance.config = {}
            cls._instance = None

    def _load_config(self):
        """Load the configurations from the TOML file.
        If the file does not exist, raise a ConfigurationException.
        If a file wasn't specified, then start from an empty dict.
        """
        self.config = {}
        if self._conf_file:
            try:
                self.config = toml.load(self._conf_file)
            except FileNotFoundError as e:
                raise ConfigurationException(
                    "", message=f"Configuration file '{self._conf_file}' could not be found."
                ) from e
            except toml.TomlDecodeError as e:
                raise ConfigurationException(
                    "", message=f"Configuration file '{self._conf_file}' is not valid TOML: {e}"
                ) from e

    def _expand_env_variables(self, value):
        """Expand environment variables in a given value."""
        if isinstance(value, str):
            return re.sub(
                r"(?i)\$(\w+)|env:(\w+)|\$\{(\w+)\}",
                lambda match: os.environ.get(
                    match.group(1) or match.group(2) or match.group(3), match.group(0)
                ),
                value,
            )
        return value

    def has(self, section: str, key: str) -> bool:
        return section in self.config and key in self.config[section]

    def get(self, section: str, key: str) -> Any:
        """Get any value in a given section.

        Args:
            section (str): Configuration section.
            key (str): Configuration key.

        Returns:
            Any: Value associated with that section.
        """
        if section not in self.config:
            raise ConfigurationException("", message=f'Group "{section}" is not found in config.')
        if key not in self.config[section]:
            raise ConfigurationException(
                "", message=f'Parameter "{key}" in group "{section}" is not found in config.'
            )
        return self._expand_env_variables(self.config[section][key])

    def get_int(self, section: str, key: str) -> int:
        """Get a value and coerce it to int, expanding environment variables first."""
        value = self.get(section, key)
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationException(
                f"{section}.{key}",
                message=f'Parameter "{key}" in group "{section}" must be an integer, got {value!r}.',
            ) from e

    def set(self, section: str, key: str, val: Any) -> None:
        """Set any value in a given section.

        Args:
            section (str): Configuration section.
            key (str): Configuration key.
            val (Any): Configuration value to be set.
        """
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = val

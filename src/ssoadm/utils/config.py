"""Configuration utilities for ssoadm."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from rich.console import Console

console = Console()

CONFIG_DIR = Path.home() / ".ssoadm"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

PROFILE_ENV_VAR = "SSOADM_PROFILE"
LOG_LEVEL_ENV_VAR = "SSOADM_LOG_LEVEL"


class Config:
    """Manages ssoadm configuration stored as YAML."""

    def __init__(self):
        """Initialize the configuration manager."""
        self.config_data = {}
        self._config_loaded = False
        self._config_dir_ensured = False

    def _ensure_config_dir(self):
        """Ensure the configuration directory exists."""
        if not self._config_dir_ensured:
            config_dir = getattr(self, "_config_dir", CONFIG_DIR)
            if not config_dir.exists():
                config_dir.mkdir(parents=True)
                console.print(f"Created configuration directory: {config_dir}")
            self._config_dir_ensured = True

    def _ensure_config_loaded(self):
        """Ensure configuration is loaded from file."""
        if not self._config_loaded:
            self._ensure_config_dir()
            self._load_config()
            self._config_loaded = True

    def _load_config(self):
        """Load configuration from the YAML file."""
        config_file = getattr(self, "_config_file", CONFIG_FILE)
        if not config_file.exists():
            self.config_data = {}
            return

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                self.config_data = yaml.safe_load(f) or {}

            self._expand_tilde_paths()

        except yaml.YAMLError as e:
            console.print(f"[red]Error: Configuration file {config_file} is not valid YAML: {e}[/red]")
            self.config_data = {}
        except OSError as e:
            console.print(f"[red]Error reading configuration file {config_file}: {e}[/red]")
            self.config_data = {}

    def _expand_tilde_paths(self):
        """Expand tilde (~) paths in configuration to actual home directory paths."""
        for section_data in self.config_data.values():
            if isinstance(section_data, dict):
                for key, value in section_data.items():
                    if isinstance(value, str) and value.startswith("~"):
                        section_data[key] = str(Path(value).expanduser())

    def save_config(self):
        """Save the configuration to the YAML file."""
        self._ensure_config_dir()
        config_file = getattr(self, "_config_file", CONFIG_FILE)
        try:
            with open(config_file, "w", encoding="utf-8") as f:
                yaml.dump(self.config_data, f, default_flow_style=False, indent=2, sort_keys=False)
        except OSError as e:
            console.print(f"[red]Error saving configuration: {e}[/red]")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value with dot notation support.

        Args:
            key: Configuration key (supports dot notation like "profiles.dev.region")
            default: Default value if key doesn't exist

        Returns:
            Configuration value
        """
        self._ensure_config_loaded()

        if "." in key:
            value = self.config_data
            for k in key.split("."):
                if isinstance(value, dict) and k in value:
                    value = value[k]
                else:
                    return default
            return value

        return self.config_data.get(key, default)

    def set(self, key: str, value: Any):
        """
        Set a configuration value and save it.

        Args:
            key: Configuration key
            value: Configuration value
        """
        self._ensure_config_loaded()
        self.config_data[key] = value
        self.save_config()

    def delete(self, key: str):
        """
        Delete a configuration value.

        Args:
            key: Configuration key
        """
        self._ensure_config_loaded()
        if key in self.config_data:
            del self.config_data[key]
            self.save_config()

    def get_default_profile(self) -> Optional[str]:
        """
        Get the default profile name.

        The SSOADM_PROFILE environment variable takes precedence over the
        configured default.
        """
        return os.environ.get(PROFILE_ENV_VAR) or self.get("default_profile")

    def get_log_level(self, default: str = "WARNING") -> str:
        """Get the log level from the environment or the configuration."""
        value = os.environ.get(LOG_LEVEL_ENV_VAR) or self.get("logging.level", default)
        return str(value).upper()

"""
Configuration management for the NASA APOD client.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

_LOG = logging.getLogger(__name__)

API_KEY_ENV = "NASA_API_KEY"
DEMO_API_KEY = "DEMO_KEY"

DEFAULT_CONFIG = {
    "api_key": "",
    "base_url": "https://api.nasa.gov/planetary/apod",
    "timeout": 15,
    "locale": "es_ES",
}


class Config:
    """Configuration for the APOD client, optionally backed by a JSON file."""

    def __init__(self, config_file_path: Optional[str] = None, api_key: Optional[str] = None):
        """Initialize configuration."""
        self._config_file_path = config_file_path
        self._config: Dict[str, Any] = {}
        self.load()
        if api_key:
            self._config["api_key"] = api_key

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        config_file_path: Optional[str] = None,
    ) -> "Config":
        """Build configuration with the API key read once from the environment."""
        environ = os.environ if environ is None else environ
        api_key = environ.get(API_KEY_ENV, "").strip()
        if not api_key:
            _LOG.warning("%s not set, falling back to %s", API_KEY_ENV, DEMO_API_KEY)
        return cls(config_file_path, api_key=api_key or None)

    def load(self) -> None:
        """Load configuration from file."""
        self._config = DEFAULT_CONFIG.copy()
        if not self._config_file_path:
            return
        try:
            if os.path.exists(self._config_file_path):
                with open(self._config_file_path, "r", encoding="utf-8") as file:
                    data = json.load(file)
                if not isinstance(data, dict):
                    _LOG.error("Configuration in %s is not a JSON object, using defaults", self._config_file_path)
                    return
                self._config.update(data)
                _LOG.info("Configuration loaded from %s", self._config_file_path)
            else:
                _LOG.info("Configuration file not found, using defaults")
        except (OSError, ValueError) as ex:
            _LOG.error("Failed to load configuration: %s", ex)
            self._config = DEFAULT_CONFIG.copy()

    def save(self) -> None:
        """Save configuration to file."""
        if not self._config_file_path:
            return
        try:
            directory = os.path.dirname(self._config_file_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self._config_file_path, "w", encoding="utf-8") as file:
                json.dump(self._config, file, indent=2)
                _LOG.info("Configuration saved to %s", self._config_file_path)
        except OSError as ex:
            _LOG.error("Failed to save configuration: %s", ex)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        self._config[key] = value

    def update(self, data: Dict[str, Any]) -> None:
        """Update configuration with new data."""
        self._config.update(data)
        self.save()

    @property
    def api_key(self) -> str:
        """Get NASA API key, or the public demo key when none is configured."""
        api_key = self._config.get("api_key", "")
        return api_key if api_key else DEMO_API_KEY

    @property
    def base_url(self) -> str:
        """Get the APOD endpoint."""
        return self._config.get("base_url", DEFAULT_CONFIG["base_url"])

    @property
    def timeout(self) -> Optional[float]:
        """Get total request timeout in seconds; None disables it."""
        timeout = self._config.get("timeout", DEFAULT_CONFIG["timeout"])
        return timeout if timeout else None

    @property
    def locale(self) -> str:
        """Get display locale for long-form dates."""
        return self._config.get("locale", DEFAULT_CONFIG["locale"])

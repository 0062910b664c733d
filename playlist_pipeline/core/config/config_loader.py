"""
Configuration Loader
Loads and validates YAML configuration files
"""

from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .app_config import AppConfig, DEFAULT_AI_MODEL


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file
    - Validate all required fields
    - Validate types and value ranges
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path, api_key_override: Optional[str] = None):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
            api_key_override: API key taking precedence over the file value
        """
        self._config_path = config_path
        self._api_key_override = api_key_override

    def load(self) -> AppConfig:
        """
        Load and validate configuration from YAML file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_data = self._load_yaml()
        if self._api_key_override:
            config_data["api_key"] = self._api_key_override

        api_key = self._validate_api_key(config_data)
        playlist_url = self._validate_playlist_url(config_data)
        ai_meta = self._validate_ai_config(config_data)
        binge_meta = self._validate_binge_config(config_data)
        log_level = self._validate_log_level(config_data)

        return AppConfig(
            api_key=api_key,
            playlist_url=playlist_url,
            ai_api_key=ai_meta["api_key"],
            ai_model=ai_meta["model"],
            binge_hours=binge_meta["hours"],
            binge_minutes=binge_meta["minutes"],
            log_level=log_level
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            if data is None:
                raise ConfigValidationError("Configuration file is empty")

            if not isinstance(data, dict):
                raise ConfigValidationError(
                    "Configuration must be a YAML mapping/dictionary"
                )

            return data

        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

    def _validate_api_key(self, config: Dict[str, Any]) -> str:
        """Validate api_key field."""
        if "api_key" not in config:
            raise ConfigValidationError("Missing required field: 'api_key'")

        api_key = config["api_key"]

        if not isinstance(api_key, str):
            raise ConfigValidationError(
                f"Field 'api_key' must be a string, got {type(api_key).__name__}"
            )

        if not api_key.strip():
            raise ConfigValidationError("Field 'api_key' cannot be empty")

        return api_key.strip()

    def _validate_playlist_url(self, config: Dict[str, Any]) -> Optional[str]:
        """Validate playlist_url field (optional)."""
        playlist_url = config.get("playlist_url")
        if playlist_url is None:
            return None

        if not isinstance(playlist_url, str):
            raise ConfigValidationError(
                f"Field 'playlist_url' must be a string, got {type(playlist_url).__name__}"
            )

        return playlist_url.strip() or None

    def _validate_ai_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Validate ai section. The Gemini key falls back to api_key."""
        defaults = {
            "api_key": None,
            "model": DEFAULT_AI_MODEL
        }

        ai = config.get("ai")
        if not isinstance(ai, dict):
            return defaults

        api_key = ai.get("api_key", defaults["api_key"])
        model = ai.get("model", defaults["model"])

        if api_key is not None and not isinstance(api_key, str):
            raise ConfigValidationError(f"ai.api_key must be string, got {type(api_key).__name__}")
        if not isinstance(model, str) or not model.strip():
            raise ConfigValidationError("ai.model must be a non-empty string")

        return {
            "api_key": api_key.strip() if api_key else None,
            "model": model.strip()
        }

    def _validate_binge_config(self, config: Dict[str, Any]) -> Dict[str, Optional[int]]:
        """Validate binge section (daily watch budget)."""
        defaults = {"hours": None, "minutes": None}

        binge = config.get("binge")
        if not isinstance(binge, dict):
            return defaults

        result = {}
        for field in ("hours", "minutes"):
            value = binge.get(field)
            if value is None:
                result[field] = None
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigValidationError(
                    f"binge.{field} must be an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise ConfigValidationError(
                    f"binge.{field} must be non-negative, got {value}"
                )
            result[field] = value

        return result

    def _validate_log_level(self, config: Dict[str, Any]) -> str:
        """Validate log_level field (optional)."""
        log_level = config.get("log_level", "INFO")

        if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
            raise ConfigValidationError(
                f"Field 'log_level' must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return log_level.upper()

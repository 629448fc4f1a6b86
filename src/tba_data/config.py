"""
TBA Client Configuration

This module provides configuration management for the TBA data client.
It includes environment variable loading, the JSON configuration record
holding the API key and default team/event keys, and configuration validation.
"""

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from .constants import BASE_URL, CONFIG_RECORD_FIELDS, DEFAULT_CONFIG_FILE
from .exceptions import ConfigurationError

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass(frozen=True)
class TBAConfig:
    """Configuration for TBA API access."""

    # API settings
    base_url: str = BASE_URL
    api_key: Optional[str] = None
    timeout: int = 30
    max_retries: int = 3
    retry_delay: float = 2.0

    # Defaults for calls that take a team or event
    team_key: Optional[str] = None
    event_key: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    config_file: str = DEFAULT_CONFIG_FILE

    @classmethod
    def from_env(cls, config_file: Optional[str] = None) -> 'TBAConfig':
        """
        Create configuration from the configuration record and environment variables.

        Environment variables take precedence over the record.
        """
        config_file = config_file or os.getenv("TBA_CONFIG_FILE", DEFAULT_CONFIG_FILE)
        record = load_config_record(config_file)

        return cls(
            base_url=os.getenv("TBA_BASE_URL", BASE_URL),
            api_key=os.getenv("TBA_API_KEY") or record.get("api_key"),
            timeout=int(os.getenv("TBA_TIMEOUT", "30")),
            max_retries=int(os.getenv("TBA_MAX_RETRIES", "3")),
            retry_delay=float(os.getenv("TBA_RETRY_DELAY", "2.0")),
            team_key=os.getenv("TBA_TEAM_KEY") or record.get("team_key"),
            event_key=os.getenv("TBA_EVENT_KEY") or record.get("event_key"),
            log_level=os.getenv("TBA_LOG_LEVEL", "INFO"),
            log_file=os.getenv("TBA_LOG_FILE"),
            config_file=config_file,
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.max_retries < 1:
            raise ConfigurationError("max_retries must be at least 1")
        if self.retry_delay < 0:
            raise ConfigurationError("retry_delay must be non-negative")

    def require_api_key(self) -> str:
        return _require(self.api_key, "api_key")

    def require_team_key(self) -> str:
        return _require(self.team_key, "team_key")

    def require_event_key(self) -> str:
        return _require(self.event_key, "event_key")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary, with the API key masked."""
        return {
            'base_url': self.base_url,
            'api_key': _mask(self.api_key),
            'timeout': self.timeout,
            'max_retries': self.max_retries,
            'retry_delay': self.retry_delay,
            'team_key': self.team_key,
            'event_key': self.event_key,
            'log_level': self.log_level,
            'log_file': self.log_file,
            'config_file': self.config_file,
        }


def _require(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise ConfigurationError(
            f"'{name}' is not configured; set it in the config file or TBA_{name.upper()}"
        )
    return str(value).strip()


def _mask(secret: Optional[str]) -> Optional[str]:
    if not secret:
        return secret
    return "*" * max(len(secret) - 4, 0) + secret[-4:]


def get_config() -> TBAConfig:
    """Get the configuration for the current environment."""
    return TBAConfig.from_env()


def create_config(**kwargs) -> TBAConfig:
    """Create a custom configuration."""
    config = TBAConfig.from_env(kwargs.pop("config_file", None))
    overrides = {key: value for key, value in kwargs.items() if hasattr(config, key)}
    config = replace(config, **overrides)
    config.validate()
    return config


def load_config_record(path: Union[str, Path]) -> Dict[str, str]:
    """
    Load the configuration record.

    Args:
        path: Location of the JSON record

    Returns:
        Dictionary with the team_key, event_key and api_key fields that are set.
        A missing file yields an empty dictionary.

    Raises:
        ConfigurationError: If the file exists but cannot be read or parsed
    """
    config_path = Path(path).expanduser()
    if not config_path.exists():
        logger.debug(f"No configuration record at {config_path}")
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigurationError(f"Failed to read configuration record {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration record {config_path} is not a JSON object")

    return {field: str(data[field]) for field in CONFIG_RECORD_FIELDS if data.get(field)}


def save_config_record(path: Union[str, Path], record: Dict[str, str]) -> Path:
    """
    Save the configuration record, keeping only the known fields.

    Returns:
        Path the record was written to
    """
    config_path = Path(path).expanduser()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    data = {field: record.get(field, "") for field in CONFIG_RECORD_FIELDS}

    try:
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise ConfigurationError(f"Failed to write configuration record {config_path}: {e}") from e

    logger.info(f"Saved configuration record: {config_path}")
    return config_path


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure root logging for command-line use."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

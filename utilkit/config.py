"""
Configuration module for utilkit.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import json
import logging
import os
import re
import threading
from dataclasses import asdict, dataclass, fields
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "UTILKIT_"

DEFAULT_STORAGE_PATH = str(Path.home() / ".utilkit" / "local_storage.json")


def load_config_from_env(prefix: str = ENV_PREFIX) -> Dict[str, str]:
    """
    Load configuration from environment variables with given prefix.
    """
    config = {}

    for key, value in os.environ.items():
        if key.startswith(prefix):
            # Remove prefix and convert to lowercase
            config_key = key[len(prefix):].lower()
            config[config_key] = value

    return config


def parse_duration_string(duration_str: str) -> timedelta:
    """
    Parse duration string like '500ms', '30s', '5m', '2h', '1d' into timedelta.
    A bare number is taken as seconds.
    """
    if not isinstance(duration_str, str):
        raise ValueError("Duration must be a string")

    duration_str = duration_str.strip().lower()

    match = re.match(r'^(\d+(?:\.\d+)?)\s*(ms|s|m|h|d)?$', duration_str)
    if not match:
        raise ValueError(f"Invalid duration format: {duration_str}")

    value, unit = match.groups()
    value = float(value)

    if unit == 'ms':
        return timedelta(milliseconds=value)
    elif unit in (None, 's'):
        return timedelta(seconds=value)
    elif unit == 'm':
        return timedelta(minutes=value)
    elif unit == 'h':
        return timedelta(hours=value)
    return timedelta(days=value)


def _seconds(value: Any, field_name: str) -> float:
    """Accept numbers (seconds) or duration strings."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    try:
        return parse_duration_string(str(value)).total_seconds()
    except ValueError as e:
        raise ConfigError(str(e), field=field_name, cause=e)


@dataclass
class Config:
    """Configuration for utilkit helpers"""
    debounce_wait: float = 1.0
    throttle_wait: float = 1.0
    date_format: str = "yyyy-MM-dd"
    storage_backend: str = "file"
    storage_path: str = DEFAULT_STORAGE_PATH
    redis_url: Optional[str] = None
    key_prefix: str = "utilkit:"

    def __post_init__(self):
        self.debounce_wait = _seconds(self.debounce_wait, "debounce_wait")
        self.throttle_wait = _seconds(self.throttle_wait, "throttle_wait")
        self.storage_path = os.path.expanduser(self.storage_path)
        self.storage_backend = self.storage_backend.strip().lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "Config":
        """Create configuration from environment variables"""
        return cls.from_dict(load_config_from_env(prefix))

    @classmethod
    def from_file(cls, file_path: str) -> "Config":
        """Load configuration from a JSON or YAML file."""
        if not os.path.exists(file_path):
            raise ConfigError(f"Configuration file not found: {file_path}")

        file_ext = Path(file_path).suffix.lower()

        with open(file_path, 'r', encoding='utf-8') as f:
            try:
                if file_ext == '.json':
                    data = json.load(f)
                elif file_ext in ['.yaml', '.yml']:
                    data = yaml.safe_load(f)
                else:
                    raise ConfigError(f"Unsupported configuration file format: {file_ext}")
            except (json.JSONDecodeError, yaml.YAMLError) as e:
                raise ConfigError(f"Failed to parse {file_path}: {e}", cause=e)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {file_path}")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return asdict(self)

    def validate(self) -> bool:
        """Validate the configuration"""
        if self.debounce_wait < 0:
            raise ConfigError("debounce_wait must be >= 0", field="debounce_wait")
        if self.throttle_wait < 0:
            raise ConfigError("throttle_wait must be >= 0", field="throttle_wait")
        if not self.date_format:
            raise ConfigError("date_format is required", field="date_format")
        # Backend names are checked against the registry by store.create_backend.
        if not self.storage_backend:
            raise ConfigError("storage_backend is required", field="storage_backend")
        if self.storage_backend == "file" and not self.storage_path:
            raise ConfigError("storage_path is required for the file backend", field="storage_path")
        if self.storage_backend == "redis" and not self.redis_url:
            raise ConfigError("redis_url is required for the redis backend", field="redis_url")
        return True


_config: Optional[Config] = None
_config_lock = threading.Lock()


def get_config() -> Config:
    """Return the process-wide configuration, loading it from the environment on first use."""
    global _config
    with _config_lock:
        if _config is None:
            config = Config.from_env()
            config.validate()
            _config = config
        return _config


def set_config(config: Optional[Config]) -> None:
    """Replace the process-wide configuration. ``None`` reloads from the environment on next use."""
    global _config
    if config is not None:
        config.validate()
    with _config_lock:
        _config = config

# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Factory for creating storage backends.
Provides a centralized way to create and configure key/value backends.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..config import Config
from ..errors import ConfigError
from .file import FileBackend
from .memory import MemoryBackend
from .redis_backend import RedisBackend
from .types import KeyValueBackend


@dataclass
class StorageConfig:
    """Configuration for storage backends."""
    backend_type: str = "memory"
    path: Optional[str] = None
    redis_url: Optional[str] = None
    key_prefix: str = "utilkit:"

    @classmethod
    def from_config(cls, config: Config) -> "StorageConfig":
        """Derive storage settings from the library configuration."""
        return cls(
            backend_type=config.storage_backend,
            path=config.storage_path,
            redis_url=config.redis_url,
            key_prefix=config.key_prefix,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'backend_type': self.backend_type,
            'path': self.path,
            'redis_url': self.redis_url,
            'key_prefix': self.key_prefix,
        }


BackendBuilder = Callable[[StorageConfig], KeyValueBackend]


def _build_file(config: StorageConfig) -> KeyValueBackend:
    if not config.path:
        raise ConfigError("path is required for the file backend", field="path")
    return FileBackend(config.path)


def _build_redis(config: StorageConfig) -> KeyValueBackend:
    if not config.redis_url:
        raise ConfigError("redis_url is required for the redis backend", field="redis_url")
    return RedisBackend.from_url(config.redis_url, config.key_prefix)


# Registry of available backend builders
_BACKEND_BUILDERS: Dict[str, BackendBuilder] = {
    'memory': lambda config: MemoryBackend(),
    'file': _build_file,
    'redis': _build_redis,
}


def register_backend(name: str, builder: BackendBuilder) -> None:
    """
    Register a new backend type.

    Args:
        name: Name to register the backend under
        builder: Callable creating the backend from a StorageConfig
    """
    _BACKEND_BUILDERS[name.lower()] = builder


def get_available_backends() -> list[str]:
    """Get list of available backend types."""
    return list(_BACKEND_BUILDERS.keys())


def create_backend(config: StorageConfig) -> KeyValueBackend:
    """
    Create a backend from configuration.

    Args:
        config: Storage configuration

    Returns:
        KeyValueBackend instance

    Raises:
        ConfigError: If the backend type is unknown or misconfigured
    """
    builder = _BACKEND_BUILDERS.get(config.backend_type.lower())
    if not builder:
        raise ConfigError(f"Unsupported storage backend: {config.backend_type}", field="backend_type")
    return builder(config)

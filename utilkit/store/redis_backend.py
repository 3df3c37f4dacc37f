# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Redis storage backend for utilkit.
Stores each item as a plain Redis string under a key prefix.
"""

import logging
from typing import Any, List, Optional

import redis

from ..errors import ErrorCode, StorageError
from .types import KeyValueBackend

logger = logging.getLogger(__name__)


class RedisBackend(KeyValueBackend):
    """Redis-based backend shared between processes."""

    def __init__(self, redis_client: Any, key_prefix: str = "utilkit:"):
        """
        Initialize Redis backend.

        Args:
            redis_client: Synchronous Redis client instance
            key_prefix: Prefix for Redis keys
        """
        self.client = redis_client
        self.key_prefix = key_prefix

    @classmethod
    def from_url(cls, redis_url: str, key_prefix: str = "utilkit:") -> "RedisBackend":
        """Create a backend with a new client for ``redis_url``."""
        return cls(redis.Redis.from_url(redis_url), key_prefix)

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def _unavailable(self, operation: str, key: str, error: Exception) -> StorageError:
        logger.error(f"Redis {operation} failed for {key!r}: {error}")
        return StorageError(operation, key, f"Redis error: {error}", error,
                            code=ErrorCode.BACKEND_UNAVAILABLE)

    def get_item(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(self._key(key))
        except redis.RedisError as e:
            raise self._unavailable("get", key, e)
        if isinstance(value, bytes):
            return value.decode('utf-8')
        return value

    def set_item(self, key: str, value: str) -> None:
        try:
            self.client.set(self._key(key), value)
        except redis.RedisError as e:
            raise self._unavailable("set", key, e)

    def remove_item(self, key: str) -> None:
        try:
            self.client.delete(self._key(key))
        except redis.RedisError as e:
            raise self._unavailable("remove", key, e)

    def _scan(self) -> List[str]:
        names = []
        for name in self.client.scan_iter(match=f"{self.key_prefix}*"):
            if isinstance(name, bytes):
                name = name.decode('utf-8')
            names.append(name)
        return names

    def clear(self) -> None:
        try:
            names = self._scan()
            if names:
                self.client.delete(*names)
        except redis.RedisError as e:
            raise self._unavailable("clear", "", e)

    def keys(self) -> List[str]:
        try:
            names = self._scan()
        except redis.RedisError as e:
            raise self._unavailable("keys", "", e)
        return [name[len(self.key_prefix):] for name in names]

    def close(self) -> None:
        self.client.close()

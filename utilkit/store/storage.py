# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
JSON-aware storage wrapper.

``Storage.set`` stores strings as-is and JSON-encodes everything else;
``Storage.get`` decodes JSON and falls back to the raw text when the stored
value is not valid JSON.
"""

import dataclasses
import json
import logging
import threading
from datetime import date, datetime, time
from typing import Any, Callable, Dict, List, Optional

from ..config import get_config
from ..errors import ErrorCode, StorageError
from .factory import StorageConfig, create_backend
from .memory import MemoryBackend
from .types import KeyValueBackend

logger = logging.getLogger(__name__)


def _json_default(obj: Any) -> Any:
    """Serializer for values json does not handle natively."""
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class Storage:
    """Wrapper adding JSON encoding on top of a KeyValueBackend."""

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    def _call(self, operation: str, key: str, method: Callable, *args) -> Any:
        try:
            return method(*args)
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(operation, key, f"Backend failure: {e}", e)

    def set(self, key: str, value: Any) -> None:
        """
        Store a value.

        Strings are stored verbatim; other values are JSON-encoded.

        Raises:
            StorageError: If the value cannot be encoded or the backend fails
        """
        if not isinstance(value, str):
            try:
                value = json.dumps(value, default=_json_default, ensure_ascii=False)
            except (TypeError, ValueError) as e:
                raise StorageError("set", key, f"Value is not JSON serializable: {e}", e,
                                   code=ErrorCode.ENCODE_FAILED)
        self._call("set", key, self.backend.set_item, key, value)
        logger.debug(f"Stored {key!r} ({len(value)} chars)")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Read a value.

        Returns ``default`` when the key is missing or empty. Stored text that
        is valid JSON is decoded (so a stored string like ``"42"`` comes back
        as the number 42); anything else is returned as the raw string.
        """
        data = self._call("get", key, self.backend.get_item, key)
        if not data:
            return default
        try:
            return json.loads(data)
        except ValueError:
            logger.debug(f"Value of {key!r} is not JSON, returning raw text")
            return data

    def remove(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        self._call("remove", key, self.backend.remove_item, key)

    def clear(self) -> None:
        """Delete every key."""
        self._call("clear", "", self.backend.clear)

    def keys(self) -> List[str]:
        """Return all stored keys."""
        return self._call("keys", "", self.backend.keys)

    # Raw Web Storage style access
    def get_item(self, key: str) -> Optional[str]:
        return self._call("get", key, self.backend.get_item, key)

    def set_item(self, key: str, value: str) -> None:
        self._call("set", key, self.backend.set_item, key, value)

    def remove_item(self, key: str) -> None:
        self.remove(key)

    def close(self) -> None:
        self._call("close", "", self.backend.close)

    def __contains__(self, key: str) -> bool:
        return self.get_item(key) is not None

    def __len__(self) -> int:
        return self._call("len", "", len, self.backend)

    def __repr__(self) -> str:
        return f"Storage(backend={type(self.backend).__name__})"


def use_storage(backend: KeyValueBackend) -> Storage:
    """Wrap a backend with JSON-aware get/set/remove."""
    return Storage(backend)


_shared: Dict[str, Storage] = {}
_shared_lock = threading.Lock()


def _shared_storage(name: str, factory: Callable[[], KeyValueBackend]) -> Storage:
    with _shared_lock:
        if name not in _shared:
            _shared[name] = Storage(factory())
            logger.debug(f"Created shared {name} storage over {type(_shared[name].backend).__name__}")
        return _shared[name]


def use_session_storage() -> Storage:
    """Process-wide storage that lives in memory."""
    return _shared_storage("session", MemoryBackend)


def use_local_storage() -> Storage:
    """
    Process-wide persistent storage.

    Uses the configured backend (a JSON file at ``Config.storage_path`` by
    default).
    """
    return _shared_storage(
        "local", lambda: create_backend(StorageConfig.from_config(get_config()))
    )


def close_shared_storage() -> None:
    """Close and forget the shared session/local storages."""
    with _shared_lock:
        storages = list(_shared.values())
        _shared.clear()
    for storage in storages:
        storage.close()

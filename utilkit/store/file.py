# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
JSON file storage backend for utilkit.
Persists all items in a single JSON document on disk.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..errors import StorageError
from .types import KeyValueBackend

logger = logging.getLogger(__name__)


class FileBackend(KeyValueBackend):
    """
    Backend that keeps items in memory and mirrors them to a JSON file.

    Every mutation rewrites the file through a temporary file followed by an
    atomic rename, so readers never observe a half-written document.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()
        self._lock = threading.RLock()
        self._items: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError("load", str(self.path), f"Failed to read storage file: {e}", e)
        if not isinstance(data, dict):
            raise StorageError("load", str(self.path), "Storage file must contain a JSON object")
        logger.debug(f"Loaded {len(data)} items from {self.path}")
        return {
            str(k): v if isinstance(v, str) else json.dumps(v, ensure_ascii=False)
            for k, v in data.items()
        }

    def _flush(self, items: Dict[str, str]) -> None:
        """Write ``items`` to disk and make them the current state."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(items, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        self._items = items

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            items = dict(self._items)
            items[key] = value
            self._flush(items)

    def remove_item(self, key: str) -> None:
        with self._lock:
            if key in self._items:
                items = dict(self._items)
                del items[key]
                self._flush(items)

    def clear(self) -> None:
        with self._lock:
            self._flush({})

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package store provides key/value storage for utilkit.

This package implements:
- The KeyValueBackend interface (Web Storage style)
- Memory, JSON file and Redis backends
- The Storage wrapper with JSON encoding on set and tolerant decoding on get
- Shared session and local storages
- Backend factory and configuration
"""

from .types import (
    # Backend interface
    KeyValueBackend
)

from .memory import MemoryBackend
from .file import FileBackend
from .redis_backend import RedisBackend

from .storage import (
    # Wrapper
    Storage,
    use_storage,
    use_session_storage,
    use_local_storage,
    close_shared_storage
)

from .factory import (
    # Backend factory
    StorageConfig,
    create_backend,
    register_backend,
    get_available_backends
)

__all__ = [
    # Interface
    'KeyValueBackend',

    # Backends
    'MemoryBackend',
    'FileBackend',
    'RedisBackend',

    # Wrapper
    'Storage',
    'use_storage',
    'use_session_storage',
    'use_local_storage',
    'close_shared_storage',

    # Factory
    'StorageConfig',
    'create_backend',
    'register_backend',
    'get_available_backends'
]

# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Storage backend interface for utilkit.
Mirrors the Web Storage API: string keys mapped to string values.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class KeyValueBackend(ABC):
    """Abstract base class for key/value storage backends."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Return the stored text for a key.

        Args:
            key: The key to look up

        Returns:
            The stored string, or None if the key is absent
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store text under a key, replacing any previous value.

        Args:
            key: The key to store under
            value: The text to store
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Delete every key owned by this backend."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """Return all stored keys."""
        pass

    def __len__(self) -> int:
        return len(self.keys())

    def close(self) -> None:
        """Close the backend and release resources"""
        pass

# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Error handling for utilkit.

All exceptions raised by the library derive from UtilKitError, which carries a
structured ErrorCode plus optional metadata. Concrete errors also subclass the
matching builtin (TypeError, ValueError) so callers can catch either.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Structured error codes for utilkit."""

    # Kind detection / cloning
    UNSUPPORTED_KIND = "unsupported_kind"
    UNKNOWN_KIND = "unknown_kind"

    # Dates
    INVALID_DATE = "invalid_date"

    # Storage
    STORAGE_ERROR = "storage_error"
    ENCODE_FAILED = "encode_failed"
    BACKEND_UNAVAILABLE = "backend_unavailable"

    # Configuration
    INVALID_CONFIG = "invalid_config"


class UtilKitError(Exception):
    """
    Base exception class for all utilkit errors.

    Provides an error code, a human readable message, the underlying cause
    (if any) and free-form metadata.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        cause: Optional[Exception] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.cause = cause
        self.metadata = metadata or {}
        self.timestamp = datetime.now()

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "error": self.code.value,
            "error_description": self.message,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.metadata:
            result["metadata"] = self.metadata

        if self.cause:
            result["caused_by"] = str(self.cause)

        return result


class UnsupportedKindError(UtilKitError, TypeError):
    """Raised when a value's kind has no clone rule."""

    def __init__(self, type_name: str, message: str = ""):
        self.type_name = type_name
        super().__init__(
            code=ErrorCode.UNSUPPORTED_KIND,
            message=message or f"Cannot clone value of unsupported type '{type_name}'",
            metadata={"type": type_name},
        )


class UnknownKindError(UtilKitError, ValueError):
    """Raised when a kind tag does not name any Kind."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(
            code=ErrorCode.UNKNOWN_KIND,
            message=f"Unknown kind tag: {tag!r}",
            metadata={"tag": tag},
        )


class InvalidDateError(UtilKitError, ValueError):
    """Raised when a value cannot be interpreted as a date."""

    def __init__(self, value: Any, cause: Optional[Exception] = None):
        self.value = value
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message=f"Invalid date: {value!r}",
            cause=cause,
            metadata={"value": repr(value)},
        )


class StorageError(UtilKitError):
    """Errors related to key/value storage operations."""

    def __init__(
        self,
        operation: str,
        key: str = "",
        message: str = "",
        cause: Optional[Exception] = None,
        code: ErrorCode = ErrorCode.STORAGE_ERROR,
    ):
        self.operation = operation
        self.key = key
        super().__init__(
            code=code,
            message=f"Storage error in {operation}: {message}",
            cause=cause,
            metadata={"operation": operation, "key": key},
        )


class ConfigError(UtilKitError, ValueError):
    """Raised when configuration values are missing or invalid."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        metadata = kwargs.pop("metadata", {})
        if field:
            metadata["field"] = field
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            metadata=metadata,
            **kwargs
        )


__all__ = [
    "ErrorCode",
    "UtilKitError",
    "UnsupportedKindError",
    "UnknownKindError",
    "InvalidDateError",
    "StorageError",
    "ConfigError",
]

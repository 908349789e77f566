"""
Structured error types for dbproviders.

Every failure raised by the provider layer is a :class:`ProviderError`
carrying a category, an explicit retry flag and a small context dict, so
startup code can tell a misconfiguration (fatal) apart from a connection
hiccup (handed to the ORM's retry policy).

Manifesto:
    - **Configuration errors are fatal:** an unknown database kind must stop
      startup, never degrade into a half-configured builder.
    - **Runtime failures are declared, not handled:** the retry budget is
      stated here and executed by the ORM connection layer.
    - **Error chaining:** the original exception is kept as ``cause``.

Architecture:
    ::

        ProviderError
        ├── ConfigError (CONFIG, never retryable)
        │   ├── InvalidConfigurationError
        │   └── MissingConfigError
        ├── TransientError (retryable)
        │   └── ProviderRuntimeFailure (DATABASE)
        └── MigrationError (MIGRATION)
            └── UnsupportedOperationError

Examples:
    >>> error = InvalidConfigurationError("database_type", "oracle")
    >>> error.retryable
    False
    >>> error.to_dict()["category"]
    'CONFIG'

Tags:
    error-handling, exception-hierarchy, configuration, retry-logic

Doc-Types:
    api-reference
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for routing and retry decisions."""

    CONFIG = "CONFIG"
    DATABASE = "DATABASE"
    MIGRATION = "MIGRATION"
    INTERNAL = "INTERNAL"


class ProviderError(Exception):
    """Base exception for all dbproviders errors.

    Subclasses set ``default_category`` and ``default_retryable``; callers
    may override either per instance.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = dict(context or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> ProviderError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(ProviderError):
    """
    Configuration error.

    Never retryable - configuration must be fixed.
    """

    default_category = ErrorCategory.CONFIG
    default_retryable = False


class InvalidConfigurationError(ConfigError):
    """Configuration value is out of the accepted range."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(
            message or f"Invalid configuration for {key}: {value!r}",
            context={"key": key, "value": repr(value)},
        )


class MissingConfigError(ConfigError):
    """Required configuration is missing."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"Missing required configuration: {key}", context={"key": key})


# =============================================================================
# RUNTIME ERRORS
# =============================================================================


class TransientError(ProviderError):
    """Temporary error that may succeed on retry."""

    default_category = ErrorCategory.DATABASE
    default_retryable = True


class ProviderRuntimeFailure(TransientError):
    """Transient connection failure while talking to a client-server engine.

    The provider layer never retries by itself.  ``max_retry_attempts``
    records the budget declared on the options builder so the connection
    layer (or whoever catches this) knows how many attempts are allowed.
    """

    def __init__(self, message: str, *, max_retry_attempts: int = 0, **kwargs: Any):
        super().__init__(message, retryable=max_retry_attempts > 0, **kwargs)
        self.max_retry_attempts = max_retry_attempts

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["max_retry_attempts"] = self.max_retry_attempts
        return result


# =============================================================================
# MIGRATION ERRORS
# =============================================================================


class MigrationError(ProviderError):
    """Error while generating migration SQL."""

    default_category = ErrorCategory.MIGRATION
    default_retryable = False


class UnsupportedOperationError(MigrationError):
    """The SQL generator has no rule for this operation type."""

    def __init__(self, operation: Any):
        self.operation = operation
        super().__init__(
            f"No SQL generation rule for operation {type(operation).__name__}",
            context={"operation": type(operation).__name__},
        )


def is_retryable(error: Exception) -> bool:
    """Check if an error is retryable."""
    if isinstance(error, ProviderError):
        return error.retryable
    return False


__all__ = [
    "ErrorCategory",
    "ProviderError",
    "ConfigError",
    "InvalidConfigurationError",
    "MissingConfigError",
    "TransientError",
    "ProviderRuntimeFailure",
    "MigrationError",
    "UnsupportedOperationError",
    "is_retryable",
]

"""Error types and error-severity handling.

Usage:
    handler = ErrorMode.LENIENT.get_handler()
    handler(KeyGenerationError("key() returned an invalid value"))  # logged, not raised
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, auto

_logger = logging.getLogger(__name__)


class BridgeError(Exception):
    """Base class for all storebridge errors."""

    pass


class ConfigurationError(BridgeError):
    """Raised when a bridge is configured without a usable component kind."""

    pass


class IntegrationError(BridgeError):
    """Raised when an instance has no reachable store at activation time."""

    pass


class KeyGenerationError(BridgeError):
    """Raised when a key generator returns something other than a non-empty string."""

    pass


class LifecycleError(BridgeError):
    """Raised on an illegal binding state transition."""

    pass


def raise_error(error: BridgeError) -> None:
    """Propagate the error to the caller."""
    raise error


def log_error(error: BridgeError) -> None:
    """Log the error and let the caller recover."""
    _logger.warning("%s: %s (recovered)", type(error).__name__, error)


class ErrorMode(Enum):
    """Severity applied to recoverable bridge errors."""

    STRICT = auto()  # Every error aborts activation
    LENIENT = auto()  # Recoverable errors are logged, activation continues

    @classmethod
    def parse(cls, value: ErrorMode | str) -> ErrorMode:
        """Accept an ErrorMode or its case-insensitive name."""
        if isinstance(value, ErrorMode):
            return value
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValueError(f"Unknown error mode: {value!r}") from None

    def get_handler(self) -> Callable[[BridgeError], None]:
        """Get the handler function for this severity.

        Returns:
            Function that either raises or logs the error it is given.
        """
        handlers = {
            ErrorMode.STRICT: raise_error,
            ErrorMode.LENIENT: log_error,
        }
        return handlers[self]

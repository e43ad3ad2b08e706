"""Instance key generation."""

from storebridge.core.key.core import (
    DEFAULT_KEY,
    constant_key,
    default_key,
    generate_key,
    is_valid_key,
)

__all__ = [
    "DEFAULT_KEY",
    "constant_key",
    "default_key",
    "generate_key",
    "is_valid_key",
]

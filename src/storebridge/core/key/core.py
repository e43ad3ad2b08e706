"""Instance key generation and validation.

Usage:
    key = generate_key(instance, lambda vm: vm.props["tab_id"])

    # Lenient: invalid keys fall back to DEFAULT_KEY with a warning
    key = generate_key(instance, broken_generator, error_mode=ErrorMode.LENIENT)
"""

from __future__ import annotations

from typing import Any

from storebridge.core.errors import ErrorMode, KeyGenerationError
from storebridge.core.types import KeyGenerator


DEFAULT_KEY = "default"


def default_key(instance: Any = None) -> str:
    """Constant key generator: every instance of a kind shares one slice.

    Args:
        instance: Instance under construction (ignored).

    Returns:
        DEFAULT_KEY.
    """
    return DEFAULT_KEY


def is_valid_key(value: Any) -> bool:
    """Check whether a value can be used as an instance key.

    Args:
        value: Candidate key.

    Returns:
        True for non-empty strings, False otherwise.
    """
    return isinstance(value, str) and value != ""


def generate_key(
    instance: Any,
    key_generator: KeyGenerator = default_key,
    *,
    error_mode: ErrorMode = ErrorMode.STRICT,
    default: str = DEFAULT_KEY,
) -> str:
    """Produce and validate the instance key for an instance.

    Args:
        instance: Instance under construction, passed to the generator.
        key_generator: Function instance -> key.
        error_mode: STRICT raises on invalid keys, LENIENT substitutes `default`.
        default: Key used when a LENIENT generation fails.

    Returns:
        The generated key, or `default` after a lenient failure.

    Raises:
        KeyGenerationError: If the key is invalid and error_mode is STRICT.
    """
    generated = key_generator(instance)
    if is_valid_key(generated):
        return generated

    if isinstance(generated, str):
        reason = "key() returned an empty string"
    else:
        reason = f"key() returned an invalid value (type {type(generated).__name__})"
    error_mode.get_handler()(KeyGenerationError(reason))
    return default


def constant_key(value: str) -> KeyGenerator:
    """Build a generator that always returns `value`.

    Args:
        value: Key shared by every instance.

    Returns:
        Key generator ignoring its instance argument.
    """
    if value == DEFAULT_KEY:
        return default_key

    def generate(instance: Any = None) -> str:
        return value

    return generate

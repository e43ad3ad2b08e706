"""Configuration settings using Pydantic Settings.

Provides deployment-wide defaults for bridges with environment variable support.

Usage:
    from storebridge.config import BridgeSettings

    # Load from environment variables (STOREBRIDGE_*)
    settings = BridgeSettings()

    # Or override with explicit values
    settings = BridgeSettings(error_mode="lenient", server_rendering=True)
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storebridge.core.key import is_valid_key


class BridgeSettings(BaseSettings):  # type: ignore[misc]
    """Deployment defaults for bridges.

    Attributes:
        namespace: Store module name holding all bridged slices.
        prop_name: Instance attribute exposing the instance key.
        default_key: Key used by the constant generator and lenient fallback.
        error_mode: "strict" raises on recoverable errors, "lenient" logs them.
        cache_reads: Memoize field reads between store changes.
        server_rendering: One-shot rendering; disables read caching.

    Environment Variables:
        STOREBRIDGE_NAMESPACE
        STOREBRIDGE_PROP_NAME
        STOREBRIDGE_DEFAULT_KEY
        STOREBRIDGE_ERROR_MODE
        STOREBRIDGE_CACHE_READS
        STOREBRIDGE_SERVER_RENDERING
    """

    model_config = SettingsConfigDict(
        env_prefix="STOREBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    namespace: str = "bridge"
    prop_name: str = "bridge_key"
    default_key: str = "default"
    error_mode: Literal["strict", "lenient"] = "strict"
    cache_reads: bool = True
    server_rendering: bool = False

    @field_validator("namespace", "prop_name", "default_key")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not is_valid_key(value):
            raise ValueError("must be a non-empty string")
        return value

    def read_cache_enabled(self) -> bool:
        """Whether field reads should be memoized in this deployment."""
        return self.cache_reads and not self.server_rendering

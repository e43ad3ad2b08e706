"""Configuration module using Pydantic Settings.

Usage:
    from storebridge.config import BridgeSettings

    settings = BridgeSettings(namespace="ui")
"""

from storebridge.config.settings import BridgeSettings

__all__ = [
    "BridgeSettings",
]

"""Component host: instance construction and teardown."""

from storebridge.host.component import Component, define_component

__all__ = [
    "Component",
    "define_component",
]

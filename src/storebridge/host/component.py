"""Minimal component host.

Stands in for a UI framework's instance lifecycle: it turns ComponentOptions
into a class, runs `before_create` while constructing instances and
`destroyed` on teardown.

Usage:
    Card = define_component(card_bridge(ComponentOptions(name="UserCard")))
    card = Card(store=store, user_id=7)
    card.destroy()
"""

from __future__ import annotations

from typing import Any, ClassVar

from storebridge.bridge.models import ComponentOptions
from storebridge.core.errors import ConfigurationError
from storebridge.store.protocol import Store


# Instance attributes set by the host itself
RESERVED_NAMES = frozenset(
    {
        "store",
        "parent",
        "props",
        "options",
        "name",
        "destroyed",
        "destroy",
        "define_readonly",
        "_readonly",
        "_destroyed",
    }
)


class Component:
    """Base class of host instances.

    The store is taken from the `store` argument, then the options, then the
    parent instance.

    Args:
        store: Store for this instance.
        parent: Parent instance to inherit the store from.
        **props: Instance properties, available as `self.props`.
    """

    options: ClassVar[ComponentOptions] = ComponentOptions()

    def __init__(self, *, store: Store | None = None, parent: Component | None = None, **props: Any):
        object.__setattr__(self, "_readonly", set())
        self._destroyed = False
        self.parent = parent
        self.props = dict(props)
        if store is None:
            store = self.options.store
        if store is None and parent is not None:
            store = parent.store
        self.store = store
        if self.options.before_create is not None:
            self.options.before_create(self)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._readonly:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def define_readonly(self, name: str, value: Any) -> None:
        """Set an attribute that can never be reassigned."""
        self.__setattr__(name, value)
        self._readonly.add(name)

    @property
    def name(self) -> str | None:
        return self.options.name

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        """Run the teardown hook once. Later calls do nothing."""
        if self._destroyed:
            return
        self._destroyed = True
        if self.options.destroyed is not None:
            self.options.destroyed(self)


def define_component(options: ComponentOptions) -> type[Component]:
    """Build the instance class for a component kind.

    Entries of `options.computed` become class attributes, so descriptors
    such as FieldProxy act on every instance.

    Args:
        options: Component options, usually returned by a bridge.

    Returns:
        Component subclass named after the component kind.

    Raises:
        ConfigurationError: If a computed entry would shadow a host attribute.
    """
    reserved = sorted(set(options.computed) & RESERVED_NAMES)
    if reserved:
        raise ConfigurationError(
            f"Computed names {reserved} of {options.name!r} are reserved by the component host"
        )
    namespace: dict[str, Any] = dict(options.computed)
    namespace["options"] = options
    return type(options.name or "Component", (Component,), namespace)

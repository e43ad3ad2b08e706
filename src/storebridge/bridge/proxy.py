"""Field proxies: per-field accessors backed by a store slice.

A FieldProxy is a data descriptor placed on the component class. Reads
resolve the slice through the instance's current binding on every access;
writes always go through the store's `mutate` mutation.

Usage:
    class Counter(Component):
        count = FieldProxy("count", namespace="bridge")

    counter.count += 1   # commits "bridge/mutate"
"""

from __future__ import annotations

import logging
from typing import Any

from storebridge.bridge.lifecycle import BindingLifecycle, lifecycle_of
from storebridge.core.errors import ErrorMode, IntegrationError
from storebridge.core.mutation import MutatePayload

_logger = logging.getLogger(__name__)

_CACHE_ATTR = "__storebridge_read_cache__"


class FieldProxy:
    """Descriptor exposing one declared slice field as an instance attribute.

    Args:
        field: Declared field name.
        namespace: Namespace the slice lives in.
        cache: Memoize reads until the store's version changes.
        error_mode: How to treat access on an instance without a binding.
    """

    def __init__(
        self,
        field: str,
        namespace: str,
        *,
        cache: bool = True,
        error_mode: ErrorMode = ErrorMode.STRICT,
    ):
        self.field = field
        self.namespace = namespace
        self.cache = cache
        self.error_mode = error_mode

    def __repr__(self) -> str:
        return f"FieldProxy({self.field!r}, namespace={self.namespace!r})"

    def _lifecycle(self, instance: Any) -> BindingLifecycle | None:
        lifecycle = lifecycle_of(instance, self.namespace)
        if lifecycle is None or lifecycle.binding is None or lifecycle.store is None:
            self.error_mode.get_handler()(
                IntegrationError(
                    f"Field {self.field!r} used on {type(instance).__name__} "
                    f"without a store binding"
                )
            )
            return None
        return lifecycle

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        lifecycle = self._lifecycle(instance)
        if lifecycle is None:
            return None
        binding, store = lifecycle.binding, lifecycle.store
        assert binding is not None and store is not None

        memo: dict[tuple[str, str], tuple[int, Any]] | None = None
        if self.cache:
            memo = vars(instance).setdefault(_CACHE_ATTR, {})
            hit = memo.get((self.namespace, self.field))
            if hit is not None and hit[0] == store.version:
                return hit[1]

        try:
            value = store.state[self.namespace][binding.component_kind][binding.instance_key][
                self.field
            ]
        except KeyError:
            raise AttributeError(
                f"{binding.component_kind}[{binding.instance_key!r}] has no field "
                f"{self.field!r} in namespace {self.namespace!r}"
            ) from None

        if memo is not None:
            memo[(self.namespace, self.field)] = (store.version, value)
        return value

    def __set__(self, instance: Any, value: Any) -> None:
        lifecycle = self._lifecycle(instance)
        if lifecycle is None:
            _logger.warning("Ignoring write to unbound field %s", self.field)
            return
        binding, store = lifecycle.binding, lifecycle.store
        assert binding is not None and store is not None
        store.commit(
            f"{self.namespace}/mutate",
            MutatePayload(
                component_kind=binding.component_kind,
                key=binding.instance_key,
                field=self.field,
                value=value,
            ),
        )

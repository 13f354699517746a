"""A named group of keys within a document.

Keys are stored and looked up in lower case. ``section[key]`` creates an
empty ``Value`` on a miss, ``section.require(key)`` raises instead, and
``get``/``in`` never insert.
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, KeysView, ValuesView
from typing import Any

from ._codec import normalize_name
from ._converters import ConverterRegistry, default_registry
from ._types import KeyNotFoundError
from ._value import Value


class Section:
    """Mapping from normalized key name to ``Value``."""

    __slots__ = ("_values", "_registry")

    def __init__(self, registry: ConverterRegistry | None = None) -> None:
        self._registry = registry or default_registry
        self._values: dict[str, Value] = {}

    @property
    def registry(self) -> ConverterRegistry:
        return self._registry

    def _coerce(self, data: Any) -> Value:
        if isinstance(data, Value):
            return data
        return Value.of(data, registry=self._registry)

    # -- lookup -------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """Return the Value under *key*, or *default* (as-is) when absent."""
        return self._values.get(normalize_name(key), default)

    def require(self, key: str) -> Value:
        try:
            return self._values[normalize_name(key)]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def has_key(self, key: str) -> bool:
        return normalize_name(key) in self._values

    def key_count(self) -> int:
        return len(self._values)

    # -- mutation -----------------------------------------------------------

    def set(self, key: str, data: Any) -> None:
        """Store *data* under *key*, replacing any previous Value.

        *data* may be a ``Value``, a scalar or a sequence of scalars.
        """
        self._values[normalize_name(key)] = self._coerce(data)

    def remove_key(self, key: str) -> bool:
        return self._values.pop(normalize_name(key), None) is not None

    def clear(self) -> None:
        self._values.clear()

    # -- mapping protocol ---------------------------------------------------

    def __getitem__(self, key: str) -> Value:
        return self._values.setdefault(normalize_name(key), Value(registry=self._registry))

    def __setitem__(self, key: str, data: Any) -> None:
        self.set(key, data)

    def __delitem__(self, key: str) -> None:
        if not self.remove_key(key):
            raise KeyNotFoundError(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_key(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def keys(self) -> KeysView[str]:
        return self._values.keys()

    def values(self) -> ValuesView[Value]:
        return self._values.values()

    def items(self) -> ItemsView[str, Value]:
        return self._values.items()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self._values == other._values

    __hash__ = None

    def __repr__(self) -> str:
        return f"Section({dict(self._values)!r})"

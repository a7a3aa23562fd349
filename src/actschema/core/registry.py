"""
Frozen key-value registries keyed by action type.

A compiled schema exposes several lookups (declared type -> ParsedAction, declared type ->
namespaced type, namespaced type -> tester, declared type -> creator). Each is an
ActionRegistry: an immutable Mapping whose key universe is fixed when it is built.

Notes:
    - ``registry[key]`` for an undeclared key raises UnknownActionError (a KeyError), so a
      typo in a handler table or a creator lookup fails loudly.
    - ``registry.get(key)`` and ``key in registry`` behave as for any Mapping and are what
      the validation path uses, since an unknown type there is reported, not raised.
    - Registries are built from an iterable of pairs; a repeated key raises SchemaError.

Examples:
    >>> reg = ActionRegistry("actions", [("LOGIN", "AUTH_LOGIN")])
    >>> reg["LOGIN"], reg.get("LOGOUT"), "LOGIN" in reg
    ('AUTH_LOGIN', None, True)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from .errors import SchemaError, UnknownActionError

__all__ = ["ActionRegistry"]

V = TypeVar("V")


class ActionRegistry(Mapping[str, V], Generic[V]):
    """Immutable mapping with a fixed key universe."""

    __slots__ = ("_name", "_data")

    def __init__(self, name: str, items: Iterable[tuple[str, V]]) -> None:
        data: dict[str, V] = {}
        for key, value in items:
            if key in data:
                raise SchemaError(f"duplicate key {key!r} in {name}")
            data[key] = value
        self._name = name
        self._data = MappingProxyType(data)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> V:
        try:
            return self._data[key]
        except KeyError:
            raise UnknownActionError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: str, default: V | None = None) -> V | None:  # type: ignore[override]
        return self._data.get(key, default)

    def __repr__(self) -> str:
        return f"ActionRegistry({self._name!r}, {dict(self._data)!r})"

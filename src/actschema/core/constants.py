"""
Defaults shared by the compiler and the pipeline factories.

This module is zero-IO and uses only the Python standard library.

Notes:
    - NAMESPACE_SEPARATOR joins a configured namespace and a declared type
      (``"AUTH" + "_" + "LOGIN"``).
    - DEFAULT_IGNORE_ACTIONS covers effect-runner bookkeeping and router location
      updates that flow through a shared store but are never declared in a schema.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "NO_PAYLOAD",
    "NAMESPACE_SEPARATOR",
    "DEFAULT_IGNORE_ACTIONS",
    "MAX_POSITIONAL_ARGS",
]


class _NoPayload:
    """Sentinel type for an action that carries no payload."""

    _instance: _NoPayload | None = None

    def __new__(cls) -> _NoPayload:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_PAYLOAD"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NO_PAYLOAD"


# Absent payload marker; distinct from None, which is a present value.
NO_PAYLOAD: Final = _NoPayload()

NAMESPACE_SEPARATOR: Final[str] = "_"

DEFAULT_IGNORE_ACTIONS: Final[tuple[str, ...]] = (
    "EFFECT_TRIGGERED",
    "EFFECT_RESOLVED",
    "@@router/UPDATE_LOCATION",
)

# Creators rebuild structured payloads from at most this many positional values.
MAX_POSITIONAL_ARGS: Final[int] = 3

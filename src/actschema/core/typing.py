"""
Lightweight typing aliases used across core declarations, creators, and pipeline factories.

Provides minimal NewTypes and callable aliases to improve readability and static checks.
This module contains no runtime logic and is zero-IO.

Notes:
    - NamespacedType is the declared type after the namespace prefix; it is what travels
      through the dispatch pipeline.
    - Keep the surface small and stable to avoid churn in dependents.

Examples:
    >>> from actschema.core.typing import NamespacedType
    >>> def qualify(t: str) -> NamespacedType:
    ...     return NamespacedType(f"AUTH_{t}")
    >>> qualify("LOGIN")
    'AUTH_LOGIN'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NewType

__all__ = [
    "NamespacedType",
    "Predicate",
    "Formatter",
    "Unformatter",
    "Handler",
    "Reducer",
    "ErrorReporter",
    "Dispatch",
    "Middleware",
]

NamespacedType = NewType("NamespacedType", str)

Predicate = Callable[[Any], bool]
# (namespaced_type, payload) -> action; payload may be NO_PAYLOAD.
Formatter = Callable[..., Any]
Unformatter = Callable[[Any], Any]
# handler(state, payload, action) -> new state
Handler = Callable[[Any, Any, Any], Any]
Reducer = Callable[[Any, Any], Any]
ErrorReporter = Callable[[Any], None]
Dispatch = Callable[[Any], Any]
Middleware = Callable[[Any], Callable[[Dispatch], Dispatch]]

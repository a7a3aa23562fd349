"""
Core exception types raised while compiling action schemas and building reducers.

Provides typed exceptions for construction-time failures:
- SchemaError for malformed declarations (argument shapes, duplicate types, namespace).
- UnknownActionError for lookups of action types outside a schema's key universe.
- HandlerError for reducer handler tables holding non-callable values.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Validation of dispatched actions never raises; the middleware reports through
      its ``on_error`` callback instead (see actschema.pipeline.middleware).

Examples:
    Catch an unknown handler key while building a reducer.

    >>> from actschema.core.errors import UnknownActionError
    >>> try:
    ...     raise UnknownActionError("LOGOUT")
    ... except KeyError as e:
    ...     msg = str(e)
    >>> "LOGOUT" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "UnknownActionError",
    "HandlerError",
]


class SchemaError(ValueError):
    """Schema-level declaration failure (argument shape, duplicate type, namespace)."""


class UnknownActionError(SchemaError, KeyError):
    """Action type is not declared in the schema."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return f"unknown action: {self.args[0]}" if self.args else "unknown action"


class HandlerError(SchemaError, TypeError):
    """Reducer handler registered for an action type is not callable."""

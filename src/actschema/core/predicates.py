"""
Payload predicates for use in argument declarations.

Each predicate takes one value and returns a bool. They are intended as the ``test``
slot of an argument declaration, e.g. ``("user_id", is_string)``.

Notes:
    - ``is_object`` accepts any Mapping; None and sequences are rejected.
    - ``is_number`` rejects bool even though bool subclasses int.
    - ``matches_model`` adapts a Pydantic v2 model into a predicate so closed payload
      shapes can reuse the same ``extra="forbid"`` models used elsewhere.

Examples:
    >>> from actschema.core.predicates import is_number, is_object, is_string
    >>> is_number(3), is_number(True), is_string("x"), is_object({"a": 1})
    (True, False, True, True)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from .typing import Predicate

__all__ = [
    "is_object",
    "is_number",
    "is_string",
    "matches_model",
]


def is_object(value: Any) -> bool:
    """Return True when value is a non-null structured value (a Mapping)."""
    return isinstance(value, Mapping)


def is_number(value: Any) -> bool:
    """Return True for int/float values, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def matches_model(model: type[BaseModel]) -> Predicate:
    """
    Build a predicate that accepts values validating against a Pydantic model.

    Args:
        model (type[BaseModel]): Pydantic v2 model class describing the value.

    Returns:
        Predicate: ``value -> bool``; False when ``model.model_validate`` raises
        ``pydantic.ValidationError``.

    Examples:
        >>> from pydantic import BaseModel, ConfigDict
        >>> class Point(BaseModel):
        ...     model_config = ConfigDict(extra="forbid")
        ...     x: int
        ...     y: int
        >>> check = matches_model(Point)
        >>> check({"x": 1, "y": 2}), check({"x": 1})
        (True, False)
    """

    def _test(value: Any) -> bool:
        try:
            model.model_validate(value)
        except ValidationError:
            return False
        return True

    _test.__name__ = f"matches_{model.__name__}"
    return _test

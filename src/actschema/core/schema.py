"""
Action envelopes, creators, and payload testers derived from parsed declarations.

Responsibilities
- Define the default action shape (``{"type": ..., "payload": ...}``) and its inverse.
- Build ActionCreator objects that produce namespaced actions, including the positional
  variant ``creator.by_position(a, b, c)``.
- Build the tester for one parsed action: a predicate over the payload that enforces
  either "no payload", "whole payload", or a closed set of named fields.

Style
- Zero-IO (stdlib + pydantic only).
- Everything here is built once per compiled schema and never mutated afterwards.

References
- declarations: src/actschema/core/declarations.py (ParsedAction, ArgumentSpec)
- compiler: src/actschema/compiler.py (assembles creators and testers per schema)
- tests: tests/core/*
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from .constants import MAX_POSITIONAL_ARGS, NAMESPACE_SEPARATOR, NO_PAYLOAD
from .declarations import ParsedAction
from .typing import Formatter, NamespacedType, Predicate

__all__ = [
    "Envelope",
    "default_format",
    "default_unformat",
    "as_envelope",
    "namespaced",
    "ActionCreator",
    "build_tester",
]


class Envelope(NamedTuple):
    """Type and payload extracted from an action; payload is NO_PAYLOAD when absent."""

    type: Any
    payload: Any = NO_PAYLOAD


def default_format(type: str, payload: Any = NO_PAYLOAD) -> dict[str, Any]:
    """
    Build a plain action mapping.

    The ``"payload"`` key is omitted when the payload is NO_PAYLOAD.

    Examples:
        >>> default_format("AUTH_LOGIN", {"user": "ada"})
        {'type': 'AUTH_LOGIN', 'payload': {'user': 'ada'}}
        >>> default_format("AUTH_LOGOUT")
        {'type': 'AUTH_LOGOUT'}
    """
    if payload is NO_PAYLOAD:
        return {"type": type}
    return {"type": type, "payload": payload}


def default_unformat(action: Any) -> Envelope:
    """
    Extract ``(type, payload)`` from a mapping or an object with ``type``/``payload`` attributes.

    A missing type yields ``None``; a missing payload yields NO_PAYLOAD.
    """
    if isinstance(action, Mapping):
        return Envelope(action.get("type"), action.get("payload", NO_PAYLOAD))
    return Envelope(getattr(action, "type", None), getattr(action, "payload", NO_PAYLOAD))


def as_envelope(value: Any) -> Envelope:
    """
    Coerce an unformatter's result into an Envelope.

    Accepts a ``(type, payload)`` pair, or anything default_unformat understands
    (a mapping or an object with ``type``/``payload`` attributes).
    """
    if isinstance(value, tuple) and len(value) == 2:
        return Envelope(*value)
    return default_unformat(value)


def namespaced(type: str, namespace: str) -> NamespacedType:
    """
    Apply a namespace to a declared type.

    Examples:
        >>> namespaced("LOGIN", "AUTH"), namespaced("LOGIN", "")
        ('AUTH_LOGIN', 'LOGIN')
    """
    if not namespace:
        return NamespacedType(type)
    return NamespacedType(namespace + NAMESPACE_SEPARATOR + type)


class ActionCreator:
    """
    Callable that builds namespaced actions for one declared type.

    Attributes:
        type (str): Declared type.
        action_type (str): Namespaced type carried by produced actions.
        doc (str): Documentation line of the declaration.

    Examples:
        >>> from actschema.core.declarations import parse_action
        >>> from actschema.core.predicates import is_string
        >>> login = ActionCreator(parse_action(["LOGIN", ("user", is_string)]), "AUTH_LOGIN")
        >>> login({"user": "ada"})
        {'type': 'AUTH_LOGIN', 'payload': {'user': 'ada'}}
        >>> login.by_position("ada")
        {'type': 'AUTH_LOGIN', 'payload': {'user': 'ada'}}
    """

    __slots__ = ("_action", "_action_type", "_format")

    def __init__(
        self,
        action: ParsedAction,
        action_type: str,
        format: Formatter = default_format,
    ) -> None:
        self._action = action
        self._action_type = action_type
        self._format = format

    @property
    def type(self) -> str:
        return self._action.type

    @property
    def action_type(self) -> str:
        return self._action_type

    @property
    def doc(self) -> str:
        return self._action.doc

    def __call__(self, payload: Any = NO_PAYLOAD) -> Any:
        if payload is NO_PAYLOAD:
            return self._format(self._action_type)
        return self._format(self._action_type, payload)

    def by_position(self, a: Any = None, b: Any = None, c: Any = None) -> Any:
        """
        Build an action from up to three positional values, in argument declaration order.

        - No declared arguments: the action has no payload; values are ignored.
        - Whole-payload argument: ``a`` is the entire payload.
        - Named arguments: ``{id_0: a, id_1: b, id_2: c}`` limited to the declared count.
          Slots not passed are filled with None.
        """
        args = self._action.args
        if not args:
            return self._format(self._action_type)
        if args[0].whole_payload:
            return self._format(self._action_type, a)
        values = (a, b, c)
        payload = {
            arg.id: value for arg, value in zip(args[:MAX_POSITIONAL_ARGS], values)
        }
        return self._format(self._action_type, payload)

    def __repr__(self) -> str:
        return f"ActionCreator({self._action_type!r})"


def build_tester(action: ParsedAction) -> Predicate:
    """
    Build the payload predicate for one parsed action.

    Args:
        action (ParsedAction): Parsed declaration.

    Returns:
        Predicate: ``payload -> bool`` where
            - no arguments: payload must be NO_PAYLOAD;
            - whole payload: the argument's own test;
            - named arguments: payload is a Mapping with exactly the declared keys and
              every field passes its test.

    Examples:
        >>> from actschema.core.declarations import parse_action
        >>> from actschema.core.predicates import is_number
        >>> test = build_tester(parse_action(["MOVE", ("x", is_number), ("y", is_number)]))
        >>> test({"x": 1, "y": 2}), test({"x": 1, "y": 2, "z": 3}), test({"x": 1})
        (True, False, False)
    """
    args = action.args
    if not args:

        def _no_payload(payload: Any) -> bool:
            return payload is NO_PAYLOAD

        return _no_payload

    if action.takes_whole_payload:
        whole_test = args[0].test

        def _whole(payload: Any) -> bool:
            return bool(whole_test(payload))

        return _whole

    expected = frozenset(action.ids)

    def _fields(payload: Any) -> bool:
        if not isinstance(payload, Mapping):
            return False
        # Closed shape: no extras, none missing.
        if set(payload.keys()) != expected:
            return False
        return all(arg.test(payload[arg.id]) for arg in args)

    return _fields

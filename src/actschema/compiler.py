"""
Schema compiler: turns action declarations into a CompiledSchema.

``compile_schema`` runs once per schema. It parses every declaration, then derives the
lookups a host store needs:

- ``schema``: declared type -> ParsedAction
- ``actions``: declared type -> namespaced type
- ``testers``: namespaced type -> payload predicate
- ``action_creators``: declared type -> ActionCreator

plus ``test(action)``, ``create_middleware(...)`` and ``create_reducer(...)``.

Import DAG discipline
- Depends on actschema.core and actschema.pipeline; nothing imports this module but the
  package root.

Examples
--------
>>> from actschema import compile_schema
>>> from actschema.core.predicates import is_string
>>> auth = compile_schema(
...     [["LOGIN", "Log a user in", ("user", is_string)], ["LOGOUT"]],
...     namespace="AUTH",
... )
>>> auth.actions["LOGIN"]
'AUTH_LOGIN'
>>> auth.action_creators["LOGIN"].by_position("ada")
{'type': 'AUTH_LOGIN', 'payload': {'user': 'ada'}}
>>> auth.test({"type": "AUTH_LOGOUT"}), auth.test({"type": "AUTH_LOGOUT", "payload": 1})
(True, False)
>>> auth.test({"type": "OTHER"}) is None
True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .core.declarations import ParsedAction, parse_action
from .core.errors import SchemaError
from .core.registry import ActionRegistry
from .core.schema import (
    ActionCreator,
    Envelope,
    as_envelope,
    build_tester,
    default_format,
    default_unformat,
    namespaced,
)
from .core.typing import (
    ErrorReporter,
    Formatter,
    Handler,
    Middleware,
    Predicate,
    Reducer,
    Unformatter,
)
from .pipeline.config import MiddlewareSettings
from .pipeline.middleware import create_middleware
from .pipeline.reducer import create_reducer

logger = logging.getLogger(__name__)

__all__ = [
    "CompiledSchema",
    "compile_schema",
]


@dataclass(frozen=True)
class CompiledSchema:
    """
    Immutable result of compiling one schema.

    Attributes:
        schema (ActionRegistry[ParsedAction]): Declared type -> parsed declaration.
        actions (ActionRegistry[str]): Declared type -> namespaced type.
        testers (ActionRegistry[Predicate]): Namespaced type -> payload predicate.
        action_creators (ActionRegistry[ActionCreator]): Declared type -> creator.
        namespace (str): Prefix applied to every declared type ("" for none).
        format (Formatter): ``(namespaced_type, payload?) -> action``.
        unformat (Unformatter): ``action -> (type, payload)``.
    """

    schema: ActionRegistry[ParsedAction]
    actions: ActionRegistry[str]
    testers: ActionRegistry[Predicate]
    action_creators: ActionRegistry[ActionCreator]
    namespace: str
    format: Formatter
    unformat: Unformatter

    def test(self, action: Any) -> bool | None:
        """
        Validate an action against its declaration.

        Returns:
            bool | None: True/False from the payload tester, or None when the action's
            type has no tester (untestable, as opposed to invalid). A tester that raises
            counts as False.
        """
        type_, payload = self.unformat(action)
        try:
            tester = self.testers.get(type_)
        except TypeError:
            # Unhashable type: no tester can exist for it.
            return None
        if tester is None:
            return None
        try:
            return tester(payload)
        except Exception:
            logger.debug("tester for %r raised", type_, exc_info=True)
            return False

    def create_middleware(
        self,
        settings: MiddlewareSettings | None = None,
        *,
        ignore_actions: Iterable[str] | None = None,
        check_payloads: bool | None = None,
        on_error: ErrorReporter | None = None,
    ) -> Middleware:
        """Build a validating middleware stage bound to this schema's testers."""
        return create_middleware(
            self.testers,
            self.unformat,
            settings,
            ignore_actions=ignore_actions,
            check_payloads=check_payloads,
            on_error=on_error,
        )

    def create_reducer(self, handlers: Mapping[str, Handler], init_state: Any = None) -> Reducer:
        """Build a reducer from a handler table keyed by declared action type."""
        return create_reducer(self.actions, self.unformat, handlers, init_state)


def _coercing(unformat: Unformatter) -> Unformatter:
    def _unformat(action: Any) -> Envelope:
        return as_envelope(unformat(action))

    return _unformat


def compile_schema(
    declarations: Iterable[Sequence[Any] | ParsedAction],
    *,
    format: Formatter | None = None,
    unformat: Unformatter | None = None,
    namespace: str = "",
) -> CompiledSchema:
    """
    Compile action declarations into a CompiledSchema.

    Args:
        declarations: Ordered ``[type, doc?, *args]`` declarations.
        format (Formatter | None): Action constructor; defaults to ``{"type", "payload"}``
            mappings without a payload key when there is no payload.
        unformat (Unformatter | None): Inverse of ``format``; may return a
            ``(type, payload)`` pair or an action-like mapping/object. Defaults to reading
            ``type``/``payload`` from a mapping or attributes.
        namespace (str): Prefix joined to every declared type with ``"_"``.

    Returns:
        CompiledSchema

    Raises:
        SchemaError: On malformed declarations, duplicate types, or a non-string namespace.
    """
    if not isinstance(namespace, str):
        raise SchemaError(f"namespace must be a string: {namespace!r}")
    fmt = format or default_format
    unfmt = default_unformat if unformat is None else _coercing(unformat)

    parsed = [parse_action(decl) for decl in declarations]

    seen: set[str] = set()
    for action in parsed:
        if action.type in seen:
            raise SchemaError(f"duplicate action type: {action.type}")
        seen.add(action.type)

    nametable = {action.type: namespaced(action.type, namespace) for action in parsed}

    schema = ActionRegistry("schema", ((a.type, a) for a in parsed))
    actions = ActionRegistry("actions", nametable.items())
    testers = ActionRegistry("testers", ((nametable[a.type], build_tester(a)) for a in parsed))
    creators = ActionRegistry(
        "action_creators",
        ((a.type, ActionCreator(a, nametable[a.type], fmt)) for a in parsed),
    )
    logger.debug("compiled %d action types (namespace=%r)", len(parsed), namespace)

    return CompiledSchema(
        schema=schema,
        actions=actions,
        testers=testers,
        action_creators=creators,
        namespace=namespace,
        format=fmt,
        unformat=unfmt,
    )

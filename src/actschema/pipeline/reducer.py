"""
Reducer construction from a handler table keyed by declared action type.

``create_reducer`` validates the table once, rewrites its keys to namespaced types, and
returns ``reducer(state, action)``. Actions without a handler return ``state`` unchanged
(the same object), so unrelated actions in a shared store are no-ops.

Notes:
    - Unknown keys raise UnknownActionError and non-callable values raise HandlerError,
      both at construction time.
    - Handlers are called as ``handler(state, payload, action)``; payload is NO_PAYLOAD
      for actions that carry none.
    - ``state is None`` selects ``init_state``, the way a store seeds a fresh reducer.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from actschema.core.errors import HandlerError, UnknownActionError
from actschema.core.typing import Handler, Reducer, Unformatter

logger = logging.getLogger(__name__)

__all__ = ["create_reducer"]


def create_reducer(
    actions: Mapping[str, str],
    unformat: Unformatter,
    handlers: Mapping[str, Handler],
    init_state: Any = None,
) -> Reducer:
    """
    Build a reducer dispatching on namespaced action types.

    Args:
        actions (Mapping[str, str]): Declared type -> namespaced type.
        unformat (Unformatter): Action -> ``(type, payload)`` extraction.
        handlers (Mapping[str, Handler]): Declared type -> ``handler(state, payload, action)``.
        init_state (Any): State used when the reducer is called with ``state=None``.

    Returns:
        Reducer: ``(state, action) -> new_state``.

    Raises:
        UnknownActionError: If a handler key is not a declared action type.
        HandlerError: If a handler value is not callable.

    Examples:
        >>> reducer = create_reducer(
        ...     {"INC": "COUNTER_INC"},
        ...     lambda a: (a["type"], a.get("payload")),
        ...     {"INC": lambda state, payload, action: state + payload},
        ...     init_state=0,
        ... )
        >>> reducer(None, {"type": "COUNTER_INC", "payload": 2})
        2
    """
    table: dict[str, Handler] = {}
    for key, fn in handlers.items():
        if key not in actions:
            raise UnknownActionError(key)
        if not callable(fn):
            raise HandlerError(f"{key} is not a function")
        table[actions[key]] = fn
    logger.debug("reducer built for %d action types", len(table))

    def reducer(state: Any, action: Any) -> Any:
        if state is None:
            state = init_state
        type_, payload = unformat(action)
        handler = table.get(type_)
        if handler is None:
            return state
        return handler(state, payload, action)

    return reducer

"""
Validating middleware stage for a dispatch pipeline.

The stage observes every action on its way to the reducer and reports unknown or invalid
ones through ``on_error``. It never blocks, rewrites, or delays an action: the action is
always handed to the next stage and that stage's result is returned.

Decision table for one action (after unformatting to ``(type, payload)``):

| Condition                                   | Outcome
|---------------------------------------------|------------------------------
| type in ``ignore_actions``                  | skip
| tester registered, ``check_payloads`` False | valid (tester presence suffices)
| tester registered, ``check_payloads`` True  | valid if tester passes, else report
| no tester registered                        | report
| unformat or tester raises                   | report

Pipeline shape: ``middleware(store) -> (next_dispatch) -> (action) -> result``. The store
argument is accepted for compatibility with hosts that pass it and is not used.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from actschema.core.typing import Dispatch, ErrorReporter, Middleware, Predicate, Unformatter

from .config import MiddlewareSettings

logger = logging.getLogger(__name__)

__all__ = ["create_middleware"]


def create_middleware(
    testers: Mapping[str, Predicate],
    unformat: Unformatter,
    settings: MiddlewareSettings | None = None,
    *,
    ignore_actions: Iterable[str] | None = None,
    check_payloads: bool | None = None,
    on_error: ErrorReporter | None = None,
) -> Middleware:
    """
    Build a validating middleware stage.

    Args:
        testers (Mapping[str, Predicate]): Namespaced type -> payload predicate.
        unformat (Unformatter): Action -> ``(type, payload)`` extraction.
        settings (MiddlewareSettings | None): Base settings; defaults when None.
        ignore_actions (Iterable[str] | None): Replaces ``settings.ignore_actions``.
        check_payloads (bool | None): Replaces ``settings.check_payloads``.
        on_error (ErrorReporter | None): Replaces ``settings.on_error``.

    Returns:
        Middleware: ``store -> next_dispatch -> action -> result``.

    Examples:
        >>> seen = []
        >>> mw = create_middleware({"PING": lambda p: True}, lambda a: (a["type"], None),
        ...                        on_error=seen.append)
        >>> dispatch = mw(None)(lambda action: "reduced")
        >>> dispatch({"type": "PING"}), dispatch({"type": "PONG"}), seen
        ('reduced', 'reduced', [{'type': 'PONG'}])
    """
    s = (settings or MiddlewareSettings()).with_overrides(
        ignore_actions=ignore_actions,
        check_payloads=check_payloads,
        on_error=on_error,
    )
    ignored = frozenset(s.ignore_actions)
    deep = s.check_payloads
    report = s.on_error
    logger.debug(
        "validating middleware built (check_payloads=%s, ignored=%d, testers=%d)",
        deep,
        len(ignored),
        len(testers),
    )

    def _valid(action: Any) -> bool:
        type_, payload = unformat(action)
        if type_ in ignored:
            return True
        tester = testers.get(type_)
        if tester is None:
            return False
        return not deep or bool(tester(payload))

    def _check(action: Any) -> None:
        try:
            valid = _valid(action)
        except Exception:
            # Raising testers and unhashable types count as invalid.
            logger.debug("validation raised for %r", action, exc_info=True)
            valid = False
        if not valid:
            report(action)

    def middleware(store: Any = None) -> Callable[[Dispatch], Dispatch]:
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                _check(action)
                return next_dispatch(action)

            return dispatch

        return wrap

    return middleware

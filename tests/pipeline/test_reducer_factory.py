import pytest

from actschema.core.constants import NO_PAYLOAD
from actschema.core.errors import HandlerError, UnknownActionError
from actschema.core.schema import default_unformat
from actschema.pipeline.reducer import create_reducer

ACTIONS = {"INC": "COUNTER_INC", "RESET": "COUNTER_RESET"}


def test_handlers_dispatch_on_namespaced_type() -> None:
    calls = []

    def inc(state, payload, action):
        calls.append((state, payload, action))
        return state + payload

    reducer = create_reducer(ACTIONS, default_unformat, {"INC": inc}, init_state=0)
    action = {"type": "COUNTER_INC", "payload": 5}
    assert reducer(1, action) == 6
    assert calls == [(1, 5, action)]


def test_declared_type_is_not_dispatched_without_namespace() -> None:
    reducer = create_reducer(
        ACTIONS, default_unformat, {"INC": lambda s, p, a: s + 1}, init_state=0
    )
    assert reducer(3, {"type": "INC", "payload": 1}) == 3


def test_unregistered_type_returns_same_state_object() -> None:
    state = {"count": 1}
    reducer = create_reducer(ACTIONS, default_unformat, {"INC": lambda s, p, a: s})
    assert reducer(state, {"type": "SOMETHING_ELSE"}) is state


def test_none_state_selects_init_state() -> None:
    init = {"count": 0}
    reducer = create_reducer(ACTIONS, default_unformat, {}, init_state=init)
    assert reducer(None, {"type": "@@INIT"}) is init


def test_handler_receives_no_payload_sentinel() -> None:
    seen = []
    reducer = create_reducer(
        ACTIONS,
        default_unformat,
        {"RESET": lambda s, p, a: seen.append(p) or 0},
        init_state=10,
    )
    assert reducer(None, {"type": "COUNTER_RESET"}) == 0
    assert seen == [NO_PAYLOAD]


def test_unknown_handler_key_raises() -> None:
    with pytest.raises(UnknownActionError, match="DEC"):
        create_reducer(ACTIONS, default_unformat, {"DEC": lambda s, p, a: s})


def test_non_callable_handler_raises() -> None:
    with pytest.raises(HandlerError, match="INC is not a function"):
        create_reducer(ACTIONS, default_unformat, {"INC": 42})

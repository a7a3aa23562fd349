from types import SimpleNamespace

from actschema.core.constants import NO_PAYLOAD
from actschema.core.declarations import parse_action
from actschema.core.predicates import is_number, is_object, is_string
from actschema.core.schema import (
    ActionCreator,
    Envelope,
    as_envelope,
    build_tester,
    default_format,
    default_unformat,
    namespaced,
)


def test_default_format_omits_absent_payload() -> None:
    assert default_format("PING") == {"type": "PING"}
    assert default_format("PING", None) == {"type": "PING", "payload": None}


def test_default_unformat_mapping_and_attributes() -> None:
    assert default_unformat({"type": "PING"}) == Envelope("PING", NO_PAYLOAD)
    assert default_unformat({"type": "SET", "payload": 3}) == Envelope("SET", 3)
    obj = SimpleNamespace(type="SET", payload={"x": 1})
    assert default_unformat(obj) == Envelope("SET", {"x": 1})
    assert default_unformat(SimpleNamespace(type="PING")).payload is NO_PAYLOAD


def test_as_envelope_accepts_pairs_and_actions() -> None:
    assert as_envelope(("A", 1)) == Envelope("A", 1)
    assert as_envelope({"type": "A"}) == Envelope("A", NO_PAYLOAD)


def test_namespaced() -> None:
    assert namespaced("LOGIN", "NS") == "NS_LOGIN"
    assert namespaced("LOGIN", "") == "LOGIN"


def test_no_payload_sentinel_is_falsy_singleton() -> None:
    assert not NO_PAYLOAD
    assert repr(NO_PAYLOAD) == "NO_PAYLOAD"
    assert type(NO_PAYLOAD)() is NO_PAYLOAD


def test_creator_attributes_and_call() -> None:
    creator = ActionCreator(parse_action(["LOGIN", "Log in", ("user", is_string)]), "NS_LOGIN")
    assert (creator.type, creator.action_type, creator.doc) == ("LOGIN", "NS_LOGIN", "Log in")
    assert creator({"user": "ada"}) == {"type": "NS_LOGIN", "payload": {"user": "ada"}}
    assert creator() == {"type": "NS_LOGIN"}


def test_by_position_zero_arguments_ignores_values() -> None:
    creator = ActionCreator(parse_action(["PING"]), "PING")
    assert creator.by_position(1, 2, 3) == {"type": "PING"}


def test_by_position_whole_payload() -> None:
    creator = ActionCreator(parse_action(["SET_TOKEN", is_string]), "SET_TOKEN")
    assert creator.by_position("abc", "ignored") == {"type": "SET_TOKEN", "payload": "abc"}


def test_by_position_matches_keyword_payload_for_three_arguments() -> None:
    action = parse_action(["RGB", ("r", is_number), ("g", is_number), ("b", is_number)])
    creator = ActionCreator(action, "RGB")
    assert creator.by_position(1, 2, 3) == creator({"r": 1, "g": 2, "b": 3})


def test_by_position_uses_only_declared_slots() -> None:
    creator = ActionCreator(parse_action(["MOVE", ("x", is_number), ("y", is_number)]), "MOVE")
    assert creator.by_position(1, 2, 3) == {"type": "MOVE", "payload": {"x": 1, "y": 2}}
    assert creator.by_position(1) == {"type": "MOVE", "payload": {"x": 1, "y": None}}


def test_by_position_caps_at_three_arguments() -> None:
    action = parse_action(
        ["WIDE", ("a", is_number), ("b", is_number), ("c", is_number), ("d", is_number)]
    )
    creator = ActionCreator(action, "WIDE")
    assert creator.by_position(1, 2, 3)["payload"] == {"a": 1, "b": 2, "c": 3}


def test_creator_uses_custom_formatter() -> None:
    def fmt(type, payload=NO_PAYLOAD):
        return (type, payload)

    creator = ActionCreator(parse_action(["PING"]), "NS_PING", fmt)
    assert creator() == ("NS_PING", NO_PAYLOAD)


def test_zero_argument_tester() -> None:
    test = build_tester(parse_action(["PING"]))
    assert test(NO_PAYLOAD) is True
    assert test(None) is False
    assert test({}) is False


def test_whole_payload_tester() -> None:
    test = build_tester(parse_action(["SET_TOKEN", is_string]))
    assert test("abc") is True
    assert test(3) is False


def test_named_tester_enforces_closed_shape() -> None:
    test = build_tester(parse_action(["PROFILE", ("name", is_string), ("meta", is_object)]))
    assert test({"name": "ada", "meta": {}}) is True
    assert test({"name": "ada", "meta": {}, "extra": 1}) is False
    assert test({"name": "ada"}) is False
    assert test({"name": 1, "meta": {}}) is False
    assert test(None) is False
    assert test(NO_PAYLOAD) is False
    assert test(["name", "meta"]) is False

import pytest

from actschema.core.declarations import (
    DocumentedNamedArg,
    NamedArg,
    ParsedAction,
    WholePayloadArg,
    parse_action,
    parse_argument,
)
from actschema.core.errors import SchemaError
from actschema.core.predicates import is_number, is_string


def test_bare_predicate_at_position_zero_is_whole_payload() -> None:
    spec = parse_argument(is_number, 0)
    assert spec.whole_payload is True
    assert spec.id is None
    assert spec.doc == ""
    assert spec.test is is_number


def test_bare_predicate_after_position_zero_raises() -> None:
    with pytest.raises(SchemaError):
        parse_argument(is_number, 1)


def test_pair_and_triple_shapes() -> None:
    pair = parse_argument(("x", is_number), 0)
    assert (pair.id, pair.doc, pair.whole_payload) == ("x", "", False)

    triple = parse_argument(["name", "Display name", is_string], 1)
    assert (triple.id, triple.doc) == ("name", "Display name")
    assert triple.test is is_string


def test_three_parameter_predicate_is_not_mistaken_for_a_triple() -> None:
    # Classification looks at the declaration shape, never the callable's arity.
    def three(a, b=None, c=None) -> bool:
        return a == 1

    spec = parse_argument(three, 0)
    assert spec.whole_payload is True
    assert spec.test is three


def test_explicit_variants() -> None:
    whole = parse_argument(WholePayloadArg(is_string, doc="The token"), 0)
    assert whole.whole_payload and whole.doc == "The token"

    named = parse_argument(NamedArg("x", is_number), 0)
    assert named.id == "x" and named.doc == ""

    documented = parse_argument(DocumentedNamedArg("y", "Vertical", is_number), 1)
    assert documented.id == "y" and documented.doc == "Vertical"


def test_whole_payload_variant_after_position_zero_raises() -> None:
    with pytest.raises(SchemaError):
        parse_argument(WholePayloadArg(is_string), 2)


@pytest.mark.parametrize(
    "raw",
    [
        ("only_id",),
        ("a", "b", "c", "d"),
        ("x", "not callable"),
        (5, is_number),
        ("", is_number),
        ("x", 5, is_number),
        42,
        None,
    ],
)
def test_unrecognized_argument_shapes_raise(raw) -> None:
    with pytest.raises(SchemaError):
        parse_argument(raw, 0)


def test_parse_action_without_tail() -> None:
    parsed = parse_action(["PING"])
    assert parsed == ParsedAction(type="PING")
    assert parsed.doc == ""
    assert parsed.args == ()


def test_parse_action_with_doc_and_args() -> None:
    parsed = parse_action(["MOVE", "Move the cursor", ("x", is_number), ("y", "Row", is_number)])
    assert parsed.type == "MOVE"
    assert parsed.doc == "Move the cursor"
    assert parsed.ids == ("x", "y")
    assert parsed.args[1].doc == "Row"


def test_parse_action_positions_count_from_arguments_not_tail() -> None:
    # The bare predicate follows the doc string but is still argument 0.
    parsed = parse_action(["SET_TOKEN", "Replace the token", is_string])
    assert parsed.takes_whole_payload
    assert parsed.doc == "Replace the token"


def test_parse_action_without_doc() -> None:
    parsed = parse_action(("SET_TOKEN", is_string))
    assert parsed.doc == ""
    assert parsed.takes_whole_payload


def test_whole_payload_must_be_only_argument() -> None:
    with pytest.raises(SchemaError):
        parse_action(["BAD", is_string, ("x", is_number)])


def test_duplicate_argument_ids_raise() -> None:
    with pytest.raises(SchemaError):
        parse_action(["BAD", ("x", is_number), ("x", is_string)])


@pytest.mark.parametrize("raw", [[], "LOGIN", [None], [""], [3, ("x", is_number)]])
def test_malformed_action_declarations_raise(raw) -> None:
    with pytest.raises(SchemaError):
        parse_action(raw)


def test_parsed_action_passes_through() -> None:
    parsed = parse_action(["PING"])
    assert parse_action(parsed) is parsed


def test_parsed_action_is_frozen() -> None:
    parsed = parse_action(["PING"])
    with pytest.raises(Exception):
        parsed.type = "PONG"  # type: ignore[misc]

"""
Argument and action declaration parsing.

Turns the author-facing schema declaration format into normalized, frozen descriptors:

    ["LOGIN", "Log a user in", ("user", "User name", is_string), ("age", is_number)]

Responsibilities
- Define explicit argument declaration variants (WholePayloadArg, NamedArg,
  DocumentedNamedArg) that authors may use instead of raw tuples.
- Normalize one raw argument declaration into an ArgumentSpec (parse_argument).
- Normalize one raw action declaration into a ParsedAction (parse_action).

Declaration shapes
------------------
An action declaration is a list/tuple ``[type, doc?, *args]``. ``doc`` is recognized
only by being a ``str`` directly after the type. Each argument is one of:

| Shape                         | Variant               | Meaning
|-------------------------------|-----------------------|-------------------------------------
| ``predicate`` (position 0)    | WholePayloadArg       | the whole payload is one value
| ``(id, predicate)``           | NamedArg              | payload field ``id``
| ``(id, doc, predicate)``      | DocumentedNamedArg    | payload field ``id`` with a doc line

Raw tuples are classified by the tuple's own length. A bare callable is never
inspected for its parameter count.

Notes
- Zero-IO (stdlib + pydantic only).
- Malformed shapes raise actschema.core.errors.SchemaError.
- Argument order is significant: it drives positional action creation.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .errors import SchemaError

__all__ = [
    "WholePayloadArg",
    "NamedArg",
    "DocumentedNamedArg",
    "ArgDeclaration",
    "ArgumentSpec",
    "ParsedAction",
    "parse_argument",
    "parse_action",
]


def _non_empty(value: str, what: str) -> str:
    if not value:
        raise SchemaError(f"{what} must be a non-empty string")
    return value


# ============================================================================
# Declaration variants
# ============================================================================


class WholePayloadArg(BaseModel):
    """
    The payload is a single opaque value checked by ``test``.

    Only legal as the first and only argument of an action.

    Attributes:
        test (Callable[[Any], bool]): Predicate over the entire payload.
        doc (str): Optional documentation line.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    test: Callable[[Any], bool]
    doc: str = ""

    def __init__(self, test: Callable[[Any], bool], doc: str = "", **data: Any) -> None:
        super().__init__(test=test, doc=doc, **data)


class NamedArg(BaseModel):
    """
    A named payload field.

    Attributes:
        id (str): Payload key.
        test (Callable[[Any], bool]): Predicate over ``payload[id]``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    test: Callable[[Any], bool]

    def __init__(self, id: str, test: Callable[[Any], bool], **data: Any) -> None:
        super().__init__(id=id, test=test, **data)

    @field_validator("id")
    @classmethod
    def _check_id(cls, v: str) -> str:
        return _non_empty(v, "argument id")


class DocumentedNamedArg(NamedArg):
    """
    A named payload field with a documentation line.

    Attributes:
        id (str): Payload key.
        doc (str): Human-readable description of the field.
        test (Callable[[Any], bool]): Predicate over ``payload[id]``.
    """

    doc: str

    def __init__(self, id: str, doc: str, test: Callable[[Any], bool], **data: Any) -> None:
        super().__init__(id=id, doc=doc, test=test, **data)


ArgDeclaration = Union[WholePayloadArg, NamedArg, DocumentedNamedArg]


# ============================================================================
# Normalized descriptors
# ============================================================================


class ArgumentSpec(BaseModel):
    """
    Normalized argument descriptor.

    Attributes:
        id (str | None): Payload key; None exactly when ``whole_payload`` is True.
        doc (str): Documentation line ("" when not declared).
        test (Callable[[Any], bool]): Predicate for the field (or the whole payload).
        whole_payload (bool): True when the argument stands for the entire payload.

    Raises:
        pydantic.ValidationError: If ``id`` presence disagrees with ``whole_payload``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str | None = None
    doc: str = ""
    test: Callable[[Any], bool]
    whole_payload: bool = False

    @model_validator(mode="after")
    def _check_id_vs_whole(self) -> ArgumentSpec:
        if self.whole_payload and self.id is not None:
            raise SchemaError("whole-payload argument cannot have an id")
        if not self.whole_payload and not self.id:
            raise SchemaError("named argument requires an id")
        return self


class ParsedAction(BaseModel):
    """
    Normalized action descriptor.

    Attributes:
        type (str): Declared (un-namespaced) action type.
        doc (str): Documentation line ("" when not declared).
        args (tuple[ArgumentSpec, ...]): Arguments in declaration order.

    Notes:
        A whole-payload argument, if present, is the only argument.
        Named argument ids are unique within one action.

    Examples:
        >>> from actschema.core.predicates import is_string
        >>> parsed = parse_action(["LOGIN", "Log in", ("user", is_string)])
        >>> parsed.type, parsed.doc, parsed.ids
        ('LOGIN', 'Log in', ('user',))
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str
    doc: str = ""
    args: tuple[ArgumentSpec, ...] = ()

    @field_validator("type")
    @classmethod
    def _check_type(cls, v: str) -> str:
        return _non_empty(v, "action type")

    @model_validator(mode="after")
    def _check_args(self) -> ParsedAction:
        whole = [a for a in self.args if a.whole_payload]
        if whole and len(self.args) != 1:
            raise SchemaError(f"{self.type}: a whole-payload argument must be the only argument")
        ids = self.ids
        if len(set(ids)) != len(ids):
            raise SchemaError(f"{self.type}: duplicate argument ids {list(ids)!r}")
        return self

    @property
    def ids(self) -> tuple[str, ...]:
        """Payload keys of the named arguments, in declaration order."""
        return tuple(a.id for a in self.args if a.id is not None)

    @property
    def takes_whole_payload(self) -> bool:
        return len(self.args) == 1 and self.args[0].whole_payload


# ============================================================================
# Parsers
# ============================================================================


def _build(model: type[BaseModel], **fields: Any) -> Any:
    try:
        return model(**fields)
    except ValidationError as exc:
        raise SchemaError(str(exc)) from exc


def parse_argument(raw: Any, position: int) -> ArgumentSpec:
    """
    Normalize one argument declaration.

    Args:
        raw (Any): A declaration variant, a bare predicate, or a 2-/3-element tuple/list.
        position (int): Zero-based position among the action's arguments.

    Returns:
        ArgumentSpec: The normalized descriptor.

    Raises:
        SchemaError: If the shape is not recognized, a bare predicate or WholePayloadArg
            appears after position 0, or a field fails validation.

    Examples:
        >>> from actschema.core.predicates import is_number
        >>> parse_argument(is_number, 0).whole_payload
        True
        >>> parse_argument(("age", "Age in years", is_number), 1).doc
        'Age in years'
    """
    if isinstance(raw, WholePayloadArg) or (callable(raw) and not isinstance(raw, BaseModel)):
        if position != 0:
            raise SchemaError(
                f"whole-payload predicate is only allowed as the first argument (got position {position})"
            )
        if isinstance(raw, WholePayloadArg):
            return _build(ArgumentSpec, doc=raw.doc, test=raw.test, whole_payload=True)
        return _build(ArgumentSpec, test=raw, whole_payload=True)

    if isinstance(raw, DocumentedNamedArg):
        return _build(ArgumentSpec, id=raw.id, doc=raw.doc, test=raw.test)
    if isinstance(raw, NamedArg):
        return _build(ArgumentSpec, id=raw.id, test=raw.test)

    if isinstance(raw, (tuple, list)):
        if len(raw) == 3:
            id_, doc, test = raw
            decl = _build(DocumentedNamedArg, id=id_, doc=doc, test=test)
            return _build(ArgumentSpec, id=decl.id, doc=decl.doc, test=decl.test)
        if len(raw) == 2:
            id_, test = raw
            decl = _build(NamedArg, id=id_, test=test)
            return _build(ArgumentSpec, id=decl.id, test=decl.test)

    raise SchemaError(f"unrecognized argument declaration at position {position}: {raw!r}")


def parse_action(raw: Sequence[Any] | ParsedAction) -> ParsedAction:
    """
    Normalize one action declaration ``[type, doc?, *args]``.

    Args:
        raw (Sequence[Any] | ParsedAction): Raw declaration, or an already parsed action.

    Returns:
        ParsedAction: Descriptor with arguments parsed in order, positions counted
        from 0 within the argument list (the doc string does not take a position).

    Raises:
        SchemaError: If the declaration is empty, the type is not a non-empty string,
            or any argument is malformed.
    """
    if isinstance(raw, ParsedAction):
        return raw
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or not raw:
        raise SchemaError(f"action declaration must be a non-empty list or tuple: {raw!r}")

    type_, tail = raw[0], list(raw[1:])
    if not isinstance(type_, str):
        raise SchemaError(f"action type must be a string: {type_!r}")

    doc = ""
    if tail and isinstance(tail[0], str):
        doc, tail = tail[0], tail[1:]

    args = tuple(parse_argument(decl, i) for i, decl in enumerate(tail))
    return _build(ParsedAction, type=type_, doc=doc, args=args)

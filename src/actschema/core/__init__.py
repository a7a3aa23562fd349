"""
Core package aggregator for action schema contracts (declarations, predicates, creators, testers).

## Contracts (single source of truth)
- Declarations — argument variants and parsers producing ArgumentSpec / ParsedAction.
- Predicates — reusable payload tests, including Pydantic model adapters.
- Schema — action envelopes, ActionCreator, and payload testers.
- Registry — frozen lookups with a fixed key universe.
- Errors/Constants/Typing — SchemaError family, NO_PAYLOAD, callable aliases.

## Notes
- Zero-IO policy: stdlib + pydantic only.
- Nothing in core imports actschema.pipeline or actschema.compiler.

## Examples
```python
from actschema.core import parse_action, build_tester, is_number
move = parse_action(["MOVE", "Move the cursor", ("x", is_number), ("y", is_number)])
build_tester(move)({"x": 1, "y": 2})  # True
```
"""

from __future__ import annotations

from .constants import DEFAULT_IGNORE_ACTIONS, NO_PAYLOAD
from .declarations import (
    ArgumentSpec,
    DocumentedNamedArg,
    NamedArg,
    ParsedAction,
    WholePayloadArg,
    parse_action,
    parse_argument,
)
from .errors import HandlerError, SchemaError, UnknownActionError
from .predicates import is_number, is_object, is_string, matches_model
from .registry import ActionRegistry
from .schema import ActionCreator, Envelope, build_tester, default_format, default_unformat

__all__ = [
    "DEFAULT_IGNORE_ACTIONS",
    "NO_PAYLOAD",
    "ArgumentSpec",
    "DocumentedNamedArg",
    "NamedArg",
    "ParsedAction",
    "WholePayloadArg",
    "parse_action",
    "parse_argument",
    "HandlerError",
    "SchemaError",
    "UnknownActionError",
    "is_number",
    "is_object",
    "is_string",
    "matches_model",
    "ActionRegistry",
    "ActionCreator",
    "Envelope",
    "build_tester",
    "default_format",
    "default_unformat",
]

"""
actschema — runtime compiler for action contracts of a dispatch-based state store.

Compile a list of action declarations once; get back namespaced type names, payload
testers, action creators, a validating middleware factory, and a reducer factory.

## Examples
```python
from actschema import compile_schema, is_string

auth = compile_schema(
    [
        ["LOGIN", "Log a user in", ("user", "User name", is_string)],
        ["LOGOUT"],
    ],
    namespace="AUTH",
)
login = auth.action_creators["LOGIN"]
login({"user": "ada"})      # {'type': 'AUTH_LOGIN', 'payload': {'user': 'ada'}}
auth.test(login.by_position("ada"))  # True

reducer = auth.create_reducer(
    {"LOGIN": lambda state, payload, action: {**state, "user": payload["user"]}},
    init_state={"user": None},
)
middleware = auth.create_middleware(check_payloads=True)
```
"""

from __future__ import annotations

from .compiler import CompiledSchema, compile_schema
from .core import (
    NO_PAYLOAD,
    ActionCreator,
    DocumentedNamedArg,
    HandlerError,
    NamedArg,
    SchemaError,
    UnknownActionError,
    WholePayloadArg,
    is_number,
    is_object,
    is_string,
    matches_model,
)
from .pipeline import MiddlewareSettings, log_invalid_action

__all__ = [
    "CompiledSchema",
    "compile_schema",
    "NO_PAYLOAD",
    "ActionCreator",
    "DocumentedNamedArg",
    "HandlerError",
    "NamedArg",
    "SchemaError",
    "UnknownActionError",
    "WholePayloadArg",
    "is_number",
    "is_object",
    "is_string",
    "matches_model",
    "MiddlewareSettings",
    "log_invalid_action",
]

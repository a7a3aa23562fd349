"""
actschema.pipeline — factories consumed by a host store at its own setup time.

## Public API
- MiddlewareSettings — options for the validating middleware (env/TOML/defaults).
- create_middleware — observational validation stage; never blocks dispatch.
- create_reducer — handler table keyed by declared type -> reducer over namespaced types.
- log_invalid_action — default ``on_error`` reporter (stdlib logging).

## Import DAG discipline
- Depends only on stdlib and actschema.core.
"""

from __future__ import annotations

from .config import MiddlewareSettings
from .middleware import create_middleware
from .reducer import create_reducer
from .reporting import log_invalid_action

__all__ = [
    "MiddlewareSettings",
    "create_middleware",
    "create_reducer",
    "log_invalid_action",
]

"""
Configuration for the validating middleware.

Defines MiddlewareSettings, a frozen dataclass carrying the options of a middleware stage.
Defaults are sourced from actschema.core.constants and actschema.pipeline.reporting.

Source of truth
- actschema.core.constants.DEFAULT_IGNORE_ACTIONS

Import DAG discipline
- Depends only on stdlib and actschema.core.
- Does not import actschema.compiler.

Notes
- Loaders apply precedence: environment > TOML > defaults.
- ``on_error`` is a callable and is configured in code only.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import tomllib

from actschema.core.constants import DEFAULT_IGNORE_ACTIONS
from actschema.core.typing import ErrorReporter

from .reporting import log_invalid_action

logger = logging.getLogger(__name__)

ENV_PREFIX = "ACTSCHEMA_MIDDLEWARE_"

__all__ = [
    "MiddlewareSettings",
    "ENV_PREFIX",
]


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


def _names(v: Any) -> tuple[str, ...] | None:
    if isinstance(v, str):
        return tuple(part.strip() for part in v.split(",") if part.strip())
    if isinstance(v, Iterable):
        return tuple(str(part) for part in v)
    return None


def _table(data: dict[str, Any], *keys: str) -> dict[str, Any] | None:
    # Walk nested TOML tables; any non-table step yields None.
    node: Any = data
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node if isinstance(node, dict) else None


@dataclass(frozen=True)
class MiddlewareSettings:
    """
    Runtime settings for one validating middleware stage.

    Attributes:
        ignore_actions (tuple[str, ...]): Action types exempt from validation entirely.
        check_payloads (bool): If True, evaluate payload testers; if False, a registered
            tester for the type is enough.
        on_error (ErrorReporter): Reporter called with the offending action.

    Examples:
        >>> from actschema.pipeline.config import MiddlewareSettings
        >>> MiddlewareSettings(check_payloads=True).check_payloads
        True
    """

    ignore_actions: tuple[str, ...] = DEFAULT_IGNORE_ACTIONS
    check_payloads: bool = False
    on_error: ErrorReporter = field(default=log_invalid_action, compare=False)

    def with_overrides(
        self,
        *,
        ignore_actions: Iterable[str] | None = None,
        check_payloads: bool | None = None,
        on_error: ErrorReporter | None = None,
    ) -> MiddlewareSettings:
        """Return a copy with the given fields replaced; None keeps the current value."""
        s = self
        if ignore_actions is not None:
            s = replace(s, ignore_actions=tuple(ignore_actions))
        if check_payloads is not None:
            s = replace(s, check_payloads=bool(check_payloads))
        if on_error is not None:
            if not callable(on_error):
                raise TypeError(f"on_error must be callable: {on_error!r}")
            s = replace(s, on_error=on_error)
        return s

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(
        cls, base: MiddlewareSettings, cfg: dict[str, Any] | None
    ) -> MiddlewareSettings:
        """Apply a loose config mapping onto MiddlewareSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "ignore_actions" in cfg:
            names = _names(cfg["ignore_actions"])
            if names is not None:
                s = replace(s, ignore_actions=names)
            else:
                logger.warning("ignoring invalid ignore_actions value: %r", cfg["ignore_actions"])

        if "check_payloads" in cfg:
            s = replace(s, check_payloads=_bool(cfg["check_payloads"]))

        return s

    @classmethod
    def from_env(
        cls, base: MiddlewareSettings | None = None, prefix: str = ENV_PREFIX
    ) -> MiddlewareSettings:
        """
        Build MiddlewareSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - ACTSCHEMA_MIDDLEWARE_CHECK_PAYLOADS (1/0/true/false/yes/no/on/off)
            - ACTSCHEMA_MIDDLEWARE_IGNORE_ACTIONS (comma separated action types)
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        v = get("CHECK_PAYLOADS")
        if v:
            mapping["check_payloads"] = v
        v = get("IGNORE_ACTIONS")
        if v is not None:
            mapping["ignore_actions"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> MiddlewareSettings:
        """
        Build MiddlewareSettings from a TOML file.

        Search order when `path` is None:
            1) ./actschema.toml (with either a [middleware] table or direct keys)
            2) ./pyproject.toml under [tool.actschema.middleware]

        Returns defaults if no file is present or readable.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
                logger.warning("could not read %s: %s", p, exc)
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "actschema.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                cfg = _table(data, "tool", "actschema", "middleware")
            else:
                if "middleware" in data and isinstance(data["middleware"], dict):
                    cfg = data["middleware"]
                else:
                    cfg = data
            if cfg:
                logger.debug("middleware settings loaded from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> MiddlewareSettings:
        """
        Load MiddlewareSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (actschema.toml, pyproject.toml).

        Returns:
            MiddlewareSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s

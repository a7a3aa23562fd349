"""Reporters for actions the validating middleware rejects."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

__all__ = ["log_invalid_action"]


def log_invalid_action(action: Any) -> None:
    """Default ``on_error``: emit an ERROR record for an unknown or invalid action."""
    logger.error("unknown action: %r", action)

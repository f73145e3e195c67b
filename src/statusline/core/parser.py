"""Parse the statusline JSON payload into a SessionContext.

Every field is optional. Missing, null, or wrongly typed values fall back to
defaults so that a line can always be drawn.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from statusline.types.session import ContextWindowUsage, SessionContext

logger = logging.getLogger(__name__)

_TOKEN_FIELDS = (
    "input_tokens",
    "cache_creation_input_tokens",
    "cache_read_input_tokens",
)


def parse_session(raw: str | bytes | dict[str, Any] | None) -> SessionContext:
    """Build a SessionContext from raw stdin text or an already decoded payload."""
    payload = _decode(raw)

    workspace = _section(payload, "workspace")
    current_dir = workspace.get("current_dir")
    if not isinstance(current_dir, str):
        if current_dir is not None:
            logger.debug("Ignoring non-string workspace.current_dir: %r", current_dir)
        current_dir = ""

    cost = _section(payload, "cost")

    return SessionContext(
        working_directory=current_dir,
        context_window=_parse_context_window(payload.get("context_window")),
        cost_total_usd=_non_negative_float(cost.get("total_cost_usd")),
        duration_ms=_non_negative_int(cost.get("total_duration_ms")),
    )


def _decode(raw: str | bytes | dict[str, Any] | None) -> dict[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError and the int digit limit both raise ValueError
        logger.debug("Statusline payload is not valid JSON: %s", exc)
        return {}
    if not isinstance(data, dict):
        logger.debug("Statusline payload is not a JSON object: %s", type(data).__name__)
        return {}
    return data


def _section(payload: dict[str, Any], key: str) -> dict[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


def _parse_context_window(value: Any) -> ContextWindowUsage | None:
    """Return usage data, or None when the session has none to report.

    A null ``current_usage`` means "no data yet", which is not the same as
    zero usage.
    """
    if not isinstance(value, dict):
        return None
    usage = value.get("current_usage")
    if not isinstance(usage, dict):
        return None

    size = _non_negative_int(value.get("context_window_size"))
    if size <= 0:
        logger.debug("Context window size missing or zero, skipping usage bar")
        return None

    current = sum(_non_negative_int(usage.get(name)) for name in _TOKEN_FIELDS)
    return ContextWindowUsage(current_usage_tokens=current, window_size_tokens=size)


def _non_negative_float(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Ignoring non-numeric value: %r", value)
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return max(number, 0.0)


def _non_negative_int(value: Any) -> int:
    # ints stay exact; bool is an int subclass but not a count
    if isinstance(value, int) and not isinstance(value, bool):
        return max(value, 0)
    return int(_non_negative_float(value))

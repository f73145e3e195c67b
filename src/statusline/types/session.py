"""Session payload types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True, slots=True)
class ContextWindowUsage:
    """Token usage of the active context window."""

    current_usage_tokens: int  # input + cache creation + cache read
    window_size_tokens: int


@dataclass(frozen=True, slots=True)
class SessionContext:
    """Fields extracted from one statusline payload."""

    working_directory: str = ""
    context_window: ContextWindowUsage | None = None  # None = no usage tracking
    cost_total_usd: float = 0.0
    duration_ms: int = 0

    @property
    def directory_name(self) -> str:
        if not self.working_directory:
            return ""
        # the root has no name; show it as-is like basename(1)
        return PurePath(self.working_directory).name or self.working_directory

from __future__ import annotations

from enum import Enum


class EngineState(str, Enum):
    """Lifecycle of a generational run."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    RUNNING = "running"
    TERMINATED = "terminated"

    def __str__(self) -> str:
        return self.value


__all__ = ["EngineState"]

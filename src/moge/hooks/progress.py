from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressEvent:
    """Snapshot emitted at each 10% generation milestone."""

    generation: int
    max_generations: int
    percentage: int
    objectives: np.ndarray


ProgressSink = Callable[[ProgressEvent], None]


def log_progress(event: ProgressEvent) -> None:
    """Default sink: percentage at INFO, objective values at DEBUG."""
    log = _logger()
    log.info("%d%% performed ...", event.percentage)
    if not log.isEnabledFor(logging.DEBUG):
        return
    log.debug("@ # Gen. %d, objective values:", event.generation)
    for row in event.objectives:
        log.debug("%s", ";".join(f"{value:.6g}" for value in row))


def no_progress(event: ProgressEvent) -> None:
    return None


class ProgressRecorder:
    """Sink that keeps every event; handy for tests and notebooks."""

    def __init__(self) -> None:
        self.events: list[ProgressEvent] = []

    def __call__(self, event: ProgressEvent) -> None:
        self.events.append(event)

    @property
    def percentages(self) -> list[int]:
        return [event.percentage for event in self.events]


__all__ = ["ProgressEvent", "ProgressSink", "ProgressRecorder", "log_progress", "no_progress"]

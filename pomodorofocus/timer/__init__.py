"""Timer package."""

from .engine import (
    TimerEngine,
    Mode,
    MODE_LABELS,
    TICK_INTERVAL_MS,
    duration_for,
    format_time,
    progress_percent,
)

__all__ = [
    "TimerEngine",
    "Mode",
    "MODE_LABELS",
    "TICK_INTERVAL_MS",
    "duration_for",
    "format_time",
    "progress_percent",
]

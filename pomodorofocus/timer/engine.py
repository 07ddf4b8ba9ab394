"""Timer state machine for Pomodoro Focus.

States
------
The session is one of three modes, each either running or paused:

    {WORK, SHORT_BREAK, LONG_BREAK} x {running, paused}

Transitions
-----------
toggle            running <-> paused            (mode, seconds unchanged)
reset             -> paused, full duration of current mode
switch_mode(m)    -> paused, mode m, full duration of m
tick              seconds_left - 1 while running
completion        WORK -> SHORT_BREAK | LONG_BREAK, break -> WORK
                  (runs again at once when auto_start_next is set)
clear_rounds      rounds_completed -> 0
apply_settings    re-derives seconds_left from the current mode

Only a natural WORK completion counts a round.  Every
``rounds_until_long_break``-th round is followed by a long break.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Mode(Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


# ── constants ─────────────────────────────────────────────────────────────

TICK_INTERVAL_MS = 1000

MODE_LABELS: dict[Mode, str] = {
    Mode.WORK: "Pomodoro",
    Mode.SHORT_BREAK: "Short Break",
    Mode.LONG_BREAK: "Long Break",
}


# ── pure helpers ──────────────────────────────────────────────────────────


def duration_for(mode: Mode, settings: Settings) -> int:
    """Full length of *mode* in seconds, never less than 1."""
    if mode == Mode.WORK:
        minutes = settings.work_minutes
    elif mode == Mode.SHORT_BREAK:
        minutes = settings.short_break_minutes
    else:
        minutes = settings.long_break_minutes
    return max(1, minutes * 60)


def progress_percent(seconds_left: int, total: int) -> float:
    """0 -> 100 progress through an interval of *total* seconds."""
    total = total or 1
    return max(0.0, min(100.0, (1 - seconds_left / total) * 100))


def format_time(total_seconds: int) -> str:
    """``MM:SS`` with both fields zero-padded."""
    minutes, seconds = divmod(int(total_seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based Pomodoro session controller.

    Signals
    -------
    tick(seconds_left: int)
        Emitted whenever ``seconds_left`` changes.
    mode_changed(mode: Mode)
        Emitted when the mode changes (manual switch or completion).
    running_changed(is_running: bool)
        Emitted on every running/paused edge.
    rounds_changed(rounds_completed: int)
        Emitted when a round is counted or the count is cleared.
    session_completed(data: dict)
        Emitted after an interval finishes naturally.  Keys:
        ``mode``, ``rounds_completed``, ``next_mode``, ``auto_started``.
    """

    tick = pyqtSignal(int)
    mode_changed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)
    rounds_changed = pyqtSignal(int)
    session_completed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: Settings = DEFAULT_SETTINGS,
        alert: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._settings: Settings = settings
        self._alert = alert

        # ── session state ─────────────────────────────────────────────
        self._mode: Mode = Mode.WORK
        self._is_running: bool = False
        self._seconds_left: int = duration_for(Mode.WORK, settings)
        self._rounds_completed: int = 0

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def seconds_left(self) -> int:
        return self._seconds_left

    @property
    def rounds_completed(self) -> int:
        """Work intervals finished since the last clear."""
        return self._rounds_completed

    @property
    def total_seconds(self) -> int:
        """Full length of the current mode in seconds."""
        return duration_for(self._mode, self._settings)

    @property
    def progress(self) -> float:
        """0.0 -> 100.0 progress through the current interval."""
        return progress_percent(self._seconds_left, self.total_seconds)

    @property
    def time_text(self) -> str:
        return format_time(self._seconds_left)

    @property
    def timer_active(self) -> bool:
        """True while the underlying QTimer is scheduled."""
        return self._qt_timer.isActive()

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def toggle(self) -> None:
        """Start/Pause button."""
        if self._is_running:
            self.pause()
        else:
            self.start()

    def start(self) -> None:
        self._set_running(True)

    def pause(self) -> None:
        self._set_running(False)

    def reset(self) -> None:
        """Pause and restore the full duration of the current mode."""
        self._set_running(False)
        self._set_seconds_left(self.total_seconds)

    def switch_mode(self, mode: Mode) -> None:
        """Manual mode change.  Never counts a round."""
        self._set_running(False)
        self._set_mode(mode)

    def clear_rounds(self) -> None:
        self._rounds_completed = 0
        self.rounds_changed.emit(0)

    def apply_settings(self, settings: Settings) -> None:
        """Replace settings wholesale.

        ``seconds_left`` is re-derived from the current mode even
        mid-countdown; partial progress is discarded.
        """
        self._settings = settings
        self._set_seconds_left(self.total_seconds)

    def dispose(self) -> None:
        """Stop scheduling ticks.  Safe to call more than once."""
        self._qt_timer.stop()
        self._set_running(False)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if not self._is_running:
            return
        if self._seconds_left <= 1:
            self._set_seconds_left(0)
            if self._settings.sound and self._alert is not None:
                self._alert()
            self._complete()
            return
        self._set_seconds_left(self._seconds_left - 1)

    def _complete(self) -> None:
        completed = self._mode
        self._set_running(False)

        if completed == Mode.WORK:
            self._rounds_completed += 1
            self.rounds_changed.emit(self._rounds_completed)
            should_long = (
                self._rounds_completed % self._settings.rounds_until_long_break == 0
            )
            next_mode = Mode.LONG_BREAK if should_long else Mode.SHORT_BREAK
        else:
            next_mode = Mode.WORK

        self._set_mode(next_mode)
        logger.info(
            "%s finished after round %d; next: %s",
            MODE_LABELS[completed], self._rounds_completed, MODE_LABELS[next_mode],
        )

        auto = self._settings.auto_start_next
        self.session_completed.emit({
            "mode": completed,
            "rounds_completed": self._rounds_completed,
            "next_mode": next_mode,
            "auto_started": auto,
        })
        if auto:
            self._set_running(True)

    def _set_running(self, running: bool) -> None:
        # The QTimer is torn down and re-armed on every edge.
        if running == self._is_running:
            return
        self._qt_timer.stop()
        if running:
            self._qt_timer.start()
        self._is_running = running
        self.running_changed.emit(running)

    def _set_mode(self, mode: Mode) -> None:
        changed = mode != self._mode
        self._mode = mode
        self._set_seconds_left(self.total_seconds)
        if changed:
            self.mode_changed.emit(mode)

    def _set_seconds_left(self, seconds: int) -> None:
        self._seconds_left = seconds
        self.tick.emit(seconds)

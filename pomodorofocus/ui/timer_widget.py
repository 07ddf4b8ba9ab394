"""Main timer card.

Layout (top → bottom):
    - Mode tabs (Pomodoro / Short Break / Long Break)
    - MM:SS countdown
    - Start/Pause + Reset
    - Clear Rounds (right-aligned)
    - Meta row: current mode and rounds counter
    - ProgressBar
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame, QButtonGroup,
)

from ..timer.engine import TimerEngine, Mode, MODE_LABELS, format_time
from .progress_bar import ProgressBar


class TimerWidget(QWidget):
    """The timer card: a pure view over a ``TimerEngine``."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._refresh_all()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(32, 20, 32, 24)
        layout.setSpacing(0)

        # ── mode tabs ────────────────────────────────────────────────
        tab_row = QHBoxLayout()
        tab_row.setSpacing(4)
        tab_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._tab_group = QButtonGroup(self)
        self._tab_group.setExclusive(True)
        self._tabs: dict[Mode, QPushButton] = {}
        for mode in Mode:
            btn = QPushButton(MODE_LABELS[mode], card)
            btn.setObjectName("modeTab")
            btn.setCheckable(True)
            self._tab_group.addButton(btn)
            self._tabs[mode] = btn
            tab_row.addWidget(btn)
        layout.addLayout(tab_row)

        layout.addSpacing(16)

        # ── countdown ────────────────────────────────────────────────
        self._time_label = QLabel(card)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        layout.addSpacing(16)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.setObjectName("primaryButton")

        self._reset_btn = QPushButton("Reset", card)

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

        layout.addSpacing(12)

        clear_row = QHBoxLayout()
        clear_row.addStretch()
        self._clear_btn = QPushButton("Clear Rounds", card)
        self._clear_btn.setObjectName("dangerButton")
        clear_row.addWidget(self._clear_btn)
        layout.addLayout(clear_row)

        layout.addSpacing(12)

        # ── meta ─────────────────────────────────────────────────────
        meta_row = QHBoxLayout()
        self._mode_label = QLabel(card)
        self._mode_label.setObjectName("metaLabel")
        self._rounds_label = QLabel(card)
        self._rounds_label.setObjectName("metaLabel")
        meta_row.addWidget(self._mode_label)
        meta_row.addStretch()
        meta_row.addWidget(self._rounds_label)
        layout.addLayout(meta_row)

        layout.addSpacing(8)

        # ── progress ─────────────────────────────────────────────────
        self._progress = ProgressBar(card)
        layout.addWidget(self._progress)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._clear_btn.clicked.connect(self._engine.clear_rounds)
        for mode, btn in self._tabs.items():
            btn.clicked.connect(lambda _checked=False, m=mode: self._engine.switch_mode(m))

        self._engine.tick.connect(self._refresh_display)
        self._engine.mode_changed.connect(self._on_mode_changed)
        self._engine.running_changed.connect(self._on_running_changed)
        self._engine.rounds_changed.connect(self._refresh_rounds)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_mode_changed(self, mode: Mode) -> None:
        self._tabs[mode].setChecked(True)
        self._mode_label.setText(f"Mode: {MODE_LABELS[mode]}")
        self._progress.apply_mode(mode)
        self._refresh_display(self._engine.seconds_left)

    def _on_running_changed(self, running: bool) -> None:
        self._start_pause_btn.setText("Pause" if running else "Start")
        # Primary styling only while the button offers "Start".
        self._start_pause_btn.setObjectName("" if running else "primaryButton")
        self._start_pause_btn.style().unpolish(self._start_pause_btn)
        self._start_pause_btn.style().polish(self._start_pause_btn)

    def _refresh_display(self, seconds_left: int) -> None:
        self._time_label.setText(format_time(seconds_left))
        self._progress.set_value(self._engine.progress)

    def _refresh_rounds(self, rounds: int | None = None) -> None:
        if rounds is None:
            rounds = self._engine.rounds_completed
        target = self._engine.settings.rounds_until_long_break
        self._rounds_label.setText(f"Rounds: {rounds} / {target} (until long break)")

    def _refresh_all(self) -> None:
        self._on_mode_changed(self._engine.mode)
        self._on_running_changed(self._engine.is_running)
        self._refresh_rounds()

    # ── public ────────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Re-read everything from the engine (e.g. after new settings)."""
        self._refresh_all()

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def rounds_text(self) -> str:
        return self._rounds_label.text()

    @property
    def mode_text(self) -> str:
        return self._mode_label.text()

    @property
    def start_pause_text(self) -> str:
        return self._start_pause_btn.text()

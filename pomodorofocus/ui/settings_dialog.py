"""Settings dialog for Pomodoro Focus.

A modal dialog that edits a working copy of the user's preferences.
Nothing is applied until Save; Cancel discards the edits.  Numeric
fields stay within 1..180 minutes/rounds.
"""

from __future__ import annotations

from dataclasses import replace

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QCheckBox, QPushButton, QFrame, QWidget,
)

from ..settings import Settings, clamp_settings, MIN_VALUE, MAX_VALUE

MAX_MINUTES = MAX_VALUE
MAX_ROUNDS = MAX_VALUE


class SettingsDialog(QDialog):
    """Modal editor for the six user preferences."""

    def __init__(self, settings: Settings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(380)
        self.setModal(True)

        self._original = settings
        self._settings = settings

        self._build_ui()
        self._populate()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        # ── Timer section ────────────────────────────────────────────
        root.addWidget(self._section_label("Timer"))
        timer_form = QFormLayout()
        timer_form.setContentsMargins(0, 0, 0, 0)
        timer_form.setHorizontalSpacing(20)
        timer_form.setVerticalSpacing(10)

        self._work_spin = self._minutes_spin()
        timer_form.addRow("Work (minutes):", self._work_spin)

        self._short_spin = self._minutes_spin()
        timer_form.addRow("Short Break (minutes):", self._short_spin)

        self._long_spin = self._minutes_spin()
        timer_form.addRow("Long Break (minutes):", self._long_spin)

        self._rounds_spin = QSpinBox()
        self._rounds_spin.setRange(MIN_VALUE, MAX_ROUNDS)
        timer_form.addRow("Rounds until long break:", self._rounds_spin)

        root.addLayout(timer_form)

        root.addWidget(self._separator())

        # ── toggles ──────────────────────────────────────────────────
        self._auto_start_cb = QCheckBox("Auto-start next session")
        root.addWidget(self._auto_start_cb)

        self._sound_cb = QCheckBox("Sound alert")
        root.addWidget(self._sound_cb)

        # ── actions ──────────────────────────────────────────────────
        root.addStretch()
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.clicked.connect(self.reject)
        save_btn = QPushButton("Save")
        save_btn.setObjectName("primaryButton")
        save_btn.setDefault(True)
        save_btn.clicked.connect(self._on_save)
        btn_row.addWidget(cancel_btn)
        btn_row.addWidget(save_btn)
        root.addLayout(btn_row)

    # ── helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _minutes_spin() -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(MIN_VALUE, MAX_MINUTES)
        spin.setSuffix(" min")
        return spin

    @staticmethod
    def _section_label(text: str) -> QLabel:
        lbl = QLabel(text)
        lbl.setStyleSheet("font-size: 15px; font-weight: 700; margin-top: 4px;")
        return lbl

    @staticmethod
    def _separator() -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFixedHeight(1)
        line.setStyleSheet("background-color: rgba(255,255,255,0.08);")
        return line

    # ══════════════════════════════════════════════════════════════════
    #  POPULATE / COLLECT
    # ══════════════════════════════════════════════════════════════════

    def _populate(self) -> None:
        # Keep values inside the spin box range before handing them to Qt.
        s = clamp_settings(self._original)
        self._work_spin.setValue(s.work_minutes)
        self._short_spin.setValue(s.short_break_minutes)
        self._long_spin.setValue(s.long_break_minutes)
        self._rounds_spin.setValue(s.rounds_until_long_break)
        self._auto_start_cb.setChecked(s.auto_start_next)
        self._sound_cb.setChecked(s.sound)

    def _collect(self) -> Settings:
        return clamp_settings(replace(
            self._original,
            work_minutes=self._work_spin.value(),
            short_break_minutes=self._short_spin.value(),
            long_break_minutes=self._long_spin.value(),
            rounds_until_long_break=self._rounds_spin.value(),
            auto_start_next=self._auto_start_cb.isChecked(),
            sound=self._sound_cb.isChecked(),
        ))

    def _on_save(self) -> None:
        self._settings = self._collect()
        self.accept()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def settings(self) -> Settings:
        """The saved settings, or the originals if not saved."""
        return self._settings

"""Main application window for Pomodoro Focus."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QFrame, QPushButton, QDialog,
)

from .timer.engine import TimerEngine
from .ui.timer_widget import TimerWidget
from .ui.styles import build_stylesheet, get_palette
from .settings import Settings, load_settings, save_settings
from .audio.sounds import SoundManager

logger = logging.getLogger(__name__)

TECHNIQUE_URL = "https://en.wikipedia.org/wiki/Pomodoro_Technique"


class PomodoroApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        *,
        settings_path: Path | None = None,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Pomodoro Focus")
        self.setMinimumSize(460, 420)
        self.resize(520, 480)

        # ── settings ──────────────────────────────────────────────────
        self._settings_path = settings_path
        self._settings: Settings = load_settings(settings_path)

        # ── sound manager ─────────────────────────────────────────────
        self._sound_manager = SoundManager(parent=self, sounds_dir=sounds_dir)
        self._sound_manager.set_enabled(self._settings.sound)

        # ── engine ────────────────────────────────────────────────────
        self._timer_engine = TimerEngine(
            self,
            settings=self._settings,
            alert=self._sound_manager.play,
        )

        # ── theme ─────────────────────────────────────────────────────
        self._palette = get_palette()
        self.setStyleSheet(build_stylesheet(self._palette))

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(16, 12, 16, 12)
        root_layout.setSpacing(12)

        root_layout.addWidget(self._build_header(central))

        self._timer_widget = TimerWidget(self._timer_engine, central)
        root_layout.addWidget(self._timer_widget)

        root_layout.addStretch()
        root_layout.addWidget(self._build_footer(central))

        self._timer_engine.session_completed.connect(self._on_session_completed)

    # ══════════════════════════════════════════════════════════════════
    #  HEADER / FOOTER
    # ══════════════════════════════════════════════════════════════════

    def _build_header(self, parent: QWidget) -> QWidget:
        bar = QFrame(parent)
        layout = QHBoxLayout(bar)
        layout.setContentsMargins(4, 0, 4, 0)

        brand = QLabel("⏱  Pomodoro Focus", bar)
        brand.setObjectName("brandLabel")
        layout.addWidget(brand)
        layout.addStretch()

        self._settings_btn = QPushButton("Settings", bar)
        self._settings_btn.clicked.connect(self._open_settings)
        layout.addWidget(self._settings_btn)
        return bar

    def _build_footer(self, parent: QWidget) -> QWidget:
        footer = QLabel(
            f'<a href="{TECHNIQUE_URL}" style="color: {self._palette["accent"]};">'
            "Pomodoro Technique</a>",
            parent,
        )
        footer.setObjectName("metaLabel")
        footer.setAlignment(Qt.AlignmentFlag.AlignRight)
        footer.setOpenExternalLinks(True)
        return footer

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    def _open_settings(self) -> None:
        """Open the settings dialog and apply the result on Save."""
        from .ui.settings_dialog import SettingsDialog

        dlg = SettingsDialog(self._settings, parent=self)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            self.apply_settings(dlg.settings)

    def apply_settings(self, settings: Settings) -> None:
        """Push new Settings into all subsystems and persist them."""
        logger.info("Applying settings: %s", settings)
        self._settings = settings
        self._timer_engine.apply_settings(settings)
        self._sound_manager.set_enabled(settings.sound)
        self._timer_widget.refresh()
        save_settings(settings, self._settings_path)

    # ══════════════════════════════════════════════════════════════════
    #  TIMER SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_session_completed(self, data: dict) -> None:
        # Bring the window forward so the user notices the new interval.
        if not data["auto_started"]:
            self.raise_()
            self.activateWindow()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer_engine.dispose()
        event.accept()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._timer_engine.toggle()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._timer_engine.reset()
            event.accept()
            return
        super().keyPressEvent(event)

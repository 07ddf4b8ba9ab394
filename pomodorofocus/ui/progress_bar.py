"""Horizontal progress bar rendered with QPainter.

- Fills left to right as the interval progresses (0..100).
- Colour-coded by mode (work=coral, short break=teal, long break=purple).
- Smooth animated transitions for both value and colour.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QColor, QLinearGradient
from PyQt6.QtWidgets import QWidget

from ..timer.engine import Mode
from .styles import MODE_COLORS


def _lerp_color(c1: QColor, c2: QColor, t: float) -> QColor:
    """Linearly interpolate between two QColors."""
    t = max(0.0, min(1.0, t))
    return QColor(
        int(c1.red()   + (c2.red()   - c1.red())   * t),
        int(c1.green() + (c2.green() - c1.green()) * t),
        int(c1.blue()  + (c2.blue()  - c1.blue())  * t),
        int(c1.alpha() + (c2.alpha() - c1.alpha()) * t),
    )


class ProgressBar(QWidget):
    """Custom-painted progress track for the current interval."""

    BAR_HEIGHT = 8

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedHeight(self.BAR_HEIGHT + 4)

        self._value: float = 0.0            # 0..100 target
        self._display_value: float = 0.0    # animated fill
        self._mode: Mode = Mode.WORK

        primary, secondary = MODE_COLORS[Mode.WORK]
        self._primary_color = QColor(primary)
        self._secondary_color = QColor(secondary)
        self._old_primary = QColor(primary)
        self._old_secondary = QColor(secondary)
        self._target_primary = QColor(primary)
        self._target_secondary = QColor(secondary)

        # ── value animation ───────────────────────────────────────────
        self._value_anim = QVariantAnimation(self)
        self._value_anim.setDuration(400)
        self._value_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._value_anim.valueChanged.connect(self._on_value_anim)

        # ── colour animation ──────────────────────────────────────────
        self._color_anim = QVariantAnimation(self)
        self._color_anim.setDuration(400)
        self._color_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._color_anim.valueChanged.connect(self._on_color_anim)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def value(self) -> float:
        return self._value

    @property
    def mode(self) -> Mode:
        return self._mode

    def set_value(self, value: float) -> None:
        """Update the fill (0..100). Smoothly animates."""
        value = max(0.0, min(100.0, float(value)))
        if value == self._value:
            return
        self._value = value
        self._value_anim.stop()
        self._value_anim.setStartValue(self._display_value)
        self._value_anim.setEndValue(value)
        self._value_anim.start()

    def apply_mode(self, mode: Mode) -> None:
        """Fade the fill colour to the one for *mode*."""
        self._mode = mode
        primary, secondary = MODE_COLORS[mode]
        self._old_primary = QColor(self._primary_color)
        self._old_secondary = QColor(self._secondary_color)
        self._target_primary = QColor(primary)
        self._target_secondary = QColor(secondary)
        self._color_anim.stop()
        self._color_anim.setStartValue(0.0)
        self._color_anim.setEndValue(1.0)
        self._color_anim.start()

    # ── animation slots ───────────────────────────────────────────────

    def _on_value_anim(self, value: object) -> None:
        self._display_value = float(value)  # type: ignore[arg-type]
        self.update()

    def _on_color_anim(self, value: object) -> None:
        t = float(value)  # type: ignore[arg-type]
        self._primary_color = _lerp_color(self._old_primary, self._target_primary, t)
        self._secondary_color = _lerp_color(self._old_secondary, self._target_secondary, t)
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)

        h = self.BAR_HEIGHT
        top = (self.height() - h) / 2
        radius = h / 2
        track = QRectF(0, top, self.width(), h)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._primary_color)
        track_color.setAlpha(35)
        painter.setBrush(track_color)
        painter.drawRoundedRect(track, radius, radius)

        # ── fill ─────────────────────────────────────────────────────
        width = track.width() * self._display_value / 100.0
        if width > 0.5:
            gradient = QLinearGradient(0, 0, track.width(), 0)
            gradient.setColorAt(0.0, self._primary_color)
            gradient.setColorAt(1.0, self._secondary_color)
            painter.setBrush(gradient)
            painter.drawRoundedRect(QRectF(0, top, width, h), radius, radius)

        painter.end()

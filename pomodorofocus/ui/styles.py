"""QSS stylesheet and mode colors for Pomodoro Focus."""

from __future__ import annotations

from ..timer.engine import Mode

# ── mode colors (progress fill gradient pairs) ───────────────────────────

MODE_COLORS: dict[Mode, tuple[str, str]] = {
    Mode.WORK:        ("#FF6B6B", "#FFA07A"),   # warm coral
    Mode.SHORT_BREAK: ("#4ECDC4", "#44B09E"),   # cool teal
    Mode.LONG_BREAK:  ("#A18CD1", "#7B68EE"),   # calm purple
}

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "accent2":      "#89B4FA",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def get_palette() -> dict[str, str]:
    return dict(PALETTE)


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── buttons ─────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-size: 14px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p['surface']};
        border-color: {p['accent']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        font-size: 17px;
        padding: 14px 40px;
        border-radius: 12px;
        font-weight: 700;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#dangerButton {{
        background-color: transparent;
        color: {p['danger']};
        border: 1px solid {p['border']};
        font-size: 13px;
        padding: 8px 16px;
        border-radius: 8px;
    }}

    QPushButton#dangerButton:hover {{
        background-color: {p['danger']};
        color: {p['bg']};
        border-color: {p['danger']};
    }}

    /* ── mode tabs ───────────────────────────────── */
    QPushButton#modeTab {{
        background-color: transparent;
        color: {p['text_muted']};
        border: none;
        border-bottom: 2px solid transparent;
        border-radius: 0px;
        padding: 10px 18px;
    }}

    QPushButton#modeTab:checked {{
        color: {p['accent']};
        border-bottom: 2px solid {p['accent']};
    }}

    QPushButton#modeTab:hover {{
        color: {p['text']};
    }}

    /* ── frame / card ────────────────────────────── */
    QFrame#card {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 12px;
    }}

    /* ── labels ──────────────────────────────────── */
    QLabel#timeLabel {{
        font-size: 72px;
        font-weight: 700;
        background-color: transparent;
    }}

    QLabel#metaLabel {{
        font-size: 13px;
        color: {p['text_muted']};
        background-color: transparent;
    }}

    QLabel#brandLabel {{
        font-size: 17px;
        font-weight: 700;
        letter-spacing: 1px;
    }}

    /* ── spin boxes ──────────────────────────────── */
    QSpinBox {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 4px 8px;
    }}
    """

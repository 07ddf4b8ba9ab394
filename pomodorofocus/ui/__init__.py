"""UI package."""

from .timer_widget import TimerWidget
from .progress_bar import ProgressBar
from .settings_dialog import SettingsDialog

__all__ = [
    "TimerWidget",
    "ProgressBar",
    "SettingsDialog",
]

"""Shared test helpers for Pomodoro Focus."""

from pomodorofocus.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    @property
    def last(self):
        return self.items[-1] if self.items else None


def complete_session(engine: TimerEngine) -> None:
    """Fast-complete the current interval by jumping to the last tick."""
    if not engine.is_running:
        engine.start()
    engine._seconds_left = 1
    engine._on_tick()


class AlertRecorder:
    """Stand-in for the sound alert; counts how often it fires."""

    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1

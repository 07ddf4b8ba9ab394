"""Allow running Pomodoro Focus as a module: python -m pomodorofocus."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import PomodoroApp


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("POMODORO_FOCUS_DEBUG") else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Pomodoro Focus ready!")

    app = QApplication(sys.argv)
    app.setApplicationName("Pomodoro Focus")
    app.setOrganizationName("PomodoroFocus")

    window = PomodoroApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

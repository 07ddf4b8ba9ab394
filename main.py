#!/usr/bin/env python3
"""Pomodoro Focus entry point.

Run with:
    python main.py
    python -m pomodorofocus
"""

from pomodorofocus.__main__ import main


if __name__ == "__main__":
    main()

"""User preferences with JSON persistence.

Settings are stored under a fixed storage key at:
    ~/Library/Application Support/PomodoroFocus/pomodoro.settings.v1.json

Set ``POMODORO_FOCUS_HOME`` to use a different directory.

Usage::

    settings = load_settings()
    settings = replace(settings, work_minutes=50)
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path

logger = logging.getLogger(__name__)


STORAGE_KEY = "pomodoro.settings.v1"

APP_SUPPORT_DIR = Path(
    os.environ.get("POMODORO_FOCUS_HOME")
    or Path.home() / "Library" / "Application Support" / "PomodoroFocus"
)
SETTINGS_PATH = APP_SUPPORT_DIR / f"{STORAGE_KEY}.json"

# On-disk keys keep the camelCase shape of the stored blob.
_BLOB_KEYS: dict[str, str] = {
    "work_minutes": "workMinutes",
    "short_break_minutes": "shortBreakMinutes",
    "long_break_minutes": "longBreakMinutes",
    "rounds_until_long_break": "roundsUntilLongBreak",
    "auto_start_next": "autoStartNext",
    "sound": "sound",
}

# Editor range for every integer field.
MIN_VALUE = 1
MAX_VALUE = 180

_INT_FIELDS = (
    "work_minutes",
    "short_break_minutes",
    "long_break_minutes",
    "rounds_until_long_break",
)


@dataclass(frozen=True)
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    rounds_until_long_break: int = 4
    auto_start_next: bool = False

    # ── audio ─────────────────────────────────────────────────────────
    sound: bool = True


DEFAULT_SETTINGS = Settings()


class _CorruptBlob(ValueError):
    pass


def clamp_settings(settings: Settings) -> Settings:
    """Return a copy with every numeric field kept within the editor range."""
    return replace(
        settings,
        **{
            name: min(MAX_VALUE, max(MIN_VALUE, getattr(settings, name)))
            for name in _INT_FIELDS
        },
    )


def settings_to_blob(settings: Settings) -> dict:
    return {_BLOB_KEYS[k]: v for k, v in asdict(settings).items()}


def settings_from_blob(data: object) -> Settings:
    """Merge a decoded blob over the defaults.

    Raises ``_CorruptBlob`` when the blob is not an object or a known
    field carries a value of the wrong type.
    """
    if not isinstance(data, dict):
        raise _CorruptBlob(f"expected an object, got {type(data).__name__}")

    values = {}
    for f in fields(Settings):
        camel = _BLOB_KEYS[f.name]
        if camel in data:
            value = data[camel]
        elif f.name in data:
            value = data[f.name]
        else:
            continue

        # bool is an int subclass; keep the two apart
        if f.name in _INT_FIELDS:
            if isinstance(value, bool) or not isinstance(value, int):
                raise _CorruptBlob(f"{camel}: expected an integer")
        elif not isinstance(value, bool):
            raise _CorruptBlob(f"{camel}: expected a boolean")
        values[f.name] = value

    return clamp_settings(Settings(**values))


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults.

    A missing file, unreadable file or corrupt blob all yield
    ``DEFAULT_SETTINGS``; nothing is raised.
    """
    path = path or SETTINGS_PATH
    try:
        if not path.exists():
            return DEFAULT_SETTINGS
        data = json.loads(path.read_text(encoding="utf-8"))
        settings = settings_from_blob(data)
    except Exception as exc:
        logger.debug("Ignoring stored settings at %s: %s", path, exc)
        return DEFAULT_SETTINGS
    logger.debug("Loaded settings from %s", path)
    return settings


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON.  Failures are logged and dropped."""
    path = path or SETTINGS_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(settings_to_blob(settings), indent=2) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        logger.debug("Could not save settings to %s: %s", path, exc)
        return
    logger.debug("Saved settings to %s", path)

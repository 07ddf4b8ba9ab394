"""Alert tone synthesis and playback using numpy + QSoundEffect.

The tone is generated programmatically as a WAV file and cached to disk
so later launches skip synthesis.  Playback is best-effort: if the cache
cannot be written or the effect cannot be loaded, ``play`` does nothing.

Sound names
-----------
- ``alert``  - short 880 Hz beep at the end of an interval
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..settings import APP_SUPPORT_DIR

logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SOUND_NAMES = ("alert",)

SAMPLE_RATE = 44100

# Gain floor for exponential ramps (a ramp cannot start or end at 0).
_SILENCE = 0.0001


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _exp_ramp(start: float, end: float, n_samples: int) -> np.ndarray:
    """Exponential gain ramp from *start* to *end* (both > 0)."""
    return np.geomspace(start, end, n_samples)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_alert() -> bytes:
    """Interval end: 880 Hz sine, quick swell to 0.2 then fade by 250 ms."""
    duration = 0.26
    tone = _sine(880.0, duration)
    attack = int(SAMPLE_RATE * 0.02)
    decay = int(SAMPLE_RATE * 0.25) - attack
    tail = len(tone) - attack - decay
    env = np.concatenate([
        _exp_ramp(_SILENCE, 0.2, attack),
        _exp_ramp(0.2, _SILENCE, decay),
        np.full(tail, _SILENCE),
    ])
    return _to_wav_bytes(tone * env)


_GENERATORS: dict[str, callable] = {
    "alert": _generate_alert,
}


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Manages tone synthesis, caching, and playback.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.play("alert")
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 1.0  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        try:
            self._ensure_wav_files()
        except OSError as exc:
            logger.debug("Sound cache unavailable at %s: %s", self._sounds_dir, exc)
            return
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self, name: str = "alert") -> None:
        """Play a sound by name.  No-op if disabled, unknown or unavailable."""
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is not None:
            effect.play()

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def available(self) -> bool:
        """True when at least one effect loaded."""
        return bool(self._effects)

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        """Generate any missing WAV files to the cache directory."""
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        for name, gen_fn in _GENERATORS.items():
            path = self._sounds_dir / f"{name}.wav"
            if not path.exists():
                path.write_bytes(gen_fn())

    def _load_effects(self) -> None:
        """Create QSoundEffect instances from cached WAV files."""
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(self._volume)
                self._effects[name] = effect

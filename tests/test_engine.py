"""Tests for the Pomodoro Focus timer engine.

Covers: start/pause, reset, manual mode switches, countdown ticks,
completion transitions and round counting, auto-start, sound alerts,
settings changes mid-countdown, disposal, and the derived display values.
"""

import pytest
from PyQt6.QtTest import QTest

from pomodorofocus.settings import Settings
from pomodorofocus.timer.engine import (
    TimerEngine, Mode, TICK_INTERVAL_MS,
    duration_for, format_time, progress_percent,
)

from helpers import AlertRecorder, SignalCollector, complete_session


# ═══════════════════════════════════════════════════════════════════════════
#  INITIAL STATE / START-PAUSE
# ═══════════════════════════════════════════════════════════════════════════


class TestStartPause:

    def test_initial_state(self, engine):
        assert engine.mode == Mode.WORK
        assert engine.is_running is False
        assert engine.seconds_left == 25 * 60
        assert engine.rounds_completed == 0
        assert engine.timer_active is False

    def test_tick_interval_is_one_second(self, engine):
        assert engine._qt_timer.interval() == TICK_INTERVAL_MS == 1000

    def test_toggle_starts_and_pauses(self, engine):
        engine.toggle()
        assert engine.is_running is True
        assert engine.timer_active is True

        engine.toggle()
        assert engine.is_running is False
        assert engine.timer_active is False

    def test_toggle_keeps_mode_and_seconds(self, engine):
        engine.start()
        engine._on_tick()
        engine._on_tick()
        engine.toggle()
        assert engine.mode == Mode.WORK
        assert engine.seconds_left == 25 * 60 - 2

    def test_running_changed_fires_on_edges_only(self, engine):
        c = SignalCollector()
        engine.running_changed.connect(c)

        engine.start()
        engine.start()  # already running
        engine.pause()
        engine.pause()  # already paused

        assert c.items == [True, False]


# ═══════════════════════════════════════════════════════════════════════════
#  TICK / COUNTDOWN
# ═══════════════════════════════════════════════════════════════════════════


class TestCountdown:

    def test_tick_decrements(self, engine):
        engine.start()
        engine._on_tick()
        assert engine.seconds_left == 25 * 60 - 1

    def test_qtimer_drives_the_countdown(self, engine):
        engine._qt_timer.setInterval(10)
        engine.start()
        QTest.qWait(200)
        engine.pause()
        assert engine.seconds_left < 25 * 60

    def test_tick_while_paused_is_ignored(self, engine):
        engine._on_tick()
        assert engine.seconds_left == 25 * 60

    def test_tick_signal_emits_seconds_left(self, engine):
        c = SignalCollector()
        engine.tick.connect(c)

        engine.start()
        engine._on_tick()

        assert c.last == engine.seconds_left == 25 * 60 - 1

    @pytest.mark.parametrize("minutes,ticks", [
        (1, 1), (1, 59), (2, 60), (2, 119), (25, 10), (25, 1499),
    ])
    def test_n_ticks_subtract_n(self, qapp, minutes, ticks):
        engine = TimerEngine(settings=Settings(work_minutes=minutes))
        engine.start()
        for _ in range(ticks):
            engine._on_tick()
        assert engine.seconds_left == max(0, minutes * 60 - ticks)
        engine.dispose()

    def test_last_tick_pins_zero_before_completion(self, engine):
        c = SignalCollector()
        engine.tick.connect(c)
        engine.start()
        engine._seconds_left = 1
        engine._on_tick()
        # 0 is reported, then the next interval's full length
        assert 0 in c.items
        assert c.last == 5 * 60


# ═══════════════════════════════════════════════════════════════════════════
#  COMPLETION / ROUNDS
# ═══════════════════════════════════════════════════════════════════════════


class TestCompletion:

    def test_work_completion_goes_to_short_break(self, engine, alerts):
        engine.start()
        engine._seconds_left = 1
        engine._on_tick()

        assert alerts.count == 1
        assert engine.mode == Mode.SHORT_BREAK
        assert engine.seconds_left == 5 * 60
        assert engine.rounds_completed == 1
        assert engine.is_running is False
        assert engine.timer_active is False

    def test_auto_start_runs_next_interval(self, engine_auto):
        complete_session(engine_auto)
        assert engine_auto.mode == Mode.SHORT_BREAK
        assert engine_auto.is_running is True
        assert engine_auto.timer_active is True

    def test_no_alert_when_sound_disabled(self, qapp):
        alerts = AlertRecorder()
        engine = TimerEngine(settings=Settings(sound=False), alert=alerts)
        complete_session(engine)
        assert alerts.count == 0
        assert engine.mode == Mode.SHORT_BREAK

    def test_completion_without_alert_callable(self, qapp):
        engine = TimerEngine()
        complete_session(engine)
        assert engine.mode == Mode.SHORT_BREAK

    def test_fourth_round_goes_to_long_break(self, engine):
        engine._rounds_completed = 3
        complete_session(engine)
        assert engine.rounds_completed == 4
        assert engine.mode == Mode.LONG_BREAK
        assert engine.seconds_left == 15 * 60

    @pytest.mark.parametrize("mode", [Mode.SHORT_BREAK, Mode.LONG_BREAK])
    def test_break_completion_returns_to_work(self, engine, mode):
        engine.switch_mode(mode)
        complete_session(engine)
        assert engine.mode == Mode.WORK
        assert engine.seconds_left == 25 * 60
        assert engine.rounds_completed == 0

    def test_full_cycle(self, engine):
        """Work → short → work → short → work → short → work → long → work."""
        for r in range(1, 5):
            assert engine.mode == Mode.WORK
            complete_session(engine)
            assert engine.rounds_completed == r
            expected = Mode.LONG_BREAK if r == 4 else Mode.SHORT_BREAK
            assert engine.mode == expected
            complete_session(engine)

        assert engine.mode == Mode.WORK
        assert engine.rounds_completed == 4

    def test_rounds_keep_counting_past_cycle(self, engine):
        for _ in range(8):
            if engine.mode != Mode.WORK:
                complete_session(engine)
            complete_session(engine)
        assert engine.rounds_completed == 8
        assert engine.mode == Mode.LONG_BREAK

    def test_every_round_is_long_with_one_round_per_cycle(self, qapp):
        engine = TimerEngine(settings=Settings(rounds_until_long_break=1))
        complete_session(engine)
        assert engine.mode == Mode.LONG_BREAK

    def test_session_completed_signal(self, engine):
        c = SignalCollector()
        engine.session_completed.connect(c)
        complete_session(engine)
        assert c.last == {
            "mode": Mode.WORK,
            "rounds_completed": 1,
            "next_mode": Mode.SHORT_BREAK,
            "auto_started": False,
        }

    def test_rounds_changed_signal(self, engine):
        c = SignalCollector()
        engine.rounds_changed.connect(c)
        complete_session(engine)
        assert c.items == [1]


# ═══════════════════════════════════════════════════════════════════════════
#  RESET / MODE SWITCH / CLEAR
# ═══════════════════════════════════════════════════════════════════════════


class TestControls:

    def test_reset_restores_full_duration_and_pauses(self, engine):
        engine.start()
        for _ in range(42):
            engine._on_tick()
        engine.reset()
        assert engine.seconds_left == 25 * 60
        assert engine.is_running is False
        assert engine.timer_active is False
        assert engine.mode == Mode.WORK

    def test_reset_keeps_rounds(self, engine):
        complete_session(engine)
        engine.reset()
        assert engine.rounds_completed == 1
        assert engine.mode == Mode.SHORT_BREAK
        assert engine.seconds_left == 5 * 60

    def test_switch_mode_pauses_and_resets(self, engine):
        engine.start()
        engine._on_tick()
        engine.switch_mode(Mode.LONG_BREAK)
        assert engine.mode == Mode.LONG_BREAK
        assert engine.seconds_left == 15 * 60
        assert engine.is_running is False
        assert engine.timer_active is False

    def test_switch_mode_never_counts_a_round(self, engine):
        engine.switch_mode(Mode.SHORT_BREAK)
        engine.switch_mode(Mode.WORK)
        assert engine.rounds_completed == 0

    def test_switch_to_same_mode_resets_seconds(self, engine):
        engine.start()
        engine._on_tick()
        engine.switch_mode(Mode.WORK)
        assert engine.seconds_left == 25 * 60

    def test_mode_changed_signal(self, engine):
        c = SignalCollector()
        engine.mode_changed.connect(c)
        engine.switch_mode(Mode.SHORT_BREAK)
        engine.switch_mode(Mode.SHORT_BREAK)
        assert c.items == [Mode.SHORT_BREAK]

    def test_clear_rounds_changes_nothing_else(self, engine):
        complete_session(engine)
        engine.start()
        engine._on_tick()
        before = (engine.mode, engine.seconds_left, engine.is_running)

        engine.clear_rounds()

        assert engine.rounds_completed == 0
        assert (engine.mode, engine.seconds_left, engine.is_running) == before


# ═══════════════════════════════════════════════════════════════════════════
#  SETTINGS CHANGES / DISPOSAL
# ═══════════════════════════════════════════════════════════════════════════


class TestSettingsAndDisposal:

    def test_apply_settings_rederives_seconds_mid_countdown(self, engine):
        engine.start()
        for _ in range(100):
            engine._on_tick()
        engine.apply_settings(Settings(work_minutes=50))
        assert engine.seconds_left == 50 * 60
        assert engine.is_running is True

    def test_apply_settings_uses_current_mode(self, engine):
        engine.switch_mode(Mode.SHORT_BREAK)
        engine.apply_settings(Settings(short_break_minutes=7))
        assert engine.seconds_left == 7 * 60

    def test_apply_settings_changes_long_break_threshold(self, engine):
        engine.apply_settings(Settings(rounds_until_long_break=2))
        complete_session(engine)
        complete_session(engine)
        complete_session(engine)
        assert engine.rounds_completed == 2
        assert engine.mode == Mode.LONG_BREAK

    def test_dispose_stops_ticks(self, engine):
        engine.start()
        engine.dispose()
        assert engine.timer_active is False
        before = engine.seconds_left
        engine._on_tick()
        assert engine.seconds_left == before

    def test_dispose_twice_is_safe(self, engine):
        engine.dispose()
        engine.dispose()
        assert engine.timer_active is False

    def test_dispose_reports_paused(self, engine):
        c = SignalCollector()
        engine.running_changed.connect(c)
        engine.start()
        engine.dispose()
        assert engine.is_running is False
        assert c.items == [True, False]


# ═══════════════════════════════════════════════════════════════════════════
#  DERIVED VALUES
# ═══════════════════════════════════════════════════════════════════════════


class TestDerivedValues:

    @pytest.mark.parametrize("seconds,text", [
        (65, "01:05"), (0, "00:00"), (3599, "59:59"), (1500, "25:00"), (6000, "100:00"),
    ])
    def test_format_time(self, seconds, text):
        assert format_time(seconds) == text

    def test_time_text_follows_engine(self, engine):
        engine.start()
        engine._on_tick()
        assert engine.time_text == "24:59"

    def test_progress_starts_at_zero(self, engine):
        assert engine.progress == 0.0

    def test_progress_halfway(self, qapp):
        engine = TimerEngine(settings=Settings(work_minutes=1))
        engine.start()
        for _ in range(30):
            engine._on_tick()
        assert engine.progress == pytest.approx(50.0)
        engine.dispose()

    def test_progress_percent_bounds(self):
        assert progress_percent(0, 60) == 100.0
        assert progress_percent(60, 60) == 0.0
        assert progress_percent(120, 60) == 0.0

    def test_progress_percent_zero_total(self):
        assert progress_percent(0, 0) == 100.0

    def test_duration_for_each_mode(self):
        s = Settings(work_minutes=30, short_break_minutes=6, long_break_minutes=20)
        assert duration_for(Mode.WORK, s) == 1800
        assert duration_for(Mode.SHORT_BREAK, s) == 360
        assert duration_for(Mode.LONG_BREAK, s) == 1200

    def test_duration_for_never_zero(self):
        assert duration_for(Mode.WORK, Settings(work_minutes=0)) == 1

    def test_total_seconds_matches_mode(self, engine):
        engine.switch_mode(Mode.LONG_BREAK)
        assert engine.total_seconds == 15 * 60

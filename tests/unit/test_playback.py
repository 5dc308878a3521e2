"""Tests for the playback cursor: stepping, seeking and auto-play."""

import pytest

from trie_visualizer.playback import Playback, PlaybackConfig
from trie_visualizer.step_types import Operation, OperationType
from trie_visualizer.steps import generate_steps


def _steps(word="abc"):
    return generate_steps([Operation(type=OperationType.INSERT, word=word)])


class FakeSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


class TestStepping:
    def test_starts_at_first_step(self):
        playback = Playback(_steps())

        assert playback.current_index == 0
        assert playback.total_steps == 6
        assert playback.current_step.step_index == 0
        assert not playback.is_playing

    def test_next_and_previous_clamp_to_bounds(self):
        playback = Playback(_steps())

        playback.previous()
        assert playback.current_index == 0

        for _ in range(10):
            playback.next()
        assert playback.current_index == 5

    def test_seek_clamps(self):
        playback = Playback(_steps())

        assert playback.seek(3).step_index == 3
        assert playback.seek(99).step_index == 5
        assert playback.seek(-4).step_index == 0

    def test_manual_navigation_pauses(self):
        playback = Playback(_steps())
        playback.play()

        playback.next()

        assert not playback.is_playing

    def test_reset(self):
        playback = Playback(_steps())
        playback.seek(4)

        playback.reset()

        assert playback.current_index == 0

    def test_empty_sequence(self):
        playback = Playback([])

        assert playback.current_step is None
        assert playback.next() is None
        playback.play()
        assert not playback.is_playing


class TestAutoPlay:
    def test_tick_advances_and_self_stops(self):
        playback = Playback(_steps())
        playback.play()

        moved = [playback.tick() for _ in range(8)]

        assert moved == [True] * 5 + [False] * 3
        assert playback.current_index == 5
        assert not playback.is_playing

    def test_tick_does_nothing_when_paused(self):
        playback = Playback(_steps())

        assert playback.tick() is False
        assert playback.current_index == 0

    def test_play_at_end_restarts(self):
        playback = Playback(_steps())
        playback.seek(5)

        playback.play()

        assert playback.current_index == 0
        assert playback.is_playing

    def test_run_plays_to_the_end(self):
        steps = _steps()
        playback = Playback(steps, speed=2)
        sleep = FakeSleep()
        seen = []

        advanced = playback.run(on_step=lambda s: seen.append(s.step_index), sleep=sleep)

        assert advanced == 5
        assert seen == [1, 2, 3, 4, 5]
        assert sleep.calls == [0.5] * 5
        assert not playback.is_playing

    def test_run_stops_when_paused(self):
        playback = Playback(_steps())

        def pause_at_two(step):
            if step.step_index == 2:
                playback.pause()

        advanced = playback.run(on_step=pause_at_two, sleep=FakeSleep())

        assert advanced == 2
        assert playback.current_index == 2

    def test_speed_change_during_run_changes_interval(self):
        playback = Playback(_steps())
        sleep = FakeSleep()

        playback.run(on_step=lambda s: playback.set_speed(0.5), sleep=sleep)

        assert sleep.calls[0] == 1.0
        assert sleep.calls[1:] == [2.0] * 4


class TestSpeed:
    def test_interval_follows_speed(self):
        playback = Playback(_steps(), speed=1.25)

        assert playback.interval == pytest.approx(0.8)

    def test_unsupported_speed_rejected(self):
        with pytest.raises(ValueError, match="Unsupported speed"):
            Playback(_steps(), speed=3)

    def test_custom_config(self):
        config = PlaybackConfig(speed_options=(1, 4), base_interval=2.0)

        playback = Playback(_steps(), speed=4, config=config)

        assert playback.interval == 0.5

import pytest

from stepsearch.algorithms import dfs, puzzle_search
from stepsearch.core.autoplay import AutoPlayer


class TestAutoPlayer:
    def test_tick_waits_for_interval(self, clock):
        player = AutoPlayer(dfs.new_session(), dfs.step, interval_s=1.0, clock=clock)
        player.play()
        assert not player.tick()  # no time has passed
        clock.now = 0.5
        assert not player.tick()
        clock.now = 1.0
        assert player.tick()
        assert player.session.steps == 1
        assert player.seconds_until_due() == pytest.approx(1.0)

    def test_tick_does_nothing_while_paused(self, clock):
        player = AutoPlayer(dfs.new_session(), dfs.step, interval_s=1.0, clock=clock)
        clock.now = 10
        assert not player.tick()
        assert player.session.steps == 0

    def test_stops_itself_at_goal(self, clock):
        player = AutoPlayer(dfs.new_session(), dfs.step, interval_s=1.0, clock=clock)
        ran = player.run(sleep=clock.sleep)
        assert ran == 5
        assert player.session.complete
        assert not player.playing
        assert clock.now == pytest.approx(5.0)

    def test_run_respects_max_ticks(self, clock):
        player = AutoPlayer(dfs.new_session(), dfs.step, interval_s=0.5, clock=clock)
        assert player.run(sleep=clock.sleep, max_ticks=2) == 2
        assert player.session.steps == 2
        assert not player.playing

    def test_pause_cancels(self, clock):
        player = AutoPlayer(dfs.new_session(), dfs.step, interval_s=1.0, clock=clock)
        assert player.toggle() is True
        assert player.toggle() is False
        clock.now = 5
        assert not player.tick()

    def test_manual_step_ignored_while_playing(self, clock):
        player = AutoPlayer(dfs.new_session(), dfs.step, interval_s=1.0, clock=clock)
        player.step_once()
        assert player.session.steps == 1
        player.play()
        player.step_once()
        assert player.session.steps == 1

    def test_idle_session_does_not_play(self, clock):
        player = AutoPlayer(puzzle_search.new_session(), puzzle_search.step, interval_s=0.5, clock=clock)
        player.play()
        assert not player.playing
        assert player.run(sleep=clock.sleep) == 0

    def test_replace_session_pauses(self, clock):
        player = AutoPlayer(dfs.new_session(), dfs.step, interval_s=1.0, clock=clock)
        player.play()
        player.replace_session(dfs.new_session())
        assert not player.playing

    def test_negative_interval_rejected(self):
        with pytest.raises(ValueError):
            AutoPlayer(dfs.new_session(), dfs.step, interval_s=-1)

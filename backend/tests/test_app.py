"""
Tests for the pygame window glue.

The display runs on SDL's dummy video driver so no real window opens.
"""

import sys
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pygame  # noqa: E402
import random  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

import app  # noqa: E402
from app import translate_key, PygameView, idle_ms, run, POLL_MS  # noqa: E402
from data_access.high_score import HighScoreStore  # noqa: E402
from main import SnakeGame, GameConfig  # noqa: E402
from services.scheduler import FixedIntervalScheduler  # noqa: E402
from domain.constants import UP, DOWN, LEFT, RIGHT, RESTART_KEY  # noqa: E402
from domain.game_state import GameState, GameStatus  # noqa: E402


class TestTranslateKey:

    @pytest.mark.parametrize("key,expected", [
        (pygame.K_LEFT, LEFT),
        (pygame.K_RIGHT, RIGHT),
        (pygame.K_UP, UP),
        (pygame.K_DOWN, DOWN),
        (pygame.K_r, RESTART_KEY),
    ])
    def test_known_keys(self, key, expected):
        assert translate_key(key) == expected

    def test_unknown_key(self):
        assert translate_key(pygame.K_SPACE) is None


class TestPygameView:

    @pytest.fixture
    def screen(self):
        pygame.display.init()
        surface = pygame.display.set_mode((500, 400))
        yield surface
        pygame.display.quit()

    def test_draw_blits_rendered_frame(self, screen):
        state = GameState(
            tick_number=0,
            snake_positions=[(50, 50), (40, 50), (30, 50)],
            food=(300, 300),
            direction=RIGHT,
            score=0,
            high_score=0,
            status=GameStatus.RUNNING,
            width=500,
            height=400,
            cell_size=10,
        )
        PygameView(screen).draw(state)
        assert tuple(screen.get_at((55, 55)))[:3] == (0, 255, 0)
        assert tuple(screen.get_at((305, 305)))[:3] == (255, 0, 0)
        assert tuple(screen.get_at((450, 350)))[:3] == (0, 0, 255)


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class TestIdleMs:
    """The loop sleeps until the next tick, but never longer than one poll."""

    def test_stopped_scheduler_polls(self):
        scheduler = FixedIntervalScheduler(100, clock=FakeClock())
        assert idle_ms(scheduler) == POLL_MS

    def test_capped_at_poll_interval(self):
        clock = FakeClock()
        scheduler = FixedIntervalScheduler(100, clock=clock)
        scheduler.start()
        assert idle_ms(scheduler) == POLL_MS

    def test_sleeps_only_until_tick(self):
        clock = FakeClock()
        scheduler = FixedIntervalScheduler(100, clock=clock)
        scheduler.start()
        clock.now = 97
        assert idle_ms(scheduler) == 3
        clock.now = 100
        assert idle_ms(scheduler) == 0


class TestRun:
    """Tests for the window loop, driven by scripted pygame events."""

    @pytest.fixture
    def game(self, monkeypatch):
        store = Mock(spec=HighScoreStore)
        store.load.return_value = 0
        scheduler = FixedIntervalScheduler(100, clock=FakeClock())
        game = SnakeGame(GameConfig(), store=store, scheduler=scheduler, rng=random.Random(0))
        game.state = game.state.copy(food=(400, 300))
        # A tick is due on every poll while the game runs
        monkeypatch.setattr(scheduler, "tick_due", lambda now=None: scheduler.is_running)
        return game

    @pytest.fixture
    def draw(self, monkeypatch):
        draw = Mock()
        monkeypatch.setattr(app.PygameView, "draw", lambda self, state: draw(state))
        return draw

    @pytest.fixture
    def waits(self, monkeypatch):
        waits = Mock()
        monkeypatch.setattr(pygame.time, "wait", waits)
        return waits

    @pytest.fixture
    def quit_spy(self, monkeypatch):
        spy = Mock(wraps=pygame.quit)
        monkeypatch.setattr(pygame, "quit", spy)
        return spy

    def script_events(self, monkeypatch, *batches):
        """Feed one batch of events per poll, then close the window."""
        polls = iter(batches)
        monkeypatch.setattr(
            pygame.event, "get",
            lambda *args, **kwargs: next(polls, [pygame.event.Event(pygame.QUIT)])
        )

    def record_ticks(self, monkeypatch, game):
        ticked = []
        real_tick = game.tick

        def tick():
            state = real_tick()
            ticked.append(state)
            return state

        monkeypatch.setattr(game, "tick", tick)
        return ticked

    def test_every_tick_is_followed_by_a_draw(self, monkeypatch, game, draw, waits, quit_spy):
        initial = game.state
        ticked = self.record_ticks(monkeypatch, game)
        self.script_events(monkeypatch, [], [], [])

        run(game)

        drawn = [c.args[0] for c in draw.call_args_list]
        assert len(ticked) == 3
        assert drawn[0] is initial
        assert len(drawn) == 1 + len(ticked)
        for drawn_state, ticked_state in zip(drawn[1:], ticked):
            assert drawn_state is ticked_state
        assert [s.head for s in ticked] == [(60, 50), (70, 50), (80, 50)]

    def test_loop_sleeps_between_polls(self, monkeypatch, game, draw, waits, quit_spy):
        self.script_events(monkeypatch, [], [])

        run(game)

        assert waits.call_count >= 2
        for c in waits.call_args_list:
            assert 0 <= c.args[0] <= POLL_MS

    def test_direction_key_reaches_next_tick(self, monkeypatch, game, draw, waits, quit_spy):
        ticked = self.record_ticks(monkeypatch, game)
        self.script_events(monkeypatch, [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN)])

        run(game)

        assert ticked[0].head == (50, 60)

    def test_restart_key_after_game_over_restarts_and_redraws(self, monkeypatch, game, draw, waits, quit_spy):
        # Head already off the board: the first tick ends the game
        game.state = game.state.copy(snake_positions=[(500, 50), (490, 50), (480, 50)])
        self.script_events(
            monkeypatch,
            [],
            [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r)],
        )

        run(game)

        drawn = [c.args[0] for c in draw.call_args_list]
        assert drawn[1].status is GameStatus.GAME_OVER
        assert drawn[2].is_running
        assert drawn[2].snake_positions == [(50, 50), (40, 50), (30, 50)]
        assert drawn[2].score == 0
        assert game.games_played == 1
        assert game.state.is_running

    @pytest.mark.parametrize("event", [
        pygame.event.Event(pygame.QUIT),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ])
    def test_quit_and_escape_end_the_loop(self, monkeypatch, game, draw, waits, quit_spy, event):
        ticked = self.record_ticks(monkeypatch, game)
        self.script_events(monkeypatch, [event], [], [])

        run(game)

        assert ticked == []
        quit_spy.assert_called_once()

import logging
import sys

import numpy as np
import pygame
import pytest

from config import GameConfig, parse_config
from logging_config import setup_logging
from loop import InputSlot
from pong import calculate_mouse_pos, dispatch_event, game, run_headless
from simulation import SimulationState


def test_mouse_pos_subtracts_origin_and_scroll():
    assert calculate_mouse_pos((120, 340)) == (120, 340)
    assert calculate_mouse_pos((120, 340), origin=(20, 40), scroll=(0, 100)) == (100, 200)


def test_motion_event_feeds_slot():
    inputs = InputSlot()
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 240), rel=(0, 0), buttons=(0, 0, 0))
    assert dispatch_event(event, inputs)
    assert inputs.drain() == (240, False)


def test_button_event_feeds_slot():
    inputs = InputSlot()
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1)
    assert dispatch_event(event, inputs)
    assert inputs.drain() == (None, True)


def test_quit_events_stop_the_game():
    inputs = InputSlot()
    assert not dispatch_event(pygame.event.Event(pygame.QUIT), inputs)
    assert not dispatch_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE), inputs)


def test_headless_run_records_observations():
    state, obs = run_headless(GameConfig(headless=True), ticks=200)
    assert obs.shape == (200, 6)
    assert np.isfinite(obs).all()
    # the scripted pointer follows the ball, so the left side never misses
    assert state.score_computer == 0


def test_parse_config_defaults():
    config = parse_config([])
    assert (config.width, config.height, config.fps) == (800, 600, 30)
    assert not config.headless


def test_parse_config_flags():
    config = parse_config(['--headless', '--ticks', '50', '--fps', '60', '--log-level', 'debug'])
    assert config.headless
    assert config.ticks == 50
    assert config.fps == 60
    assert config.level == 10


@pytest.mark.parametrize('argv', [['--fps', '0'], ['--width', '-1'], ['--log-level', 'loud']])
def test_parse_config_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        parse_config(argv)


def test_config_validation():
    with pytest.raises(ValueError):
        GameConfig(height=0)


def post_before_game(*events):
    # the queue only exists while the display is up; game() re-inits on top of it
    pygame.init()
    pygame.display.set_mode((800, 600))
    for event in events:
        pygame.event.post(event)


def test_game_moves_paddle_on_the_same_tick():
    state = SimulationState()
    state.paddle_human = 250
    state.ball.x, state.ball.y, state.ball.vx, state.ball.vy = 5, 60, -10, 0
    post_before_game(pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 100), rel=(0, 0), buttons=(0, 0, 0)))

    game(GameConfig(ticks=1), state=state)

    assert state.paddle_human == 50
    assert state.ball.vx == 10
    assert state.score_computer == 0


def test_game_ignores_click_made_during_play():
    state = SimulationState()
    state.score_human = 2
    state.paddle_computer = 400
    state.ball.x, state.ball.y, state.ball.vx, state.ball.vy = 795, 100, 10, 0
    post_before_game(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1))

    game(GameConfig(ticks=2), state=state)

    assert state.winning
    assert (state.score_human, state.score_computer) == (3, 0)


def test_game_click_on_win_screen_starts_over():
    state = SimulationState()
    state.score_computer = 3
    state.winning = True
    post_before_game(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1))

    game(GameConfig(ticks=1), state=state)

    assert not state.winning
    assert (state.score_human, state.score_computer) == (0, 0)


def test_game_quits_and_shuts_pygame_down():
    state = SimulationState()
    post_before_game(pygame.event.Event(pygame.QUIT))

    # the tick cap only guards against a hang; quit ends the loop after one tick
    game(GameConfig(ticks=50), state=state)

    assert state.ball.x == 60
    assert not pygame.get_init()


def test_headless_summary_reports_computer_lag(caplog):
    with caplog.at_level(logging.INFO, logger='pong'):
        run_headless(GameConfig(headless=True), ticks=60)
    assert 'computer lag' in caplog.text


def test_setup_logging_replaces_root_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stdout
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

import logging
import sys

import numpy as np
import pygame

from config import parse_config
from logging_config import setup_logging
from loop import ClockTicker, GameLoop
from render import PygameSurface
from simulation import SimulationState, observe

log = logging.getLogger("pong")

HEADLESS_TICKS = 900


def calculate_mouse_pos(pos, origin=(0, 0), scroll=(0, 0)):
    # pygame already reports window-local positions; origin/scroll are for embedded surfaces
    return pos[0] - origin[0] - scroll[0], pos[1] - origin[1] - scroll[1]


def dispatch_event(event, inputs):
    """Forward a pygame event to the input slot. Returns False on quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return False
    if event.type == pygame.MOUSEMOTION:
        _, y = calculate_mouse_pos(event.pos)
        inputs.pointer_moved(y)
    elif event.type == pygame.MOUSEBUTTONDOWN:
        inputs.pointer_down()
    return True


def game(config, state=None):
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption(config.caption)
        surface = PygameSurface(screen)
        if state is None:
            state = SimulationState(board_width=surface.width, board_height=surface.height)
        running = True

        def pump(loop):
            nonlocal running
            for event in pygame.event.get():
                if not dispatch_event(event, loop.inputs):
                    running = False

        loop = GameLoop(state, surface, ClockTicker(config.fps),
                        poll_inputs=pump, on_tick=lambda _: pygame.display.flip())
        log.info("Starting %dx%d at %d fps", config.width, config.height, config.fps)
        loop.run(max_ticks=config.ticks or None, should_stop=lambda: not running)
        log.info("Closed after %d ticks, score %d - %d",
                 loop.ticks, state.score_human, state.score_computer)
        return state
    finally:
        pygame.quit()


def run_headless(config, ticks=None):
    """Play without a window: the pointer tracks the ball, clicks restart finished games."""
    state = SimulationState(board_width=config.width, board_height=config.height)
    history = []
    games = 0

    def script(loop):
        nonlocal games
        history.append(observe(loop.state))
        if loop.state.winning:
            games += 1
            loop.inputs.pointer_down()
        else:
            loop.inputs.pointer_moved(loop.state.ball.y)

    loop = GameLoop(state, None, ClockTicker(0), on_tick=script)
    loop.run(max_ticks=ticks or config.ticks or HEADLESS_TICKS)

    obs = np.stack(history)
    # how far the computer paddle center trails the ball, in pixels
    lag = np.mean(np.abs(obs[:, 1] - obs[:, 3])) * config.height / 2
    log.info("Headless run: %d ticks, %d finished games, score %d - %d, computer lag %.1f px",
             loop.ticks, games, state.score_human, state.score_computer, lag)
    return state, obs


def main(argv=None):
    config = parse_config(argv)
    setup_logging(config.level)
    if config.headless:
        run_headless(config)
    else:
        game(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())

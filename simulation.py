import logging
import math
from dataclasses import dataclass, field

import numpy as np

log = logging.getLogger(__name__)

WINNING_SCORE = 3
PADDLE_THICKNESS = 10
PADDLE_HEIGHT = 100
BALL_RADIUS = 10

CPU_STEP = 6
CPU_DEAD_ZONE = 35
DEFLECTION = 0.35


@dataclass
class Ball:
    x: float = 50.0
    y: float = 50.0
    vx: float = 10.0
    vy: float = 4.0


@dataclass
class SimulationState:
    board_width: float = 800.0
    board_height: float = 600.0
    ball: Ball = field(default_factory=Ball)
    paddle_human: float = 250.0
    paddle_computer: float = 250.0
    score_human: int = 0
    score_computer: int = 0
    winning: bool = False


def _covers(paddle_y, y):
    return paddle_y <= y < paddle_y + PADDLE_HEIGHT


def _deflect(ball, paddle_y):
    ball.vx = -ball.vx
    # vertical speed proportional to distance from the paddle center
    ball.vy = (ball.y - (paddle_y + PADDLE_HEIGHT / 2)) * DEFLECTION


def ball_reset(state):
    """Re-serve from the board center after a point.

    Must run after the score increment so the win check sees the new score.
    """
    if state.score_human >= WINNING_SCORE or state.score_computer >= WINNING_SCORE:
        state.winning = True
        log.info("Game over: %d - %d", state.score_human, state.score_computer)

    state.ball.vx = -state.ball.vx
    state.ball.x = state.board_width / 2
    state.ball.y = state.board_height / 2


def computer_movement(state):
    center = state.paddle_computer + PADDLE_HEIGHT / 2
    if center < state.ball.y - CPU_DEAD_ZONE:
        state.paddle_computer += CPU_STEP
    elif center > state.ball.y + CPU_DEAD_ZONE:
        state.paddle_computer -= CPU_STEP


def advance_tick(state):
    """Advance the simulation by one tick, in place. Frozen while winning."""
    if state.winning:
        return

    computer_movement(state)

    ball = state.ball
    ball.x += ball.vx
    ball.y += ball.vy

    if ball.x < 0:
        if _covers(state.paddle_human, ball.y):
            _deflect(ball, state.paddle_human)
        else:
            state.score_computer += 1
            log.info("Computer scores (%d - %d)", state.score_human, state.score_computer)
            ball_reset(state)
    if ball.x > state.board_width:
        if _covers(state.paddle_computer, ball.y):
            _deflect(ball, state.paddle_computer)
        else:
            state.score_human += 1
            log.info("Player scores (%d - %d)", state.score_human, state.score_computer)
            ball_reset(state)

    # no clamping, the ball may sit past the wall for a frame
    if ball.y < 0 or ball.y > state.board_height:
        ball.vy = -ball.vy


def move_human_paddle(state, pointer_y):
    if not math.isfinite(pointer_y):
        log.debug("Ignoring non-finite pointer y %r", pointer_y)
        return
    state.paddle_human = pointer_y - PADDLE_HEIGHT / 2


def handle_click(state):
    """Leave the win screen. Does nothing while a game is in progress."""
    if not state.winning:
        return
    state.score_human = 0
    state.score_computer = 0
    state.winning = False
    log.info("New game")


def observe(state):
    # Normalize positions/velocities around the board center
    half_w = state.board_width / 2
    half_h = state.board_height / 2
    return np.array([
        (state.paddle_human + PADDLE_HEIGHT / 2 - half_h) / half_h,
        (state.paddle_computer + PADDLE_HEIGHT / 2 - half_h) / half_h,
        (state.ball.x - half_w) / half_w,
        (state.ball.y - half_h) / half_h,
        state.ball.vx / 8.0,
        state.ball.vy / 8.0,
    ], dtype=np.float32)

"""
Fixed-rate game loop.

Input handlers never touch the simulation state directly: they write into an
InputSlot, which the loop drains at the start of every tick. The slot keeps
only the latest pointer position, so a burst of motion events collapses to
the last one.
"""
import logging
import threading

import pygame

from render import draw_everything
from simulation import advance_tick, handle_click, move_human_paddle

log = logging.getLogger(__name__)


class InputSlot:
    def __init__(self):
        self._lock = threading.Lock()
        self._pointer_y = None
        self._clicked = False

    def pointer_moved(self, y):
        with self._lock:
            self._pointer_y = y

    def pointer_down(self):
        with self._lock:
            self._clicked = True

    def drain(self):
        """Return (pointer_y or None, clicked) and empty the slot."""
        with self._lock:
            pending = (self._pointer_y, self._clicked)
            self._pointer_y = None
            self._clicked = False
        return pending


class ClockTicker:
    """Paces ticks with pygame's frame clock. fps=0 runs unthrottled."""

    def __init__(self, fps):
        if fps < 0:
            raise ValueError(f"fps must not be negative, got {fps}")
        self.fps = fps
        self.interval = 1.0 / fps if fps else 0.0
        self.clock = pygame.time.Clock()

    def wait(self):
        self.clock.tick(self.fps)


class GameLoop:
    def __init__(self, state, surface, ticker, inputs=None, poll_inputs=None, on_tick=None):
        self.state = state
        self.surface = surface
        self.ticker = ticker
        self.inputs = inputs if inputs is not None else InputSlot()
        self.poll_inputs = poll_inputs
        self.on_tick = on_tick
        self.ticks = 0

    def step(self):
        if self.poll_inputs is not None:
            self.poll_inputs(self)
        pointer_y, clicked = self.inputs.drain()
        if pointer_y is not None:
            move_human_paddle(self.state, pointer_y)
        # a click only counts against the state as it was before this tick
        if clicked:
            handle_click(self.state)

        advance_tick(self.state)
        if self.surface is not None:
            draw_everything(self.surface, self.state)

        self.ticks += 1
        if self.on_tick is not None:
            self.on_tick(self)

    def run(self, max_ticks=None, should_stop=None):
        log.debug("Loop running at %.1f ms/tick", self.ticker.interval * 1000)
        while max_ticks is None or self.ticks < max_ticks:
            if should_stop is not None and should_stop():
                break
            self.step()
            self.ticker.wait()
        return self.ticks

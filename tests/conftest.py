import os

# pygame must not open a real window during tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from simulation import SimulationState


class RecordingSurface:
    """Stand-in drawing surface that records every primitive call."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.calls = []

    def color_rect(self, x, y, w, h, color):
        self.calls.append(('rect', x, y, w, h, color))

    def color_circle(self, cx, cy, r, color):
        self.calls.append(('circle', cx, cy, r, color))

    def fill_text(self, text, x, y, color=None):
        self.calls.append(('text', text, x, y))

    def of(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture()
def state():
    return SimulationState()


@pytest.fixture()
def surface():
    return RecordingSurface()

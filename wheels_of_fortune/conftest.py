import pygame
import pytest

from wheels_of_fortune.canvas import Canvas
from wheels_of_fortune.generation import GenerationPolicy


class RecordingCanvas(Canvas):
    """Canvas that remembers every primitive in local and screen terms."""

    def __init__(self, size=(200, 200)):
        super().__init__(pygame.Surface(size))
        self.calls = []

    def background(self, color):
        self.calls.append(("background", color))
        super().background(color)

    def circle(self, x, y, diameter, color):
        self.calls.append(("circle", x, y, diameter, color, self.scale_factor(), len(self._stack)))
        super().circle(x, y, diameter, color)

    def line(self, x1, y1, x2, y2, color, weight=1.0):
        self.calls.append(("line", x1, y1, x2, y2, color, weight))
        super().line(x1, y1, x2, y2, color, weight)

    def quadratic(self, x0, y0, cx, cy, x1, y1, color, weight=1.0, segments=24):
        self.calls.append(("quadratic", x0, y0, cx, cy, x1, y1, color, weight, self.scale_factor()))
        super().quadratic(x0, y0, cx, cy, x1, y1, color, weight, segments)

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


class FixedStylePolicy(GenerationPolicy):
    def __init__(self, style="dots", inner_style="solid", seed=0):
        super().__init__(seed=seed)
        self.style = style
        self.inner_style = inner_style

    def choose_style(self):
        return self.style

    def choose_inner_style(self):
        return self.inner_style


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def make_policy():
    return FixedStylePolicy

"""Immediate-mode 2D drawing over a pygame surface.

pygame draws in screen pixels only, so this keeps a push/pop stack of affine
transforms (translate, rotate in degrees, uniform scale) and maps every
primitive through the current matrix before drawing. A primitive with alpha
below 255 is drawn on its own SRCALPHA layer the size of its bounding box
and blitted, so overlapping translucent fills compound.
"""
import math
from functools import lru_cache

import pygame

IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
CURVE_SEGMENTS = 24


@lru_cache(maxsize=None)
def _parse(name):
    return pygame.Color(name)


def _rgba(color):
    if isinstance(color, str):
        return _parse(color)
    return pygame.Color(color)


class Canvas:
    def __init__(self, surface):
        self.surface = surface
        self._matrix = IDENTITY
        self._stack = []

    def set_surface(self, surface):
        """Point the canvas at a new target, e.g. after a window resize."""
        self.surface = surface

    def background(self, color):
        self._matrix = IDENTITY
        self._stack.clear()
        self.surface.fill(_rgba(color))

    def _stamp(self, rgba, pts, pad, draw):
        if rgba.a >= 255:
            draw(self.surface, pts)
            return
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        left = math.floor(min(xs) - pad) - 1
        top = math.floor(min(ys) - pad) - 1
        w = math.ceil(max(xs) + pad) + 2 - left
        h = math.ceil(max(ys) + pad) + 2 - top
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        draw(layer, [(x - left, y - top) for x, y in pts])
        self.surface.blit(layer, (left, top))

    # --------- Transform stack ---------
    def push(self):
        self._stack.append(self._matrix)

    def pop(self):
        self._matrix = self._stack.pop()

    def translate(self, dx, dy):
        a, b, c, d, e, f = self._matrix
        self._matrix = (a, b, c, d, e + a * dx + c * dy, f + b * dx + d * dy)

    def rotate(self, degrees):
        a, b, c, d, e, f = self._matrix
        t = math.radians(degrees)
        ct, st = math.cos(t), math.sin(t)
        self._matrix = (a * ct + c * st, b * ct + d * st,
                        -a * st + c * ct, -b * st + d * ct, e, f)

    def scale(self, s):
        a, b, c, d, e, f = self._matrix
        self._matrix = (a * s, b * s, c * s, d * s, e, f)

    def transform_point(self, x, y):
        a, b, c, d, e, f = self._matrix
        return (a * x + c * y + e, b * x + d * y + f)

    def scale_factor(self):
        a, b, _, _, _, _ = self._matrix
        return math.hypot(a, b)

    # --------- Primitives ---------
    def circle(self, x, y, diameter, color):
        """Filled circle of the given local diameter centred at (x, y)."""
        rgba = _rgba(color)
        radius = 0.5 * diameter * self.scale_factor()
        if radius < 0.5:
            return
        self._stamp(rgba, [self.transform_point(x, y)], radius,
                    lambda target, pts: pygame.draw.circle(target, rgba, pts[0], radius))

    def line(self, x1, y1, x2, y2, color, weight=1.0):
        rgba = _rgba(color)
        width = max(1, int(round(weight * self.scale_factor())))
        pts = [self.transform_point(x1, y1), self.transform_point(x2, y2)]
        self._stamp(rgba, pts, width,
                    lambda target, p: pygame.draw.line(target, rgba, p[0], p[1], width))

    def quadratic(self, x0, y0, cx, cy, x1, y1, color, weight=1.0, segments=CURVE_SEGMENTS):
        """Stroke a quadratic Bezier from (x0, y0) via (cx, cy) to (x1, y1)."""
        rgba = _rgba(color)
        pts = []
        for i in range(segments + 1):
            t = i / float(segments)
            u = 1.0 - t
            px = u * u * x0 + 2 * u * t * cx + t * t * x1
            py = u * u * y0 + 2 * u * t * cy + t * t * y1
            pts.append(self.transform_point(px, py))
        width = max(1, int(round(weight * self.scale_factor())))

        def draw(target, p):
            pygame.draw.lines(target, rgba, False, p, width)
            if width > 2:
                # round the joints so thick curves do not show notches
                for q in p:
                    pygame.draw.circle(target, rgba, q, width * 0.5)

        self._stamp(rgba, pts, width, draw)

"""Drifting translucent particles behind the wheels."""
import logging
import random
from dataclasses import dataclass

import pygame

from .config import (
    BG,
    BG_DOT_COLORS,
    PARTICLE_ALPHA,
    PARTICLE_JITTER,
    PARTICLE_MAX_SPEED,
    PARTICLE_SIZE,
    PARTICLE_SPEED,
    WRAP_MARGIN,
)

logger = logging.getLogger(__name__)


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


@dataclass
class Particle:
    x: float
    y: float
    speed_x: float
    speed_y: float
    r: float                # drawn diameter
    color: pygame.Color


class BackgroundField:
    """Fixed-size set of particles that wander and wrap at the edges."""

    def __init__(self, particles, width, height, rng=None):
        self.particles = list(particles)
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height

    @classmethod
    def create(cls, count, width, height, rng=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"field size must be positive, got {width}x{height}")
        rng = rng if rng is not None else random.Random()
        particles = []
        for _ in range(count):
            color = pygame.Color(rng.choice(BG_DOT_COLORS))
            color.a = int(rng.uniform(*PARTICLE_ALPHA))
            particles.append(Particle(
                x=rng.uniform(0, width),
                y=rng.uniform(0, height),
                speed_x=rng.uniform(-PARTICLE_SPEED, PARTICLE_SPEED),
                speed_y=rng.uniform(-PARTICLE_SPEED, PARTICLE_SPEED),
                r=rng.uniform(*PARTICLE_SIZE),
                color=color,
            ))
        logger.debug("Created %d background particles over %dx%d", count, width, height)
        return cls(particles, width, height, rng=rng)

    def __len__(self):
        return len(self.particles)

    def resize(self, width, height):
        # Particles persist; out-of-range ones wrap on the next tick
        self.width = width
        self.height = height

    def tick(self):
        jitter = PARTICLE_JITTER
        vmax = PARTICLE_MAX_SPEED
        m = WRAP_MARGIN
        w, h = self.width, self.height
        uniform = self.rng.uniform
        for p in self.particles:
            p.x += p.speed_x
            p.y += p.speed_y

            # slow organic change of direction
            p.speed_x = clamp(p.speed_x + uniform(-jitter, jitter), -vmax, vmax)
            p.speed_y = clamp(p.speed_y + uniform(-jitter, jitter), -vmax, vmax)

            # toroidal wrap, not reflection
            if p.x < -m:
                p.x = w + m
            elif p.x > w + m:
                p.x = -m
            if p.y < -m:
                p.y = h + m
            elif p.y > h + m:
                p.y = -m

    def draw(self, canvas):
        for p in self.particles:
            canvas.circle(p.x, p.y, p.r, p.color)

    def render(self, canvas):
        """Clear to the base colour, draw the particles, then move them."""
        canvas.background(BG)
        self.draw(canvas)
        self.tick()

"""Random generation policy.

Every random decision a wheel or the layout makes goes through one of these
objects, so a seeded policy reproduces a whole field.
"""
import random

from . import palettes
from .config import DOT_STYLE_CHANCE, INNER_STYLES


class GenerationPolicy:
    """Seedable source of styles, palettes and uniform samples."""

    def __init__(self, seed=None, rng=None):
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

    def uniform(self, lo, hi):
        return self.rng.uniform(lo, hi)

    def choose_style(self):
        # Dot-heavy: most layers are dots, the rest rays
        return "dots" if self.rng.random() < DOT_STYLE_CHANCE else "rays"

    def choose_inner_style(self):
        return self.rng.choice(INNER_STYLES)

    def choose_palette(self):
        return palettes.pick(self.rng)

"""Fixed colour palettes for the wheels.

Each palette maps the eleven drawing roles of a wheel to a hex colour.
Palettes are shared read-only between every wheel that picks them.
"""
import random
from dataclasses import dataclass, fields
from functools import lru_cache

import pygame

ROLES = (
    "outer", "ring1", "ring2", "ring3",
    "dots1", "dots2", "dots3",
    "rays", "inner", "center", "tail",
)


@dataclass(frozen=True)
class Palette:
    name: str
    outer: str
    ring1: str
    ring2: str
    ring3: str
    dots1: str
    dots2: str
    dots3: str
    rays: str
    inner: str
    center: str
    tail: str

    @lru_cache(maxsize=None)
    def color(self, role):
        """Return the (r, g, b) tuple for a drawing role."""
        if role not in ROLES:
            raise ValueError(f"unknown palette role: {role!r}")
        c = pygame.Color(getattr(self, role))
        return (c.r, c.g, c.b)


PALETTES = (
    Palette("blush", outer="#FFFFFF", ring1="#FF7EB6", ring2="#FF96BF", ring3="#FFB7D4",
            dots1="#E83432", dots2="#FFFFFF", dots3="#FF7AAE",
            rays="#FF4C8B", inner="#E92D72", center="#000000", tail="#FF4F9D"),
    Palette("tangerine", outer="#FF9A00", ring1="#FFAF37", ring2="#FFC260", ring3="#FFDD9E",
            dots1="#E83432", dots2="#FF81B9", dots3="#FF507C",
            rays="#E83432", inner="#FF4D84", center="#000000", tail="#FF4F9D"),
    Palette("orchid", outer="#FEC850", ring1="#F7A6D8", ring2="#E86AB8", ring3="#B857B0",
            dots1="#B52A8B", dots2="#F5B3D9", dots3="#F43EA1",
            rays="#B52A8B", inner="#FF66C4", center="#000000", tail="#FF3D72"),
    Palette("violet", outer="#FFFFFF", ring1="#C77ADD", ring2="#A75BC7", ring3="#7E4AA8",
            dots1="#E83432", dots2="#FFFFFF", dots3="#D47BE0",
            rays="#E83432", inner="#6AEB76", center="#000000", tail="#FF4FA7"),
    Palette("mint", outer="#FFFFFF", ring1="#91EA7C", ring2="#C2FAB8", ring3="#F47FC2",
            dots1="#2E9F37", dots2="#C3F9C4", dots3="#F85AA4",
            rays="#2E9F37", inner="#FF5AAD", center="#000000", tail="#FF4FA0"),
    Palette("marigold", outer="#FDBA3B", ring1="#FFDD85", ring2="#FFEEC0", ring3="#F79F2D",
            dots1="#1B3C88", dots2="#FFFFFF", dots3="#C682CA",  # dark navy dots
            rays="#1B3C88", inner="#E93D67", center="#000000", tail="#FF4F9C"),
    Palette("sunset", outer="#FDC54C", ring1="#F275BD", ring2="#C964C5", ring3="#66A4C0",
            dots1="#C76A00", dots2="#FDC54C", dots3="#EF75D1",
            rays="#C76A00", inner="#9ECCE0", center="#000000", tail="#FF4F9D"),
    Palette("rose", outer="#FFFFFF", ring1="#F38DBF", ring2="#F05C8E", ring3="#D64A72",
            dots1="#E83432", dots2="#FFFFFF", dots3="#ED5393",
            rays="#E83432", inner="#6EB66A", center="#000000", tail="#FF4FA0"),
    Palette("navy", outer="#234BA0", ring1="#7ACD8A", ring2="#ED5AAA", ring3="#D96A98",
            dots1="#0D2C75", dots2="#1F46A3", dots3="#B05CCD",
            rays="#0D2C75", inner="#E63C45", center="#000000", tail="#FF4FA0"),
    Palette("ochre", outer="#EFB23A", ring1="#F47FBB", ring2="#6B75A0", ring3="#363939",
            dots1="#26488F", dots2="#FCEDC6", dots3="#ED5B5E",
            rays="#26488F", inner="#F4343D", center="#000000", tail="#FF4FA7"),
)


def _validate(palettes):
    if not palettes:
        raise ValueError("palette catalog is empty")
    for palette in palettes:
        for f in fields(palette):
            if f.name == "name":
                continue
            # pygame.Color raises ValueError on a malformed colour string
            pygame.Color(getattr(palette, f.name))


_validate(PALETTES)


def pick(rng=random):
    """Uniform choice over the catalog, with replacement."""
    return rng.choice(PALETTES)

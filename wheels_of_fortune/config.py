# ---------------- Config ----------------
from dataclasses import dataclass
from typing import Optional

WINDOW_TITLE = "Wheels of Fortune"
DEFAULT_WIDTH = 1000
DEFAULT_HEIGHT = 800
DEFAULT_FPS = 60

BG = (4, 87, 131)               # teal base colour behind everything

# Background particles
NUM_PARTICLES = 2580
PARTICLE_SIZE = (3.0, 15.0)     # drawn diameter range
PARTICLE_SPEED = 0.4            # initial |speed| per axis
PARTICLE_JITTER = 0.02          # per-frame velocity perturbation
PARTICLE_MAX_SPEED = 0.5
PARTICLE_ALPHA = (20, 120)
WRAP_MARGIN = 10.0
BG_DOT_COLORS = (
    "#FFFFFF",
    "#C7EBFF",
    "#FFAEC0",
    "#FFCF70",
    "#9EE7C8",
    "#F48BFD",
    "#A7F0FF",
    "#FFC2DD",
)

# Wheel layout
GRID_DIVISOR = 10               # base radius = min(w, h) / GRID_DIVISOR
RADIUS_JITTER = (0.75, 0.9)     # fraction of base radius per wheel

# Wheel breathing
PULSE_SPEED = (0.1, 1.0)        # degrees per frame
PULSE_AMP = (0.05, 0.15)        # fraction of radius

DOT_STYLE_CHANCE = 0.75         # otherwise rays
INNER_STYLES = ("solid", "dots", "rays")


@dataclass
class Settings:
    """Launch options for the desktop host."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    fps: int = DEFAULT_FPS
    particles: int = NUM_PARTICLES
    seed: Optional[int] = None
    duration: Optional[float] = None
    log_level: str = "INFO"

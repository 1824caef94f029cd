"""Per-frame orchestration of the background and the wheels."""
import logging
from dataclasses import dataclass

from .layout import layout

logger = logging.getLogger(__name__)

TOGGLE_KEYS = ("a", "A")


@dataclass
class AnimationState:
    animate: bool = True

    def toggle(self):
        self.animate = not self.animate
        return self.animate


class AnimationController:
    def __init__(self, width, height, field, policy, state=None):
        self.field = field
        self.policy = policy
        self.state = state if state is not None else AnimationState()
        self.width = width
        self.height = height
        self.frame_count = 0
        self.wheels = layout(width, height, policy)

    def frame(self, canvas):
        self.field.render(canvas)
        animate = self.state.animate
        for w in self.wheels:
            if animate:
                w.update()
            w.display(canvas)
        self.frame_count += 1

    def handle_key(self, key):
        """Toggle animation on 'a' / 'A'. Returns True if the key was used."""
        if key not in TOGGLE_KEYS:
            return False
        animate = self.state.toggle()
        logger.info("Animation %s", "resumed" if animate else "paused")
        return True

    def resize(self, width, height):
        # Replace the wheel set wholesale; particles are kept
        self.width = width
        self.height = height
        self.field.resize(width, height)
        self.wheels = layout(width, height, self.policy)
        logger.info("Resized to %dx%d", width, height)

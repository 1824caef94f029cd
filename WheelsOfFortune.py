import argparse
import logging
import random
import time

import pygame

from wheels_of_fortune.canvas import Canvas
from wheels_of_fortune.config import WINDOW_TITLE, Settings
from wheels_of_fortune.controller import AnimationController
from wheels_of_fortune.generation import GenerationPolicy
from wheels_of_fortune.logging_config import setup_logging
from wheels_of_fortune.particles import BackgroundField

logger = logging.getLogger("wheels_of_fortune.app")


# ========================
# Desktop application using pygame
# ========================
class WheelsOfFortune:
    """Hex-tiled wheels over drifting particles. Press A to toggle animation."""

    def __init__(self, settings=None):
        self.settings = settings or Settings()
        pygame.init()
        self.screen = pygame.display.set_mode((self.settings.width, self.settings.height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.canvas = Canvas(self.screen)

        self.width, self.height = self.screen.get_size()
        self.policy = GenerationPolicy(seed=self.settings.seed)
        # particles get their own stream so per-frame jitter never shifts the layout
        field_rng = random.Random(self.settings.seed)
        self.field = BackgroundField.create(self.settings.particles, self.width, self.height, rng=field_rng)
        self.controller = AnimationController(self.width, self.height, self.field, self.policy)

    def resize(self, width, height):
        self.width = max(1, width)
        self.height = max(1, height)
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        self.canvas.set_surface(self.screen)
        self.controller.resize(self.width, self.height)

    # --------- Event handling ---------
    def handle_event(self, event):
        if event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            key = event.unicode or pygame.key.name(event.key)
            self.controller.handle_key(key)

    def draw(self):
        self.controller.frame(self.canvas)
        pygame.display.flip()

    def run(self, duration=None):
        logger.info("Running at %d fps with %d particles and %d wheels",
                    self.settings.fps, len(self.field), len(self.controller.wheels))
        running = True
        start_time = time.time()
        while running:
            self.clock.tick(self.settings.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    self.handle_event(event)
            self.draw()
            if duration and (time.time() - start_time) >= duration:
                running = False
        logger.info("Stopped after %d frames", self.controller.frame_count)
        pygame.quit()


def parse_args(argv=None):
    defaults = Settings()
    parser = argparse.ArgumentParser(description="Wheels of Fortune: rotating hex-tiled wheels (press A to toggle)")
    parser.add_argument('--width', type=int, default=defaults.width)
    parser.add_argument('--height', type=int, default=defaults.height)
    parser.add_argument('--fps', type=int, default=defaults.fps)
    parser.add_argument('--particles', type=int, default=defaults.particles,
                        help='Number of background particles')
    parser.add_argument('--seed', type=int, default=None, help='Seed for a reproducible field')
    parser.add_argument('--duration', type=float, default=None,
                        help='Seconds to run before exiting (useful for headless testing).')
    parser.add_argument('--log-level', default=defaults.log_level,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    if args.particles < 0:
        parser.error("--particles cannot be negative")

    return Settings(
        width=args.width,
        height=args.height,
        fps=args.fps,
        particles=args.particles,
        seed=args.seed,
        duration=args.duration,
        log_level=args.log_level,
    )


def main(argv=None):
    settings = parse_args(argv)
    setup_logging(settings.log_level)
    app = WheelsOfFortune(settings)
    app.run(duration=settings.duration)


if __name__ == '__main__':
    main()

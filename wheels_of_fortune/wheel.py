"""The decorative wheel: concentric rotating rings of dots or rays."""
import math
from dataclasses import dataclass

from .config import PULSE_AMP, PULSE_SPEED

BLACK = (0, 0, 0)


@dataclass
class PatternLayer:
    radius: float
    dot_size: float
    count: int
    angle: float            # degrees
    speed: float            # degrees per frame
    style: str              # "dots" | "rays"
    dot_color: tuple        # (r, g, b)

    def advance(self):
        self.angle += self.speed


@dataclass
class InnerPattern(PatternLayer):
    # style: "solid" | "dots" | "rays"

    def advance(self):
        if self.style != "solid":
            self.angle += self.speed


def breathing_scale(phase, amp):
    """Uniform pulse factor; phase in degrees."""
    return 1.0 + math.sin(math.radians(phase)) * amp


def ring_angles(count):
    step = 360.0 / count
    return [step * i for i in range(count)]


class Wheel:
    def __init__(self, x, y, r, palette, policy):
        self.x = x
        self.y = y
        self.r = r
        self.palette = palette

        # Breathing / pulsing
        self.pulse_phase = policy.uniform(0, 360)
        self.pulse_speed = policy.uniform(*PULSE_SPEED)
        self.pulse_amp = policy.uniform(*PULSE_AMP)

        self.layers = [
            PatternLayer(
                radius=r * 0.9,
                dot_size=r * policy.uniform(0.1, 0.14),
                count=30,
                angle=policy.uniform(0, 360),
                speed=policy.uniform(0.4, 0.8),
                style=policy.choose_style(),
                dot_color=palette.color("dots1"),
            ),
            PatternLayer(
                radius=r * 0.75,
                dot_size=r * 0.12,
                count=20,
                angle=policy.uniform(0, 360),
                speed=policy.uniform(-0.6, -0.3),
                style=policy.choose_style(),
                dot_color=palette.color("dots2"),
            ),
            PatternLayer(
                radius=r * 0.55,
                dot_size=r * 0.10,
                count=18,
                angle=policy.uniform(0, 360),
                speed=policy.uniform(0.2, 0.5),
                style=policy.choose_style(),
                dot_color=palette.color("dots3"),
            ),
        ]

        self.inner = InnerPattern(
            radius=r * 0.35,
            dot_size=r * 0.08,
            count=30,
            angle=policy.uniform(0, 360),
            speed=policy.uniform(-0.7, 0.7),
            style=policy.choose_inner_style(),
            dot_color=palette.color("dots3"),
        )

    def __repr__(self):
        return f"Wheel(x={self.x:.1f}, y={self.y:.1f}, r={self.r:.1f}, palette={self.palette.name!r})"

    def breathing_scale(self):
        return breathing_scale(self.pulse_phase, self.pulse_amp)

    def update(self):
        for layer in self.layers:
            layer.advance()
        self.inner.advance()
        self.pulse_phase += self.pulse_speed

    # --------- Drawing ---------
    def display(self, canvas):
        r = self.r
        pal = self.palette
        canvas.push()
        canvas.translate(self.x, self.y)
        canvas.scale(self.breathing_scale())

        canvas.circle(0, 0, r * 2, pal.color("outer"))
        canvas.circle(0, 0, r * 1.9, pal.color("ring1"))
        self.draw_pattern_layer(canvas, self.layers[0])

        canvas.circle(0, 0, r * 1.55, pal.color("ring2"))
        self.draw_pattern_layer(canvas, self.layers[1])
        self.draw_pattern_layer(canvas, self.layers[2])

        canvas.circle(0, 0, r * 0.95, pal.color("ring3"))
        self.draw_inner(canvas)
        self.draw_tail(canvas)
        canvas.pop()

    def draw_pattern_layer(self, canvas, layer):
        canvas.push()
        canvas.rotate(layer.angle)
        if layer.style == "dots":
            self.draw_dot_ring(canvas, layer.radius, layer.dot_size, layer.dot_color, layer.count)
        elif layer.style == "rays":
            self.draw_rays(canvas, layer.radius, self.palette.color("rays"), layer.count)
        canvas.pop()

    def draw_inner(self, canvas):
        inner = self.inner
        r = self.r
        pal = self.palette
        canvas.push()
        canvas.rotate(inner.angle)
        if inner.style == "solid":
            canvas.circle(0, 0, r * 0.6, pal.color("inner"))
        elif inner.style == "dots":
            self.draw_dot_ring(canvas, inner.radius, inner.dot_size, inner.dot_color, inner.count)
            canvas.circle(0, 0, r * 0.5, pal.color("inner"))
        elif inner.style == "rays":
            self.draw_rays(canvas, inner.radius, pal.color("rays"), inner.count)
            canvas.circle(0, 0, r * 0.5, pal.color("inner"))

        # centre disc + tiny dot, rotation-invariant at the origin
        canvas.circle(0, 0, r * 0.32, pal.color("center"))
        canvas.circle(0, 0, r * 0.12, BLACK)
        canvas.pop()

    def draw_dot_ring(self, canvas, radius, dot_size, color, count):
        for a in ring_angles(count):
            t = math.radians(a)
            canvas.circle(math.cos(t) * radius, math.sin(t) * radius, dot_size, color)

    def draw_rays(self, canvas, radius, color, count):
        weight = self.r * 0.05
        inner = radius * 0.4
        for a in ring_angles(count):
            t = math.radians(a)
            ct, st = math.cos(t), math.sin(t)
            canvas.line(ct * inner, st * inner, ct * radius, st * radius, color, weight)

    def draw_tail(self, canvas):
        r = self.r
        canvas.quadratic(0, 0, r * 0.7, -r * 0.5, r * 1.2, -r * 0.1,
                         self.palette.color("tail"), weight=r * 0.08)

import math

import pygame
import pytest

from wheels_of_fortune.canvas import Canvas


def test_translate_rotate_scale_compose():
    c = Canvas(pygame.Surface((10, 10)))
    c.translate(100, 50)
    c.rotate(90)
    c.scale(2)
    x, y = c.transform_point(10, 0)
    # +x rotated 90 degrees points down the screen
    assert x == pytest.approx(100)
    assert y == pytest.approx(70)
    assert c.scale_factor() == pytest.approx(2)


def test_push_pop_restores_matrix():
    c = Canvas(pygame.Surface((10, 10)))
    c.translate(5, 5)
    c.push()
    c.rotate(33)
    c.scale(0.5)
    c.pop()
    assert c.transform_point(0, 0) == pytest.approx((5, 5))
    assert c.scale_factor() == pytest.approx(1)


def test_rotation_preserves_distance():
    c = Canvas(pygame.Surface((10, 10)))
    c.rotate(137.5)
    x, y = c.transform_point(3, 4)
    assert math.hypot(x, y) == pytest.approx(5)


def test_opaque_circle_is_drawn():
    surface = pygame.Surface((40, 40))
    c = Canvas(surface)
    c.background((0, 0, 0))
    c.translate(20, 20)
    c.circle(0, 0, 20, "#FF0000")
    assert tuple(surface.get_at((20, 20)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((1, 1)))[:3] == (0, 0, 0)


def test_translucent_circle_blends():
    surface = pygame.Surface((40, 40))
    c = Canvas(surface)
    c.background((0, 0, 0))
    c.circle(20, 20, 20, (255, 255, 255, 128))
    r = surface.get_at((20, 20)).r
    assert 90 < r < 170
    # outside the circle the layer leaves the target untouched
    assert tuple(surface.get_at((20, 2)))[:3] == (0, 0, 0)


def test_overlapping_translucent_circles_compound():
    once = pygame.Surface((40, 40))
    c = Canvas(once)
    c.background((0, 0, 0))
    c.circle(20, 20, 20, (255, 255, 255, 100))

    twice = pygame.Surface((40, 40))
    c = Canvas(twice)
    c.background((0, 0, 0))
    c.circle(20, 20, 20, (255, 255, 255, 100))
    c.circle(20, 20, 20, (255, 255, 255, 100))

    assert twice.get_at((20, 20)).r > once.get_at((20, 20)).r + 30


def test_translucent_fill_stays_behind_later_opaque_fill():
    surface = pygame.Surface((40, 40))
    c = Canvas(surface)
    c.background((0, 0, 0))
    c.circle(20, 20, 30, (255, 255, 255, 100))
    c.circle(20, 20, 10, (0, 0, 255))
    assert tuple(surface.get_at((20, 20)))[:3] == (0, 0, 255)
    r = surface.get_at((20, 7)).r
    assert 60 < r < 140


def test_translucent_circle_across_the_edge():
    surface = pygame.Surface((40, 40))
    c = Canvas(surface)
    c.background((0, 0, 0))
    c.circle(0, 0, 16, (255, 0, 0, 200))
    assert surface.get_at((1, 1)).r > 120


def test_line_and_curve_draw_something():
    surface = pygame.Surface((60, 60))
    c = Canvas(surface)
    c.background((0, 0, 0))
    c.line(0, 30, 59, 30, (0, 255, 0), weight=3)
    assert surface.get_at((30, 30)).g == 255
    c.quadratic(0, 0, 30, 60, 59, 0, (255, 0, 0), weight=4)
    assert surface.get_at((0, 0)).r == 255


def test_translucent_line_blends():
    surface = pygame.Surface((60, 60))
    c = Canvas(surface)
    c.background((0, 0, 0))
    c.line(0, 30, 59, 30, (0, 255, 0, 128), weight=3)
    assert 90 < surface.get_at((30, 30)).g < 170


def test_set_surface_switches_target():
    c = Canvas(pygame.Surface((10, 10)))
    bigger = pygame.Surface((30, 20))
    c.set_surface(bigger)
    c.background((9, 9, 9))
    assert c.surface is bigger
    assert tuple(bigger.get_at((29, 19)))[:3] == (9, 9, 9)

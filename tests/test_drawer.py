import numpy as np
import pygame

import constants
from emergence.Point import Point
from emergence.Vec2 import Vec2
from emergence.drawer import Drawer, build_vignette


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


class TestDrawPoint:
    def test_fill_at_center(self):
        surface = pygame.Surface((100, 100))
        surface.fill((255, 255, 255))
        Drawer(surface).draw_point(Point(Vec2(50, 50)))
        assert rgb(surface, (50, 50)) == constants.POINT_FILL_COLOR

    def test_has_stroke(self):
        surface = pygame.Surface((100, 100))
        surface.fill((255, 255, 255))
        Drawer(surface).draw_point(Point(Vec2(50, 50)))
        box = [rgb(surface, (x, y)) for x in range(45, 56) for y in range(45, 56)]
        assert constants.POINT_STROKE_COLOR in box

    def test_rounds_to_nearest_pixel(self):
        surface = pygame.Surface((100, 100))
        surface.fill((255, 255, 255))
        Drawer(surface).draw_point(Point(Vec2(50.6, 50.4)))
        assert rgb(surface, (51, 50)) == constants.POINT_FILL_COLOR
        # a 3px circle centred on 51 leaves x=47 untouched
        assert rgb(surface, (47, 50)) == (255, 255, 255)

    def test_far_pixels_untouched(self):
        surface = pygame.Surface((100, 100))
        surface.fill((255, 255, 255))
        Drawer(surface).draw_point(Point(Vec2(50, 50)))
        assert rgb(surface, (60, 50)) == (255, 255, 255)


class TestDrawConnections:
    def test_draws_connected_pair(self):
        surface = pygame.Surface((100, 100))
        surface.fill((255, 255, 255))
        points = [Point(Vec2(10, 50)), Point(Vec2(90, 50))]
        connections = np.array([[False, False], [True, False]])
        Drawer(surface).draw_connections(points, connections)
        assert rgb(surface, (50, 50)) == constants.CONNECTION_COLOR

    def test_skips_unconnected_pair(self):
        surface = pygame.Surface((100, 100))
        surface.fill((255, 255, 255))
        points = [Point(Vec2(10, 50)), Point(Vec2(90, 50))]
        connections = np.array([[False, True], [False, False]])
        Drawer(surface).draw_connections(points, connections)
        assert rgb(surface, (50, 50)) == (255, 255, 255)

    def test_no_points(self):
        surface = pygame.Surface((10, 10))
        Drawer(surface).draw_connections([], np.zeros((0, 0), dtype=bool))


class TestVignette:
    """Tests for the radial edge overlay."""

    def test_transparent_center(self):
        overlay = build_vignette(200, 100)
        assert overlay.get_at((100, 50)).a == 0

    def test_corner_partially_dark(self):
        # corner sits ~111px from the centre: inner radius 80, outer 200
        overlay = build_vignette(200, 100)
        assert 50 < overlay.get_at((0, 0)).a < 90
        assert tuple(overlay.get_at((0, 0)))[:3] == constants.VIGNETTE_COLOR

    def test_opaque_beyond_width(self):
        overlay = build_vignette(10, 400)
        assert overlay.get_at((0, 0)).a == 255

    def test_alpha_grows_outwards(self):
        overlay = build_vignette(200, 200)
        alphas = [overlay.get_at((100 + d, 100)).a for d in range(0, 100, 10)]
        assert alphas == sorted(alphas)

    def test_draw_blends_over_surface(self):
        surface = pygame.Surface((200, 100))
        surface.fill((255, 255, 255))
        Drawer(surface).draw_vignette(200, 100)
        assert rgb(surface, (100, 50)) == (255, 255, 255)
        r, g, b = rgb(surface, (0, 0))
        assert constants.VIGNETTE_COLOR[0] < r < 255

    def test_overlay_cached_by_size(self):
        surface = pygame.Surface((120, 80))
        drawer = Drawer(surface)
        drawer.draw_vignette(120, 80)
        first = drawer._vignette_cache[(120, 80)]
        drawer.draw_vignette(120, 80)
        assert drawer._vignette_cache[(120, 80)] is first

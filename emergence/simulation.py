import logging
import math
import random

import constants
from .Point import Point
from .Vec2 import Vec2
from .drawer import Drawer
from .graph import Graph, within_vertex_distance

logger = logging.getLogger(__name__)


class Demo:
    """
    Seeds a graph in a few random clusters and animates it on `screen`.

    `scheduler` needs a ``request(callback)`` method and `rng` a ``random()``
    method returning floats in [0, 1).
    """

    def __init__(self, screen, scheduler=None, connection_fn=None, rng=None):
        self.screen = screen
        self.width, self.height = screen.get_size()
        margin = constants.REGION_MARGIN
        if self.width < 2 * margin or self.height < 2 * margin:
            raise ValueError(
                f"Surface {self.width}x{self.height} is too small, both sides need at least {2 * margin}px"
            )

        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.graph = Graph(self.width, self.height, connection_fn=connection_fn or within_vertex_distance)
        self.drawer = Drawer(screen)
        self.setup_emergence_area()

    def random_int(self, lo, hi):
        """Integer in [lo, hi)."""
        return int(math.floor(self.rng.random() * (hi - lo))) + lo

    def setup_emergence_area(self):
        margin = constants.REGION_MARGIN
        spread = constants.REGION_SPREAD
        for _ in range(constants.REGION_COUNT):
            cx = self.random_int(margin, self.width - margin)
            cy = self.random_int(margin, self.height - margin)
            quantity = self.random_int(constants.REGION_MIN_POINTS, constants.REGION_MAX_POINTS)

            spawned = []
            for _ in range(quantity):
                x = self.random_int(cx - spread, cx + spread)
                y = self.random_int(cy - spread, cy + spread)
                velocity = self.rng.random() + constants.MIN_VELOCITY
                angle = self.rng.random() * (math.pi * 2)
                point = Point(Vec2(x, y), angle=angle, velocity=velocity)
                self.graph.add_point(point)
                spawned.append(point)
            logger.debug(f"Region at ({cx}, {cy}) spawned {quantity} points: {spawned}")

        logger.info(f"Seeded {len(self.graph.get_points())} points on a {self.width}x{self.height} surface.")

    def clear(self):
        self.screen.fill(constants.BACKGROUND_COLOR)

    def main_loop(self):
        self.render()
        self.graph.move()
        self.remove_points_out_of_screen()

    def render(self):
        points = self.graph.get_points()
        connections = self.graph.get_connections()
        self.clear()
        if points:
            self.drawer.draw_connections(points, connections)
            for point in points:
                self.drawer.draw_point(point)
        self.drawer.draw_vignette(self.width, self.height)
        if self.scheduler is not None:
            self.scheduler.request(self.main_loop)

    def on_screen(self, point):
        return 0 < point.x < self.width and 0 < point.y < self.height

    def remove_points_out_of_screen(self):
        return self.graph.remove_points_by_criteria(self.on_screen)

import logging

import numpy as np

import constants

logger = logging.getLogger(__name__)


def always_connected(a, b):
    return True


def distance_threshold(threshold):
    """Predicate factory: two points connect when strictly closer than `threshold`."""
    def connection_fn(a, b):
        return a.pos.distance_to(b.pos) < threshold
    return connection_fn


within_vertex_distance = distance_threshold(constants.DISTANCE_BETWEEN_VERTICES)


def connected_pairs(connections):
    """Yield (outer, inner) pairs, outer >= inner, whose lower-triangle cell is set."""
    rows, cols = np.nonzero(np.tril(np.asarray(connections, dtype=bool)))
    for outer, inner in zip(rows.tolist(), cols.tolist()):
        yield outer, inner


class Graph:
    """
    Owns the points and their connection matrix.

    Only the lower triangle of the matrix (column <= row) is ever computed;
    cells above the diagonal stay False. Read connections as
    ``connections[outer][inner]`` with ``outer >= inner``.
    """

    def __init__(self, width, height, points=None, connection_fn=None):
        self.width = width
        self.height = height
        self.points = list(points) if points else []
        self.connection_fn = connection_fn or always_connected

        self.init_connections()
        self.calculate_connections()

    def init_connections(self):
        n = len(self.points)
        self.connections = np.zeros((n, n), dtype=bool)

    def add_point(self, point):
        self.points.append(point)
        self.init_connections()
        self.calculate_connections()

    def remove_point(self, point):
        self.points = [p for p in self.points if p is not point]
        self.init_connections()
        self.calculate_connections()

    def get_points(self):
        return self.points

    def get_connections(self):
        return self.connections

    def move(self):
        for p in self.points:
            p.move()
        self.calculate_connections()

        # reflect one step ahead: flip once per axis the lookahead leaves
        for p in self.points:
            nxt = p.next_coordinates()
            if not nxt.x_inside(self.width):
                p.velocity = -p.velocity
            if not nxt.y_inside(self.height):
                p.velocity = -p.velocity

    def calculate_connections(self):
        points = self.points
        connection_fn = self.connection_fn
        for outer, a in enumerate(points):
            for inner in range(outer + 1):
                if outer == inner:
                    self.connections[outer, inner] = False
                else:
                    self.connections[outer, inner] = bool(connection_fn(a, points[inner]))

    def edges(self):
        """Connected (outer, inner) index pairs."""
        return connected_pairs(self.connections)

    def remove_points_by_criteria(self, criteria_fn):
        """
        Drop every point for which `criteria_fn` is false.

        Survivors keep their order and the matrix is rebuilt once, however many
        points go.
        """
        kept = [p for p in self.points if criteria_fn(p)]
        removed = len(self.points) - len(kept)
        self.points = kept
        self.init_connections()
        self.calculate_connections()
        if removed:
            logger.debug(f"Removed {removed} points, {len(kept)} left.")
        return removed

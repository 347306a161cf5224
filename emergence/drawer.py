import numpy as np
import pygame

import constants
from .graph import connected_pairs


class Drawer:
    def __init__(self, screen):
        self.screen = screen
        # vignette depends on the surface size only
        self._vignette_cache = {}

    def draw_point(self, point):
        center = point.pos.to_pixel()
        pygame.draw.circle(self.screen, constants.POINT_FILL_COLOR, center, constants.POINT_RADIUS)
        pygame.draw.circle(self.screen, constants.POINT_STROKE_COLOR, center, constants.POINT_RADIUS,
                           constants.POINT_STROKE_WIDTH)

    def draw_connections(self, points, connections):
        if not points:
            return
        for outer, inner in connected_pairs(connections):
            self.draw_connection(points[outer], points[inner])

    def draw_connection(self, start, end):
        pygame.draw.line(self.screen, constants.CONNECTION_COLOR,
                         start.pos.to_pixel(), end.pos.to_pixel(), 1)

    def draw_vignette(self, width, height):
        """Darken the edges with a radial gradient centred on the surface."""
        overlay = self._vignette_cache.get((width, height))
        if overlay is None:
            overlay = build_vignette(width, height)
            self._vignette_cache[(width, height)] = overlay
        self.screen.blit(overlay, (0, 0))


def build_vignette(width, height, color=constants.VIGNETTE_COLOR, inner_ratio=constants.VIGNETTE_INNER_RATIO):
    """
    Radial gradient overlay: fully transparent up to ``width * inner_ratio``
    from the centre, ramping linearly to opaque `color` at radius ``width``.
    """
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((*color, 255))

    inner = width * inner_ratio
    outer = float(width)
    # pixel centres, indexed [x, y] like surfarray
    xs = np.arange(width, dtype=np.float64)[:, None] + 0.5 - width / 2
    ys = np.arange(height, dtype=np.float64)[None, :] + 0.5 - height / 2
    dist = np.hypot(xs, ys)
    t = np.clip((dist - inner) / max(outer - inner, 1e-9), 0.0, 1.0)

    alpha = pygame.surfarray.pixels_alpha(overlay)
    alpha[:, :] = np.round(t * 255).astype(np.uint8)
    del alpha  # release the surface lock
    return overlay

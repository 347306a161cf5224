import math

from .Vec2 import Vec2


class Point:
    """A drifting particle: position, heading (radians) and signed speed."""

    def __init__(self, pos, angle=0.0, velocity=0.0):
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        self.angle = float(angle)
        self.velocity = float(velocity)

    @property
    def x(self):
        return self.pos.x

    @property
    def y(self):
        return self.pos.y

    def step(self):
        """Displacement for one tick along the current heading."""
        return Vec2(math.cos(self.angle) * self.velocity,
                    math.sin(self.angle) * self.velocity)

    def move(self):
        # plain physics step, reflection is decided by the owning graph
        self.pos = self.pos + self.step()

    def next_coordinates(self):
        """Where the point will be after the next move; the point is not changed."""
        return self.pos + self.step()

    def __repr__(self):
        return f"Point(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), angle={self.angle:.3f}, velocity={self.velocity:.3f})"

import math


class Vec2:
    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def distance_to(self, other):
        return math.hypot(other.x - self.x, other.y - self.y)

    def x_inside(self, width):
        """True when x lies in [0, width)."""
        return 0 <= self.x < width

    def y_inside(self, height):
        """True when y lies in [0, height)."""
        return 0 <= self.y < height

    def to_pixel(self):
        # nearest pixel, halves round up on both sides of zero
        return (math.floor(self.x + 0.5), math.floor(self.y + 0.5))

    def copy(self):
        return Vec2(self.x, self.y)

    def __repr__(self):
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

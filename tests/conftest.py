import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


@pytest.fixture(scope="session", autouse=True)
def headless_display():
    pygame.display.init()
    pygame.display.set_mode((320, 240))
    yield
    pygame.display.quit()


@pytest.fixture
def screen():
    return pygame.Surface((800, 600))


class FixedRandom:
    """Returns the given values from random() in order, cycling."""

    def __init__(self, *values):
        self.values = list(values)
        self.i = 0

    def random(self):
        v = self.values[self.i % len(self.values)]
        self.i += 1
        return v


@pytest.fixture
def fixed_random():
    return FixedRandom

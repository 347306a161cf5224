import logging
import random

import pygame

from constants import FPS, HEIGHT, WIDTH
from emergence.logging_config import setup_logging
from emergence.scheduler import FrameScheduler
from emergence.simulation import Demo

logger = logging.getLogger("emergence.main")


def display_size():
    # desktop size of the first display, falls back to the fixed window size
    sizes = pygame.display.get_desktop_sizes()
    if sizes and sizes[0][0] > 0 and sizes[0][1] > 0:
        return sizes[0]
    return WIDTH, HEIGHT


def main():
    setup_logging(level=logging.INFO)

    pygame.init()
    width, height = display_size()
    screen = pygame.display.set_mode((width, height), pygame.NOFRAME)
    pygame.display.set_caption("Emergence")
    logger.info(f"Display surface {width}x{height}.")

    scheduler = FrameScheduler(FPS)
    demo = Demo(screen, scheduler=scheduler, rng=random.Random())

    # --- Main Loop ---
    try:
        scheduler.run(demo.main_loop)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()

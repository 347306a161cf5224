import logging

import pygame

import constants

logger = logging.getLogger(__name__)


class FrameScheduler:
    """
    Calls one pending callback per displayed frame.

    A callback re-arms itself with `request`, the way a browser animation frame
    does, but `run` drives the frames from a flat loop so the call stack never
    grows.
    """

    def __init__(self, fps=constants.FPS, clock=None, present=None):
        self.fps = fps
        self.clock = clock or pygame.time.Clock()
        self.present = present or pygame.display.flip
        self._pending = None
        self.running = False

    def request(self, callback):
        self._pending = callback

    def stop(self):
        self.running = False

    def _pump_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Window closed, stopping frame loop.")
                self.running = False

    def run(self, callback, max_frames=None):
        """Run frames until the window closes, nothing is re-armed or `max_frames` is reached."""
        self.request(callback)
        self.running = True
        frames = 0
        logger.info(f"Frame loop started at {self.fps} fps.")

        while self.running:
            if max_frames is not None and frames >= max_frames:
                break
            self._pump_events()
            if not self.running or self._pending is None:
                break

            # --- Frame ---
            cb, self._pending = self._pending, None
            cb()
            self.present()
            self.clock.tick(self.fps)
            frames += 1

        self.running = False
        logger.info(f"Frame loop finished after {frames} frames.")
        return frames

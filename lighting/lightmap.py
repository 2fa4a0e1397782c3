import contextlib
import logging

import pygame

from lighting.triangulation import fan_triangles

logger = logging.getLogger(__name__)

_CLEAR_COLOR = (0, 0, 0)


class LightMap:
    """Off-screen buffers for accumulating light samples.

    sketch:   scratch surface, redrawn for every light sample.
    lightmap: sum of every sample drawn since the frame began.

    Samples are accumulated with begin_frame / add_sample / end_frame, or
    with the frame() context manager which always ends the frame.
    """

    def __init__(self, size):
        self.size = (int(size[0]), int(size[1]))
        self.sketch = pygame.Surface(self.size)
        self.lightmap = pygame.Surface(self.size)
        self.sketch.fill(_CLEAR_COLOR)
        self.lightmap.fill(_CLEAR_COLOR)
        self.in_frame = False
        self.sample_count = 0

    # -------------------------
    # Frame protocol
    # -------------------------

    def begin_frame(self):
        if self.in_frame:
            raise RuntimeError("begin_frame called while a frame is open")
        self.lightmap.fill(_CLEAR_COLOR)
        self.in_frame = True
        self.sample_count = 0

    def add_sample(self, vertices):
        if not self.in_frame:
            raise RuntimeError("add_sample called outside begin_frame/end_frame")
        self.draw_sample(vertices)
        self.sample_count += 1

    def end_frame(self):
        if not self.in_frame:
            raise RuntimeError("end_frame called without begin_frame")
        self.in_frame = False
        logger.debug("Light frame done: %d samples", self.sample_count)

    @contextlib.contextmanager
    def frame(self):
        self.begin_frame()
        try:
            yield self
        finally:
            self.end_frame()

    # -------------------------
    # Drawing
    # -------------------------

    def draw_sample(self, vertices):
        """Draw one visibility fan into the sketch, then add it to the lightmap."""
        self.sketch.fill(_CLEAR_COLOR)

        # Opaque overwrite: no blend flags when drawing into the sketch
        for triangle in fan_triangles(vertices):
            pygame.draw.polygon(self.sketch, vertices[0].color, triangle)

        self.lightmap.blit(self.sketch, (0, 0), special_flags=pygame.BLEND_RGB_ADD)

    def present(self, screen):
        """Blit the lightmap centered on the screen."""
        screen_w, screen_h = screen.get_size()
        offset = ((screen_w - self.size[0]) // 2, (screen_h - self.size[1]) // 2)
        screen.blit(self.lightmap, offset)
        return offset

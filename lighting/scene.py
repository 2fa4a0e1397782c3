import logging
import math

import pygame

from lighting.geometry import clamp, from_angle
from lighting.lightmap import LightMap
from lighting.occluder import OccluderIndex
from lighting.pointer import PointerInput
from lighting.visibility import VisibilitySolver

logger = logging.getLogger(__name__)


class LightScene:
    """Drives the light samples for a pointer-following light.

    On every pointer move the lightmap is cleared and one visibility fan is
    added per sample position; draw() presents the result.
    """

    def __init__(self, config, background_color=(0, 0, 0),
                 occluder_color=None):
        self.config = config
        self.index = OccluderIndex.build(config.occluders)
        self.solver = VisibilitySolver(
            self.index, epsilon=config.epsilon, color=config.light_color
        )
        self.lightmap = LightMap(config.size)
        self.pointer = PointerInput()
        # Screen position of the lightmap, updated by draw()
        self.view_offset = pygame.Vector2(0, 0)

        self.background_color = background_color
        # None = don't outline occluders
        self.occluder_color = occluder_color

        logger.info("Scene %dx%d: %d occluders, %d targets, %d samples",
                    config.width, config.height, len(self.index),
                    len(self.index.targets), config.sample_count)

    # -------------------------
    # Light samples
    # -------------------------

    def sample_positions(self, pointer):
        """Light sources on a ring around the pointer, clamped to the scene."""
        pointer = pygame.Vector2(pointer)
        count = self.config.sample_count
        upper = (self.config.width, self.config.height)

        positions = []
        for i in range(count):
            angle = i * 2 * math.pi / count
            source = pointer + from_angle(angle, self.config.sample_radius)
            positions.append(clamp(source, (0, 0), upper))
        return positions

    def on_pointer_moved(self, pointer):
        with self.lightmap.frame() as frame:
            for source in self.sample_positions(pointer):
                frame.add_sample(self.solver.solve(source))

    # -------------------------
    # Loop hooks
    # -------------------------

    def handle_events(self, events):
        """Feed a batch of pygame events. Returns False once quit was requested."""
        moves = self.pointer.update(events)
        if moves:
            # Only the latest position of the batch is visible on screen
            self.on_pointer_moved(moves[-1] - self.view_offset)
        return not self.pointer.quit_requested

    def draw(self, screen):
        screen.fill(self.background_color)
        offset = self.lightmap.present(screen)
        self.view_offset = pygame.Vector2(offset)

        if self.occluder_color is not None:
            for occluder in self.index:
                occluder.draw(screen, self.occluder_color, offset)

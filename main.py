import argparse
import logging
import sys

import pygame

from settings import WIDTH, HEIGHT, FPS, BACKGROUND_COLOR, OCCLUDER_COLOR

from data.scene_stats import SCENE_STATS
from lighting import LightScene, SceneConfig


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--scene", type=str, default="raycast",
                        choices=sorted(SCENE_STATS),
                        help="Scene from data/scene_stats.py to light")
    parser.add_argument("--show-occluders", action="store_true",
                        help="Outline the occluder rectangles")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: INFO)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    logger = logging.getLogger("raycast")

    pygame.init()

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Raycast")

    clock = pygame.time.Clock()

    # -----------------------------
    # Build Scene
    # -----------------------------
    config = SceneConfig.from_stats(SCENE_STATS[args.scene])
    scene = LightScene(
        config,
        background_color=BACKGROUND_COLOR,
        occluder_color=OCCLUDER_COLOR if args.show_occluders else None,
    )
    logger.info("Loaded scene '%s'", args.scene)

    running = True

    while running:
        clock.tick(FPS)

        # -----------------------------
        # Events
        # -----------------------------
        running = scene.handle_events(pygame.event.get())

        # -----------------------------
        # Draw
        # -----------------------------
        scene.draw(screen)
        pygame.display.flip()

    logger.info("Shutting down")
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()

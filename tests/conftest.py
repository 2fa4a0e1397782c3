"""Shared pytest fixtures for the lighting test suite."""

import os

# Surfaces and events must work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from data.scene_stats import SCENE_STATS
from lighting import LightScene, OccluderIndex, SceneConfig, VisibilitySolver


OUTER = (0, 0, 800, 600)
BLOCK = (200, 200, 100, 100)


# ============== Occluder Fixtures ==============

@pytest.fixture
def outer_index():
    """Only the enclosing 800x600 rectangle."""
    return OccluderIndex.build([OUTER])


@pytest.fixture
def block_index():
    """Enclosing rectangle plus one 100x100 block at (200, 200)."""
    return OccluderIndex.build([OUTER, BLOCK])


@pytest.fixture
def raycast_index():
    """The full seven-rectangle demo scene."""
    return OccluderIndex.build(SCENE_STATS["raycast"]["occluders"])


# ============== Solver Fixtures ==============

@pytest.fixture
def outer_solver(outer_index):
    return VisibilitySolver(outer_index)


@pytest.fixture
def block_solver(block_index):
    return VisibilitySolver(block_index)


# ============== Scene Fixtures ==============

@pytest.fixture
def single_scene():
    return LightScene(SceneConfig.from_stats(SCENE_STATS["single"]))


@pytest.fixture
def hard_scene():
    return LightScene(SceneConfig.from_stats(SCENE_STATS["hard"]))


def rgb(surface, pos):
    color = surface.get_at(pos)
    return (color.r, color.g, color.b)

import math

import pygame


def angle_of(vector):
    """Angle of a vector from the origin, in radians (atan2 convention)."""
    return math.atan2(vector[1], vector[0])


def from_angle(angle, length=1.0):
    """Build a vector of the given length pointing at angle (radians)."""
    return pygame.Vector2(math.cos(angle) * length, math.sin(angle) * length)


def clamp(point, lower, upper):
    """Clamp a point component-wise into the box [lower, upper]."""
    return pygame.Vector2(
        max(lower[0], min(upper[0], point[0])),
        max(lower[1], min(upper[1], point[1])),
    )


def compare_floats(a, b):
    """Three-way compare of two floats.

    NaN on either side compares equal to everything, so sorting or taking
    the minimum over degenerate geometry never fails.
    """
    if math.isnan(a) or math.isnan(b):
        return 0
    if a < b:
        return -1
    if a > b:
        return 1
    return 0

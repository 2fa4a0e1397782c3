import functools
import logging

import pygame

from lighting.geometry import angle_of, compare_floats, from_angle

logger = logging.getLogger(__name__)


class Vertex:
    """A polygon vertex: position plus the light color it carries."""

    __slots__ = ("pos", "color")

    def __init__(self, pos, color):
        self.pos = pygame.Vector2(pos)
        self.color = color

    def __repr__(self):
        return "Vertex(({:.3f}, {:.3f}), {})".format(self.pos.x, self.pos.y, self.color)


class VisibilitySolver:
    """Casts rays from a light source toward every occluder corner.

    index:   OccluderIndex with the scene's occluders and corner targets.
    epsilon: angular offset (radians) of the two side rays cast per target.
    color:   RGB color given to every vertex of the polygon.
    """

    def __init__(self, index, epsilon=0.001, color=(51, 51, 51)):
        self.index = index
        self.epsilon = epsilon
        self.color = color

    def solve(self, source):
        """Compute the visibility polygon for a light source.

        Returns a fresh list of Vertex: the source first, then the hit
        points sorted by angle around it. With no targets only the source
        is returned.
        """
        source = pygame.Vector2(source)

        # For each corner, cast 3 rays (corner angle +- epsilon) so both
        # sides of a silhouette edge are captured
        hits = []
        for target in self.index.targets:
            angle = angle_of(target - source)
            for ray_angle in (angle - self.epsilon, angle, angle + self.epsilon):
                pos = self.cast_ray(source, ray_angle)
                if pos is not None:
                    hits.append(Vertex(pos, self.color))

        # Sort by angle; list.sort is stable so ties keep cast order
        hits.sort(key=functools.cmp_to_key(
            lambda a, b: compare_floats(angle_of(a.pos - source), angle_of(b.pos - source))
        ))

        hits.insert(0, Vertex(source, self.color))
        return hits

    def cast_ray(self, source, angle):
        """Nearest point where the ray from source at angle meets an occluder."""
        direction = from_angle(angle)

        closest_t = None
        for occluder in self.index.occluders:
            t = occluder.ray_intersect(source, direction)
            if t is None:
                continue
            if closest_t is None or compare_floats(t, closest_t) < 0:
                closest_t = t

        if closest_t is None:
            logger.debug("Ray from (%.1f, %.1f) at %.4f rad hit nothing; dropped",
                         source.x, source.y, angle)
            return None
        return source + direction * closest_t


import logging

import pygame

logger = logging.getLogger(__name__)

# Direction components smaller than this are treated as parallel to a slab
_PARALLEL_EPS = 1e-12


class Occluder:
    """An axis-aligned rectangle that blocks light.

    rect: (x, y, w, h), a pygame.Rect or another Occluder. Stored as floats.
    """

    def __init__(self, rect):
        if isinstance(rect, Occluder):
            x, y, w, h = rect.left, rect.top, rect.size.x, rect.size.y
        elif isinstance(rect, pygame.Rect):
            x, y, w, h = rect.x, rect.y, rect.width, rect.height
        else:
            x, y, w, h = rect
        self._pos = pygame.Vector2(x, y)
        self._size = pygame.Vector2(w, h)

    def __repr__(self):
        return "Occluder(({}, {}, {}, {}))".format(
            self._pos.x, self._pos.y, self._size.x, self._size.y
        )

    # -------------------------
    # Accessors
    # -------------------------

    @property
    def pos(self):
        return pygame.Vector2(self._pos)

    @property
    def size(self):
        return pygame.Vector2(self._size)

    @property
    def left(self):
        return self._pos.x

    @property
    def top(self):
        return self._pos.y

    @property
    def right(self):
        return self._pos.x + self._size.x

    @property
    def bottom(self):
        return self._pos.y + self._size.y

    @property
    def top_left(self):
        return pygame.Vector2(self._pos)

    @property
    def top_right(self):
        return self._pos + pygame.Vector2(self._size.x, 0)

    @property
    def bottom_left(self):
        return self._pos + pygame.Vector2(0, self._size.y)

    @property
    def bottom_right(self):
        return self._pos + self._size

    @property
    def rect(self):
        return pygame.Rect(round(self.left), round(self.top),
                           round(self._size.x), round(self._size.y))

    def corners(self):
        """Corners in target order: top-left, top-right, bottom-left, bottom-right."""
        return [self.top_left, self.top_right, self.bottom_left, self.bottom_right]

    # -------------------------
    # Queries
    # -------------------------

    def ray_intersect(self, origin, direction):
        """Slab test of the ray origin + t * direction against the box outline.

        Returns the smallest t > 0 at which the ray meets the outline, or
        None. From outside this is the entry distance; from inside (or from
        the outline itself) it is the exit distance, so an enclosing occluder
        acts as the scene's walls. A ray leaving the box from a point on its
        outline stops there: t is 0.
        """
        t_near = float("-inf")
        t_far = float("inf")

        for o, d, lo, hi in ((origin[0], direction[0], self.left, self.right),
                             (origin[1], direction[1], self.top, self.bottom)):
            if abs(d) < _PARALLEL_EPS:
                # Parallel to this slab: miss unless the origin lies within it
                if o < lo or o > hi:
                    return None
                continue

            t1 = (lo - o) / d
            t2 = (hi - o) / d
            if t1 > t2:
                t1, t2 = t2, t1

            t_near = max(t_near, t1)
            t_far = min(t_far, t2)
            if t_near > t_far:
                return None

        if t_near > 0:
            return t_near
        if t_far > 0:
            return t_far
        if t_far == 0:
            return 0.0
        return None

    def draw(self, screen, color, offset=(0, 0), width=1):
        screen_rect = self.rect.move(offset)
        pygame.draw.rect(screen, color, screen_rect, width)


class OccluderIndex:
    """The static occluder list plus the corner targets rays are aimed at."""

    def __init__(self, occluders, targets):
        self.occluders = tuple(occluders)
        self.targets = tuple(targets)

    @classmethod
    def build(cls, occluders):
        """Wrap the occluders and collect their corners, in input order.

        Coincident corners of neighbouring occluders are kept as separate
        targets.
        """
        occluders = [Occluder(o) for o in occluders]
        targets = []
        for occluder in occluders:
            targets.extend(occluder.corners())

        logger.debug("Built occluder index: %d occluders, %d targets",
                     len(occluders), len(targets))
        return cls(occluders, targets)

    def __len__(self):
        return len(self.occluders)

    def __iter__(self):
        return iter(self.occluders)

import numbers


class SceneConfig:
    """Validated scene options, built from a SCENE_STATS entry.

    size:          (width, height) of the scene and its light buffers.
    occluders:     tuple of (x, y, w, h); the first should enclose the scene.
    sample_count:  light samples drawn per pointer move.
    sample_radius: radius of the ring the samples sit on.
    epsilon:       angular offset of the side rays, in radians.
    light_color:   RGB color each sample adds to the lightmap.
    """

    def __init__(self, size, occluders, sample_count=6, sample_radius=8,
                 epsilon=0.001, light_color=(51, 51, 51)):
        width, height = size
        if not (_is_number(width) and _is_number(height)) or width <= 0 or height <= 0:
            raise ValueError("scene size must be two positive numbers, got {!r}".format(size))
        if not isinstance(sample_count, int) or sample_count < 1:
            raise ValueError("sample_count must be an integer >= 1, got {!r}".format(sample_count))
        if not _is_number(sample_radius) or sample_radius < 0:
            raise ValueError("sample_radius must be >= 0, got {!r}".format(sample_radius))
        if not _is_number(epsilon) or epsilon < 0:
            raise ValueError("epsilon must be >= 0, got {!r}".format(epsilon))

        self.size = (width, height)
        self.occluders = tuple(_check_occluder(o) for o in occluders)
        self.sample_count = sample_count
        self.sample_radius = sample_radius
        self.epsilon = epsilon
        self.light_color = _check_color(light_color)

    @classmethod
    def from_stats(cls, stats):
        return cls(
            size=stats["size"],
            occluders=stats.get("occluders", []),
            sample_count=stats.get("sample_count", 6),
            sample_radius=stats.get("sample_radius", 8),
            epsilon=stats.get("epsilon", 0.001),
            light_color=stats.get("light_color", (51, 51, 51)),
        )

    @property
    def width(self):
        return self.size[0]

    @property
    def height(self):
        return self.size[1]


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_occluder(rect):
    rect = tuple(rect)
    if len(rect) != 4 or not all(_is_number(v) for v in rect):
        raise ValueError("occluder must be (x, y, w, h), got {!r}".format(rect))
    if rect[2] < 0 or rect[3] < 0:
        raise ValueError("occluder size must be non-negative, got {!r}".format(rect))
    return rect


def _check_color(color):
    color = tuple(color)
    if len(color) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in color):
        raise ValueError("light_color must be 3 ints in 0-255, got {!r}".format(color))
    return color

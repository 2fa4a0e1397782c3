# Occluders are (x, y, w, h). The first rect of each scene encloses it so
# every ray terminates on a wall.
SCENE_STATS = {
    "raycast": {
        "size": (800, 600),
        "occluders": [
            (0, 0, 800, 600),
            (200, 200, 100, 100),
            (400, 200, 100, 100),
            (400, 400, 100, 100),
            (200, 400, 100, 100),
            (50, 50, 50, 50),
            (550, 300, 64, 64),
        ],
        "sample_count": 6,
        "sample_radius": 8,
        "epsilon": 0.001,
        "light_color": (51, 51, 51),
    },
    "single": {
        "size": (800, 600),
        "occluders": [
            (0, 0, 800, 600),
        ],
        "sample_count": 6,
        "sample_radius": 8,
        "epsilon": 0.001,
        "light_color": (51, 51, 51),
    },
    # One sample, no ring: hard-edged shadows
    "hard": {
        "size": (800, 600),
        "occluders": [
            (0, 0, 800, 600),
            (200, 200, 100, 100),
            (400, 200, 100, 100),
            (400, 400, 100, 100),
            (200, 400, 100, 100),
        ],
        "sample_count": 1,
        "sample_radius": 0,
        "epsilon": 0.001,
        "light_color": (200, 200, 160),
    },
}

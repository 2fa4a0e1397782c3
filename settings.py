WIDTH = 800
HEIGHT = 600
FPS = 60

BACKGROUND_COLOR = (0, 0, 0)
OCCLUDER_COLOR = (90, 90, 110)

"""Tunable constants for the simulation (internal simulation units)."""

# Physics
G = 1.0  # gravitational constant, not physically calibrated
SOFTENING = 0.1  # minimum separation used in the force law
TIME_STEP = 0.01  # fixed integration step
SPEED_FACTOR = 500.0  # simulation time units per wall-clock second

# Trails
DEFAULT_TRAIL_LENGTH = 20000
MIN_TRAIL_LENGTH = 2
MAX_TRAIL_LENGTH = 1_000_000

# Window
WIDTH = 1280
HEIGHT = 960
FPS = 60
WINDOW_TITLE = "Three-Body Simulation"
BODY_RADIUS_PIXELS = 5
SAFE_COORD_LIMIT = 30000  # gfxdraw takes 16-bit pixel coordinates

# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)

DEFAULT_PRESET = "Three Body"

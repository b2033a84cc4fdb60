"""Fixed-step three-body gravity simulation."""

from importlib.metadata import PackageNotFoundError, version

from .vector import Vector2, add, sub, scale, divide, magnitude, normalize
from .physics import Body, BodyView, accelerations
from .integrators import velocity_verlet_step
from .engine import Engine
from .analysis import system_energy, total_momentum, center_of_mass, EnergyMonitor
from .constants import G, SOFTENING, TIME_STEP, SPEED_FACTOR
from .presets import PRESETS

try:
    __version__ = version("tribody")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "Vector2",
    "add",
    "sub",
    "scale",
    "divide",
    "magnitude",
    "normalize",
    "Body",
    "BodyView",
    "accelerations",
    "velocity_verlet_step",
    "Engine",
    "system_energy",
    "total_momentum",
    "center_of_mass",
    "EnergyMonitor",
    "G",
    "SOFTENING",
    "TIME_STEP",
    "SPEED_FACTOR",
    "PRESETS",
    "__version__",
]

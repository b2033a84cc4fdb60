"""Fixed-step simulation engine.

The engine owns the body list and is its only mutator. It knows nothing about
wall-clock time or rendering: callers invoke :meth:`Engine.step` as many times
as they need and read :attr:`Engine.bodies` to draw.
"""
import logging

from . import constants as C
from .integrators import velocity_verlet_step
from .physics import Body
from .presets import PRESETS

logger = logging.getLogger(__name__)


class Engine:
    """Advance a fixed set of bodies with the velocity Verlet integrator."""

    def __init__(self, bodies, dt=C.TIME_STEP, g_constant=C.G, softening=C.SOFTENING):
        dt = float(dt)
        if not dt > 0.0:
            raise ValueError(f"Time step must be positive, got {dt!r}")
        self._bodies = list(bodies)
        self.dt = dt
        self.g_constant = float(g_constant)
        self.softening = float(softening)
        self.steps = 0
        logger.info(
            "Engine created with %d bodies (dt=%g, G=%g, softening=%g)",
            len(self._bodies), self.dt, self.g_constant, self.softening,
        )

    @classmethod
    def from_preset(cls, preset_name, max_trail_length=C.DEFAULT_TRAIL_LENGTH, **kwargs):
        """Build an engine from a named entry of :data:`~tribody.presets.PRESETS`."""
        if preset_name not in PRESETS:
            raise KeyError(f"Preset '{preset_name}' not found")
        bodies = [
            Body.from_config(cfg, max_trail_length=max_trail_length)
            for cfg in PRESETS[preset_name]
        ]
        return cls(bodies, **kwargs)

    @property
    def bodies(self):
        """Snapshots of the bodies, in construction order.

        Each entry is an immutable :class:`~tribody.physics.BodyView`; writes
        to it cannot reach the engine's state.
        """
        return tuple(b.snapshot() for b in self._bodies)

    @property
    def time(self):
        return self.steps * self.dt

    def positions(self):
        return [b.pos for b in self._bodies]

    def step(self):
        """Advance the simulation by exactly one ``dt``."""
        if not self._bodies:
            return
        velocity_verlet_step(self._bodies, self.dt, self.g_constant, self.softening)
        self.steps += 1

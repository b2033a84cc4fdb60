"""Point-mass bodies and the pairwise gravitational force law.

This module holds only physics state. Colours, radii and names used for
drawing live in :class:`~tribody.rendering.BodyStyle` and are matched to
bodies by index.
"""
import math
from collections import deque
from typing import NamedTuple, Optional, Tuple

from . import constants as C
from .vector import Vector2, magnitude, normalize


def _clamp_trail_length(length):
    if length is None:
        return None
    return max(C.MIN_TRAIL_LENGTH, min(int(length), C.MAX_TRAIL_LENGTH))


class BodyView(NamedTuple):
    """Immutable snapshot of a body, handed out for drawing and analysis."""

    mass: float
    pos: Vector2
    vel: Vector2
    trail: Tuple[Vector2, ...]
    max_trail_length: Optional[int]


class Body:
    """Simple body representation for physics computations."""

    def __init__(self, mass, pos, vel, max_trail_length=C.DEFAULT_TRAIL_LENGTH):
        """Create a body.

        Parameters
        ----------
        mass : float
            Mass in simulation units. Must be finite and strictly positive.
        pos : Vector2 or 2-sequence
            Initial position.
        vel : Vector2 or 2-sequence
            Initial velocity.
        max_trail_length : int or None, optional
            Number of past positions kept for drawing. ``None`` keeps every
            position for the lifetime of the body.
        """
        mass = float(mass)
        if not math.isfinite(mass) or mass <= 0.0:
            raise ValueError(f"Body mass must be finite and positive, got {mass!r}")
        self.mass = mass
        self.pos = Vector2.of(pos)
        self.vel = Vector2.of(vel)
        if not all(math.isfinite(c) for c in (*self.pos, *self.vel)):
            raise ValueError("Body position and velocity must be finite")
        self.max_trail_length = _clamp_trail_length(max_trail_length)
        self.trail = deque(maxlen=self.max_trail_length)

    @staticmethod
    def from_config(cfg, max_trail_length=C.DEFAULT_TRAIL_LENGTH):
        """Create a :class:`Body` from a preset record.

        Accepts either ``pos``/``vel`` pairs or the flat ``x``, ``y``, ``vx``,
        ``vy`` keys used by :data:`~tribody.presets.PRESETS`.
        """
        if "mass" not in cfg:
            raise ValueError(f"Body record is missing 'mass': {cfg!r}")
        pos = cfg.get("pos", (cfg.get("x", 0.0), cfg.get("y", 0.0)))
        vel = cfg.get("vel", (cfg.get("vx", 0.0), cfg.get("vy", 0.0)))
        return Body(cfg["mass"], pos, vel, max_trail_length=max_trail_length)

    def set_trail_length(self, length):
        self.max_trail_length = _clamp_trail_length(length)
        self.trail = deque(self.trail, maxlen=self.max_trail_length)

    def clear_trail(self):
        self.trail.clear()

    def snapshot(self):
        return BodyView(self.mass, self.pos, self.vel, tuple(self.trail), self.max_trail_length)

    def __repr__(self):
        return (
            f"Body(mass={self.mass}, pos=({self.pos.x}, {self.pos.y}), "
            f"vel=({self.vel.x}, {self.vel.y}))"
        )


def accelerations(bodies, g_constant=C.G, softening=C.SOFTENING):
    """Return the net gravitational acceleration on each body.

    Every ordered pair ``(i, j)`` with ``i != j`` contributes
    ``normalize(r_j - r_i) * G * m_j / max(|r_j - r_i|, softening)**2``.
    The result is in the same order as ``bodies``; nothing is mutated.
    """
    acc = []
    for i, bi in enumerate(bodies):
        acc_i = Vector2.zero()
        for j, bj in enumerate(bodies):
            if i == j:
                continue
            diff = bj.pos - bi.pos
            distance = max(magnitude(diff), softening)
            acc_i = acc_i + normalize(diff) * (g_constant * bj.mass / (distance * distance))
        acc.append(acc_i)
    return acc

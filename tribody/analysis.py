"""Diagnostics for monitoring integration quality."""
import csv
import os
from collections import deque

import numpy as np

from . import constants as C


def _pair_potential(m1, m2, r, g_constant, softening):
    # Matches the force law: 1/r outside the softening radius, and the linear
    # potential of a constant-magnitude force inside it.
    if r >= softening:
        return -g_constant * m1 * m2 / r
    return g_constant * m1 * m2 * (r - 2.0 * softening) / (softening * softening)


def kinetic_energy(bodies):
    if not bodies:
        return 0.0
    masses = np.array([b.mass for b in bodies], dtype=float)
    vel = np.array([b.vel.as_array() for b in bodies])
    return float(0.5 * np.sum(masses * np.einsum("ij,ij->i", vel, vel)))


def potential_energy(bodies, g_constant=C.G, softening=C.SOFTENING):
    potential = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            r = (bodies[j].pos - bodies[i].pos).magnitude()
            potential += _pair_potential(bodies[i].mass, bodies[j].mass, r, g_constant, softening)
    return potential


def system_energy(bodies, g_constant=C.G, softening=C.SOFTENING):
    """Return kinetic, potential and total energy."""
    kinetic = kinetic_energy(bodies)
    potential = potential_energy(bodies, g_constant, softening)
    return kinetic, potential, kinetic + potential


def total_momentum(bodies):
    if not bodies:
        return np.zeros(2, dtype=float)
    masses = np.array([b.mass for b in bodies], dtype=float)
    vel = np.array([b.vel.as_array() for b in bodies])
    return np.sum(masses[:, None] * vel, axis=0)


def center_of_mass(bodies):
    """Return the centre-of-mass position and velocity, or ``(None, None)``."""
    if not bodies:
        return None, None
    masses = np.array([b.mass for b in bodies], dtype=float)
    pos = np.array([b.pos.as_array() for b in bodies])
    vel = np.array([b.vel.as_array() for b in bodies])
    total_mass = masses.sum()
    com_pos = (masses[:, None] * pos).sum(axis=0) / total_mass
    com_vel = (masses[:, None] * vel).sum(axis=0) / total_mass
    return com_pos, com_vel


class EnergyMonitor:
    """Track relative drift of the total energy, in percent."""

    def __init__(self, max_points=500, g_constant=C.G, softening=C.SOFTENING):
        self.history = deque(maxlen=max_points)
        self.initial_energy = None
        self.g_constant = g_constant
        self.softening = softening

    def set_initial_energy(self, bodies):
        _, _, self.initial_energy = system_energy(bodies, self.g_constant, self.softening)
        self.history.clear()

    def update(self, bodies):
        if self.initial_energy is None or abs(self.initial_energy) < 1e-12:
            return None
        _, _, current_energy = system_energy(bodies, self.g_constant, self.softening)
        drift = ((current_energy - self.initial_energy) / abs(self.initial_energy)) * 100
        self.history.append(drift)
        return drift

    def max_drift(self):
        return max((abs(d) for d in self.history), default=0.0)

    def export_csv(self, file, delimiter=","):
        """Export the recorded energy drift history to a CSV file.

        Parameters
        ----------
        file : str or file-like
            Destination filename or open file object.
        delimiter : str, optional
            Delimiter used between columns (default is ',').
        """
        close = False
        if isinstance(file, (str, bytes, os.PathLike)):
            f = open(file, "w", newline="")
            close = True
        else:
            f = file
        try:
            writer = csv.writer(f, delimiter=delimiter)
            writer.writerow(["step", "energy_drift_percent"])
            for i, drift in enumerate(self.history):
                writer.writerow([i, drift])
        finally:
            if close:
                f.close()

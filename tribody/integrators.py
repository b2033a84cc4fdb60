from . import constants as C
from .physics import accelerations


def velocity_verlet_step(
    bodies,
    dt,
    g_constant=C.G,
    softening=C.SOFTENING,
    acc_old=None,
):
    """Advance ``bodies`` in place by one velocity Verlet step of size ``dt``.

    All positions are drifted before the new accelerations are evaluated, so
    every body sees the others at the same instant. Each body's new position is
    appended to its trail once the step is complete.

    Parameters
    ----------
    acc_old : list of Vector2, optional
        Accelerations at the current positions. Computed when omitted.

    Returns
    -------
    list of Vector2
        Accelerations at the updated positions.
    """
    if acc_old is None:
        acc_old = accelerations(bodies, g_constant, softening)

    half_dt_sq = 0.5 * dt * dt
    for body, a in zip(bodies, acc_old):
        body.pos = body.pos + body.vel * dt + a * half_dt_sq

    acc_new = accelerations(bodies, g_constant, softening)

    half_dt = 0.5 * dt
    for body, a0, a1 in zip(bodies, acc_old, acc_new):
        body.vel = body.vel + (a0 + a1) * half_dt
        body.trail.append(body.pos)

    return acc_new

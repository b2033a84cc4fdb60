import math

import numpy as np
import pytest

from tribody.physics import Body, accelerations
from tribody.vector import Vector2


def test_two_body_accelerations():
    b1 = Body(1.0, [0.0, 0.0], [0.0, 0.0])
    b2 = Body(2.0, [10.0, 0.0], [0.0, 0.0])
    a1, a2 = accelerations([b1, b2], g_constant=1.0)
    assert math.isclose(a1.x, 2.0 / 100.0, rel_tol=1e-12)
    assert math.isclose(a2.x, -1.0 / 100.0, rel_tol=1e-12)
    assert a1.y == 0.0
    assert a2.y == 0.0


def test_accelerations_scale_with_g():
    bodies = [Body(3.0, [0.0, 0.0], [0, 0]), Body(5.0, [0.0, 4.0], [0, 0])]
    unit = accelerations(bodies, g_constant=1.0)
    doubled = accelerations(bodies, g_constant=2.0)
    for a, b in zip(unit, doubled):
        assert np.allclose(np.array(b), 2.0 * np.array(a))


def test_single_body_has_no_self_interaction():
    (acc,) = accelerations([Body(100.0, [5.0, 5.0], [1.0, 0.0])])
    assert acc == Vector2(0.0, 0.0)


def test_net_acceleration_is_sum_of_pairs():
    bodies = [
        Body(70.0, [-100.0, 0.0], [0, 0]),
        Body(100.0, [0.0, 0.0], [0, 0]),
        Body(30.0, [100.0, 0.0], [0, 0]),
    ]
    acc = accelerations(bodies)
    from_1 = accelerations([bodies[0], bodies[1]])[0]
    from_2 = accelerations([bodies[0], bodies[2]])[0]
    assert np.allclose(np.array(acc[0]), np.array(from_1) + np.array(from_2), rtol=1e-12)
    # 100/100^2 + 30/200^2 towards +x
    assert math.isclose(acc[0].x, 0.01 + 30.0 / 40000.0, rel_tol=1e-12)


def test_coincident_bodies_give_zero_acceleration():
    b1 = Body(1.0, [0.0, 0.0], [0.0, 0.0])
    b2 = Body(2.0, [0.0, 0.0], [0.0, 0.0])
    a1, a2 = accelerations([b1, b2])
    assert a1 == Vector2(0.0, 0.0)
    assert a2 == Vector2(0.0, 0.0)


def test_softening_caps_close_range_force():
    mass = 50.0
    cap = 1.0 * mass / 0.1 ** 2
    for gap in (1e-9, 1e-4, 0.05, 0.0999):
        a, _ = accelerations([Body(1.0, [0.0, 0.0], [0, 0]), Body(mass, [gap, 0.0], [0, 0])])
        assert math.isfinite(a.x) and math.isfinite(a.y)
        assert a.magnitude() <= cap * (1 + 1e-12)
        assert math.isclose(a.magnitude(), cap, rel_tol=1e-9)


def test_softening_not_applied_beyond_floor():
    a, _ = accelerations([Body(1.0, [0.0, 0.0], [0, 0]), Body(1.0, [0.0, 0.2], [0, 0])])
    assert math.isclose(a.y, 1.0 / 0.04, rel_tol=1e-12)


def test_accelerations_do_not_mutate_bodies():
    bodies = [Body(1.0, [0.0, 0.0], [1.0, 0.0]), Body(1.0, [1.0, 0.0], [0.0, 1.0])]
    accelerations(bodies)
    assert bodies[0].pos == (0.0, 0.0) and bodies[0].vel == (1.0, 0.0)
    assert bodies[1].pos == (1.0, 0.0) and bodies[1].vel == (0.0, 1.0)
    assert len(bodies[0].trail) == 0


@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan"), float("inf")])
def test_body_rejects_invalid_mass(mass):
    with pytest.raises(ValueError):
        Body(mass, [0.0, 0.0], [0.0, 0.0])


def test_body_rejects_non_finite_state():
    with pytest.raises(ValueError):
        Body(1.0, [float("nan"), 0.0], [0.0, 0.0])
    with pytest.raises(ValueError):
        Body(1.0, [0.0, 0.0], [float("inf"), 0.0])


def test_body_from_config_flat_and_pair_records():
    flat = Body.from_config({"mass": 70.0, "x": -100.0, "y": 0.0, "vx": 0.0, "vy": 0.5})
    paired = Body.from_config({"mass": 70.0, "pos": [-100.0, 0.0], "vel": [0.0, 0.5]})
    for b in (flat, paired):
        assert b.mass == 70.0
        assert b.pos == Vector2(-100.0, 0.0)
        assert b.vel == Vector2(0.0, 0.5)


def test_body_from_config_requires_mass():
    with pytest.raises(ValueError):
        Body.from_config({"x": 1.0})

"""Tests for point-mass bodies."""

import numpy as np
import pytest
from nbody_sim.physics.body import Body, G
from nbody_sim.physics.vector import Vector2


def test_body_initialization():
    """Test a new body starts with zero force."""
    body = Body(Vector2(10.0, 9.0), Vector2.unit(), 10.0)

    assert body.position == Vector2(10.0, 9.0)
    assert body.velocity == Vector2(1.0, 1.0)
    assert body.force == Vector2.zero()
    assert body.mass == 10.0
    assert G == 6.67408e-11


def test_update_by_delta_time():
    """Test semi-implicit Euler: velocity first, then position with new velocity."""
    body = Body(Vector2(10.0, 9.0), Vector2.unit(), 10.0)
    body.force = Vector2(10.0, 8.0)

    body.update(0.16)

    assert (body.velocity.x, body.velocity.y) == pytest.approx((1.16, 1.128))
    assert (body.position.x, body.position.y) == pytest.approx((10.1856, 9.18048))


def test_add_force_from_another_body():
    """Test the two-body force value."""
    first = Body(Vector2(10.0, 9.0), Vector2.unit(), 10.0)
    second = Body(Vector2(7.0, 2.0), Vector2.unit(), 12.0)

    first.add_force(second)

    assert first.force.x == pytest.approx(5.439411542609485e-11, rel=1e-12)
    assert first.force.y == pytest.approx(1.2691960266088797e-10, rel=1e-12)


def test_add_force_accumulates():
    """Test contributions are summed rather than overwritten."""
    first = Body(Vector2(10.0, 9.0), Vector2.unit(), 10.0)
    second = Body(Vector2(7.0, 2.0), Vector2.unit(), 12.0)
    third = Body(Vector2(5.0, 7.0), Vector2(2.0, 1.5), 8.0)

    first.add_force(second)
    single = first.force
    first.add_force(second)
    assert np.allclose(first.force.to_array(), 2 * single.to_array(), rtol=1e-12, atol=0)

    first.reset_force()
    first.add_force(second)
    first.add_force(third)
    only_third = Body(Vector2(10.0, 9.0), Vector2.unit(), 10.0)
    only_third.add_force(third)
    expected = single.to_array() + only_third.force.to_array()
    assert np.allclose(first.force.to_array(), expected, rtol=1e-12, atol=0)


def test_newtons_third_law():
    """Test pairwise forces are equal and opposite."""
    rng = np.random.default_rng(7)
    for _ in range(20):
        px, py, qx, qy = rng.uniform(-100.0, 100.0, size=4)
        a = Body(Vector2(px, py), Vector2.zero(), rng.uniform(1.0, 50.0))
        b = Body(Vector2(qx, qy), Vector2.zero(), rng.uniform(1.0, 50.0))

        a.add_force(b)
        b.add_force(a)

        scale = np.abs(a.force.to_array()).max()
        assert np.allclose(a.force.to_array(), -b.force.to_array(), rtol=1e-12, atol=1e-12 * scale)


def test_reset_force():
    """Test the accumulator is cleared."""
    body = Body(Vector2.unit(), Vector2.unit(), 10.0)
    body.force = Vector2(10.0, 8.0)

    body.reset_force()

    assert body.force == Vector2.zero()


def test_combine_is_mass_weighted_and_order_independent():
    """Test aggregation sums mass and takes the centroid, regardless of order."""
    a = Body(Vector2(2.0, 2.0), Vector2.zero(), 5.0)
    b = Body(Vector2(-2.0, -2.0), Vector2.zero(), 10.0)

    ab = a.combine(b)
    ba = b.combine(a)

    assert ab.mass == 15.0
    assert ba.mass == 15.0
    assert (ab.position.x, ab.position.y) == pytest.approx((-2.0 / 3.0, -2.0 / 3.0))
    assert (ab.position.x, ab.position.y) == pytest.approx((ba.position.x, ba.position.y))
    # Operands are untouched
    assert a.mass == 5.0
    assert a.position == Vector2(2.0, 2.0)


def test_copy_and_equality():
    """Test snapshots compare equal but are independent."""
    body = Body(Vector2(1.0, 2.0), Vector2(3.0, 4.0), 5.0)
    body.force = Vector2(0.5, 0.5)

    snapshot = body.copy()
    assert snapshot == body
    assert snapshot is not body

    body.update(1.0)
    assert snapshot != body


def test_degenerate_inputs_raise():
    """Test coincident positions and zero mass fail loudly."""
    a = Body(Vector2(1.0, 1.0), Vector2.zero(), 5.0)
    b = Body(Vector2(1.0, 1.0), Vector2.zero(), 5.0)
    with pytest.raises(ZeroDivisionError):
        a.add_force(b)

    massless = Body(Vector2.zero(), Vector2.zero(), 0.0)
    with pytest.raises(ZeroDivisionError):
        massless.update(0.1)


def test_body_is_unhashable():
    """Test value-compared bodies cannot be used as set members or dict keys."""
    body = Body(Vector2.zero(), Vector2.zero(), 1.0)

    assert Body.__hash__ is None
    with pytest.raises(TypeError):
        hash(body)

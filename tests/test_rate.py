import numpy as np
import pytest

from quatrate.quaternion import IDENTITY, Quaternion, multiply, invert, power
from quatrate.rate import angular_velocity, compute_unit_time_quaternion
from quatrate.utils.orientation import orientation_from_axis_angle


def test_round_trip_scenario(eighth_turn_z):
    """Identity -> 45 deg about Z over 2 time units is 22.5 deg per unit."""
    rate = compute_unit_time_quaternion(IDENTITY, eighth_turn_z, 2.0)
    expected = [0.0, 0.0, np.sin(np.pi / 16), np.cos(np.pi / 16)]
    assert np.allclose(rate.as_array(), expected, atol=1e-12)
    assert np.allclose(rate.as_array(), power(eighth_turn_z, 0.5).as_array())

def test_same_sample_is_identity(quarter_turn_x):
    for dt in (0.01, 1.0, 250.0):
        rate = compute_unit_time_quaternion(quarter_turn_x, quarter_turn_x, dt)
        assert np.allclose(rate.as_array(), [0.0, 0.0, 0.0, 1.0])

def test_unit_time_difference_returns_delta(quarter_turn_x, quarter_turn_y):
    rate = compute_unit_time_quaternion(quarter_turn_x, quarter_turn_y, 1.0)
    delta = multiply(invert(quarter_turn_x), quarter_turn_y)
    assert np.allclose(rate.as_array(), delta.as_array())

def test_rate_raised_to_dt_reconstructs_delta():
    q1 = orientation_from_axis_angle([1, 2, 3], 20)
    q2 = orientation_from_axis_angle([-1, 0, 2], 35)
    dt = 0.5
    rate = compute_unit_time_quaternion(q1, q2, dt)
    delta = multiply(invert(q1), q2)
    assert np.allclose(power(rate, dt).as_array(), delta.as_array(), atol=1e-6)

def test_zero_time_difference_is_non_finite(eighth_turn_z):
    rate = compute_unit_time_quaternion(IDENTITY, eighth_turn_z, 0.0)
    assert not np.all(np.isfinite(rate.as_array()))

def test_accepts_flat_arrays(eighth_turn_z):
    rate = compute_unit_time_quaternion([0.0, 0.0, 0.0, 1.0], eighth_turn_z.as_array(), 2.0)
    assert isinstance(rate, Quaternion)
    assert np.isclose(rate.z, np.sin(np.pi / 16))

def test_angular_velocity_round_trip_scenario(eighth_turn_z):
    rate = compute_unit_time_quaternion(IDENTITY, eighth_turn_z, 2.0)
    omega = angular_velocity(rate)
    assert np.allclose(omega, [0.0, 0.0, np.pi / 8])

def test_angular_velocity_identity_is_zero():
    omega = angular_velocity(IDENTITY)
    assert omega.shape == (3,)
    assert np.array_equal(omega, np.zeros(3))

def test_angular_velocity_matches_axis_angle():
    axis = np.array([1.0, -2.0, 0.5])
    q = orientation_from_axis_angle(axis, 0.3, degrees=False)
    omega = angular_velocity(q)
    assert np.allclose(omega, 0.3 * axis / np.linalg.norm(axis))

def test_angular_velocity_nan_propagates():
    omega = angular_velocity([0.0, 0.0, 0.0, 1.5])
    assert np.all(np.isnan(omega))

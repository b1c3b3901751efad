import numpy as np
import pytest

from quatrate.quaternion import IDENTITY, Quaternion
from quatrate.utils.orientation import orientation_from_axis_angle


def test_axis_angle_degrees():
    q = orientation_from_axis_angle([0, 0, 1], 45)
    assert isinstance(q, Quaternion)
    assert np.allclose(q.as_array(), [0.0, 0.0, np.sin(np.pi / 8), np.cos(np.pi / 8)])

def test_axis_angle_radians_and_unnormalized_axis():
    q = orientation_from_axis_angle([0, 2, 0], np.pi / 2, degrees=False)
    assert np.allclose(q.as_array(), [0.0, np.sin(np.pi / 4), 0.0, np.cos(np.pi / 4)])

def test_zero_angle_is_identity():
    q = orientation_from_axis_angle([1, 0, 0], 0.0)
    assert np.allclose(q.as_array(), IDENTITY.as_array())

@pytest.mark.parametrize("axis", [[0, 0, 0], [1, 0]])
def test_invalid_axis(axis):
    with pytest.raises(ValueError):
        orientation_from_axis_angle(axis, 10)

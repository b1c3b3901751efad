"""
Angular rate from two time-separated orientation samples.

The unit-time delta quaternion is the constant angular-velocity rotation that,
applied for one unit of time, reproduces the rotation observed between two
samples taken ``time_difference`` apart:

    Δ = q1⁻¹ ⊗ q2
    r = Δ^(1/Δt)

Nothing is validated here; see :mod:`quatrate.series` for a checked,
stream-oriented wrapper.
"""
from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from quatrate.quaternion import (
    Quaternion,
    QuaternionLike,
    to_array,
    invert,
    multiply,
    normalize,
    power,
)


def compute_unit_time_quaternion(
    quat_at_time1: QuaternionLike,
    quat_at_time2: QuaternionLike,
    time_difference: float,
) -> Quaternion:
    """
    Compute the unit-time delta quaternion between two orientation samples.

    Parameters
    ----------
    quat_at_time1 : QuaternionLike
        Unit orientation [x, y, z, w] at the first sample.
    quat_at_time2 : QuaternionLike
        Unit orientation [x, y, z, w] at the second sample.
    time_difference : float
        Elapsed time between the samples. Expected to be positive.

    Returns
    -------
    Quaternion
        Rotation per unit time, expressed in the frame of the first sample.
        Raising it to ``time_difference`` with :func:`power` gives back the
        relative rotation between the samples.

    Notes
    -----
    ``time_difference == 0`` gives an infinite exponent and non-finite
    components in the result; no exception is raised.

    Examples
    --------
    >>> q1 = Quaternion(0.0, 0.0, 0.0, 1.0)
    >>> q2 = Quaternion(0.0, 0.0, np.sin(np.pi / 8), np.cos(np.pi / 8))  # 45 deg about Z
    >>> compute_unit_time_quaternion(q1, q2, 2.0)  # 22.5 deg about Z
    """
    delta_quat = multiply(invert(quat_at_time1), quat_at_time2)

    with np.errstate(all="ignore"):
        exponent = np.float64(1.0) / np.float64(time_difference)

    return power(delta_quat, exponent)


def angular_velocity(rate_quaternion: QuaternionLike) -> NDArray[np.float64]:
    """
    Rotation vector of a unit-time delta quaternion.

    Uses the same axis-angle decomposition as :func:`power`, so the result is
    ``axis * θ`` with ``θ = 2·acos(w)`` in [0, 2π].

    Parameters
    ----------
    rate_quaternion : QuaternionLike
        Unit-time delta quaternion [x, y, z, w].

    Returns
    -------
    NDArray[np.float64]
        Angular velocity [ωx, ωy, ωz] in radians per unit time (3,).
        Zero vector for the exact identity.
    """
    qx, qy, qz, qw = to_array(rate_quaternion)
    with np.errstate(all="ignore"):
        theta = 2.0 * np.arccos(qw)
        if theta == 0.0:
            return np.zeros(3, dtype=np.float64)

        axis = normalize([qx, qy, qz, 0.0])
        return axis.vector * theta

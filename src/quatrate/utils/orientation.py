"""
Helpers for building orientation samples.

All functions return quaternions in scalar-last format [x, y, z, w].

Examples
--------
>>> from quatrate.utils.orientation import orientation_from_axis_angle, IDENTITY

# Rotate 45 degrees about Z
>>> q = orientation_from_axis_angle([0, 0, 1], 45)

# No rotation
>>> q = IDENTITY
"""
from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.transform import Rotation as R

from quatrate.quaternion import IDENTITY, Quaternion

__all__ = ["IDENTITY", "orientation_from_axis_angle"]


# =============================================================================
# Axis-Angle Rotation
# =============================================================================

def orientation_from_axis_angle(
    axis: tuple[float, float, float] | list[float] | NDArray,
    angle: float,
    degrees: bool = True
) -> Quaternion:
    """
    Create orientation from axis-angle representation.

    Rotates `angle` degrees/radians about the given axis.

    Parameters
    ----------
    axis : array-like
        Rotation axis [x, y, z]. Will be normalized.
    angle : float
        Rotation angle [degrees or radians]
    degrees : bool
        If True (default), angle is in degrees.

    Returns
    -------
    Quaternion
        Quaternion [x, y, z, w]

    Raises
    ------
    ValueError
        If the axis has zero length

    Examples
    --------
    >>> # Rotate 45 degrees about Z axis
    >>> q = orientation_from_axis_angle([0, 0, 1], 45)

    >>> # Rotate 30 degrees about diagonal axis
    >>> q = orientation_from_axis_angle([1, 1, 0], 30)
    """
    axis = np.asarray(axis, dtype=np.float64)
    if axis.shape != (3,):
        raise ValueError(f"Axis must have shape (3,), got {axis.shape}")
    n = np.linalg.norm(axis)
    if n == 0.0:
        raise ValueError("Rotation axis must have non-zero length")
    axis = axis / n

    if degrees:
        angle = np.deg2rad(angle)

    rotvec = axis * angle
    rot = R.from_rotvec(rotvec)
    return Quaternion.from_array(rot.as_quat())  # Returns [x, y, z, w]

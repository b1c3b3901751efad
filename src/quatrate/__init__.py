"""
quatrate - Angular-rate quaternions from orientation samples.

Core Components
---------------
Quaternion : Immutable scalar-last quaternion [x, y, z, w]
compute_unit_time_quaternion : Rotation per unit time between two samples
unit_time_series : Checked rates along a timestamped sample stream
QuaternionLogger : Buffered CSV logger

Examples
--------
>>> from quatrate import compute_unit_time_quaternion, IDENTITY
>>> from quatrate.utils import orientation_from_axis_angle
>>> q2 = orientation_from_axis_angle([0, 0, 1], 45)
>>> rate = compute_unit_time_quaternion(IDENTITY, q2, 2.0)  # 22.5 deg about Z
"""

__version__ = "0.1.0"

# Quaternion algebra
from quatrate.quaternion import (
    IDENTITY,
    W,
    X,
    Y,
    Z,
    Quaternion,
    invert,
    magnitude_squared,
    multiply,
    normalize,
    power,
)

# Rates
from quatrate.rate import angular_velocity, compute_unit_time_quaternion
from quatrate.series import unit_time_series

# Logging
from quatrate.logger import QuaternionLogger
from quatrate.utils.validation import NonFiniteQuaternionError

__all__ = [
    # Version
    "__version__",
    # Quaternion
    "Quaternion",
    "IDENTITY",
    "X",
    "Y",
    "Z",
    "W",
    "magnitude_squared",
    "normalize",
    "invert",
    "multiply",
    "power",
    # Rates
    "compute_unit_time_quaternion",
    "angular_velocity",
    "unit_time_series",
    # Errors
    "NonFiniteQuaternionError",
    # Logging
    "QuaternionLogger",
]

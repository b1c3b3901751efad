"""Utility functions for quatrate."""

from .io import load_quaternion_history, save_quaternion_history
from .orientation import orientation_from_axis_angle
from .validation import (
    NonFiniteQuaternionError,
    validate_finite,
    validate_positive,
    validate_quaternion,
    validate_timestamps,
)

__all__ = [
    "save_quaternion_history",
    "load_quaternion_history",
    "orientation_from_axis_angle",
    "NonFiniteQuaternionError",
    "validate_positive",
    "validate_quaternion",
    "validate_finite",
    "validate_timestamps",
]

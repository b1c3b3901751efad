"""
Validation utilities for orientation samples and rate results.

The quaternion kernel never validates; these helpers are meant for the
boundary where samples enter and rates leave.
"""
from __future__ import annotations
import numpy as np
from numpy.typing import NDArray
import warnings

from quatrate.quaternion import QuaternionLike, to_array

UNIT_NORM_TOLERANCE = 1e-6


class NonFiniteQuaternionError(ValueError):
    """A quaternion has NaN or infinite components."""


def validate_positive(value: float, name: str, strict: bool = True) -> None:
    """
    Validate that a scalar value is positive.

    Parameters
    ----------
    value : float
        Value to validate
    name : str
        Parameter name for error messages
    strict : bool
        If True, raise ValueError. If False, issue warning.

    Raises
    ------
    ValueError
        If strict=True and value <= 0
    """
    if not value > 0:
        msg = f"{name} must be positive, got {value}"
        if strict:
            raise ValueError(msg)
        else:
            warnings.warn(msg, RuntimeWarning, stacklevel=2)


def validate_quaternion(q: QuaternionLike, tol: float = UNIT_NORM_TOLERANCE) -> NDArray[np.float64]:
    """
    Validate that array is a unit quaternion.

    Parameters
    ----------
    q : QuaternionLike
        Quaternion [x, y, z, w]
    tol : float
        Tolerance for unit norm check

    Returns
    -------
    NDArray[np.float64]
        The quaternion as a float64 array.

    Raises
    ------
    ValueError
        If quaternion shape is invalid
    """
    arr = to_array(q)
    if arr.shape != (4,):
        raise ValueError(f"Quaternion must have shape (4,), got {arr.shape}")

    norm = np.linalg.norm(arr)
    if abs(norm - 1.0) > tol:
        warnings.warn(
            f"Quaternion not normalized: |q| = {norm:.6f}. "
            "Consider normalizing before use.",
            RuntimeWarning,
            stacklevel=2
        )
    return arr


def validate_finite(q: QuaternionLike, name: str, strict: bool = True) -> bool:
    """
    Check that every quaternion component is finite.

    Parameters
    ----------
    q : QuaternionLike
        Quaternion [x, y, z, w]
    name : str
        Label for error messages
    strict : bool
        If True, raise. If False, issue warning.

    Returns
    -------
    bool
        True if all components are finite.

    Raises
    ------
    NonFiniteQuaternionError
        If strict=True and any component is NaN or infinite
    """
    arr = to_array(q)
    if np.all(np.isfinite(arr)):
        return True

    msg = f"{name} has non-finite components: {arr}"
    if strict:
        raise NonFiniteQuaternionError(msg)
    warnings.warn(msg, RuntimeWarning, stacklevel=2)
    return False


def validate_timestamps(times: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Validate a 1-D array of sample times.

    Raises
    ------
    ValueError
        If not 1-D, fewer than two samples, non-finite or not strictly increasing
    """
    t = np.asarray(times, dtype=np.float64)
    if t.ndim != 1:
        raise ValueError(f"Timestamps must be 1-D, got shape {t.shape}")
    if t.size < 2:
        raise ValueError(f"At least two samples are required, got {t.size}")
    if not np.all(np.isfinite(t)):
        raise ValueError("Timestamps must be finite")

    steps = np.diff(t)
    if np.any(steps <= 0):
        idx = int(np.argmax(steps <= 0))
        raise ValueError(
            f"Timestamps must be strictly increasing: "
            f"t[{idx}]={t[idx]} followed by t[{idx + 1}]={t[idx + 1]}"
        )
    return t

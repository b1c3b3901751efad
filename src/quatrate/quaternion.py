"""
Quaternion algebra for rotation rates.

Quaternions use the scalar-last convention [x, y, z, w], where (x, y, z) is
the vector (imaginary) part and w the scalar (real) part. Every function
accepts a :class:`Quaternion` or any 4-element array-like in that order and
returns a new :class:`Quaternion`.

Floating-point degeneracies (zero magnitude, ``acos`` outside [-1, 1]) are not
trapped: they propagate as NaN/inf components, silently.
"""
from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator, Sequence, Union

import numpy as np
from numpy.typing import NDArray

# Component indices for flat [x, y, z, w] arrays
X = 0
Y = 1
Z = 2
W = 3


@dataclass(frozen=True)
class Quaternion:
    """
    Immutable quaternion value (scalar-last).

    Parameters
    ----------
    x, y, z : float
        Vector (imaginary) part.
    w : float
        Scalar (real) part.

    Examples
    --------
    >>> q = Quaternion(0.0, 0.0, 0.0, 1.0)
    >>> q[W]
    1.0
    >>> q.as_array()
    array([0., 0., 0., 1.])
    """

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def from_array(cls, q: QuaternionLike) -> Quaternion:
        """Build from a 4-element [x, y, z, w] sequence or array."""
        arr = np.asarray(q, dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(f"Quaternion must have shape (4,), got {arr.shape}")
        return cls(float(arr[X]), float(arr[Y]), float(arr[Z]), float(arr[W]))

    def as_array(self) -> NDArray[np.float64]:
        """Return components as a float64 array [x, y, z, w]."""
        return np.array(astuple(self), dtype=np.float64)

    @property
    def vector(self) -> NDArray[np.float64]:
        """Vector part [x, y, z]."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index: int) -> float:
        return astuple(self)[index]


QuaternionLike = Union[Quaternion, Sequence[float], NDArray[np.float64]]

IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)
"""Identity quaternion [0, 0, 0, 1] representing no rotation."""


def to_array(q: QuaternionLike) -> NDArray[np.float64]:
    """Return [x, y, z, w] as a float64 array."""
    if isinstance(q, Quaternion):
        return q.as_array()
    return np.asarray(q, dtype=np.float64)


# =============================================================================
# Primitives
# =============================================================================

def magnitude_squared(q: QuaternionLike) -> float:
    """Sum of squared components x² + y² + z² + w²."""
    qx, qy, qz, qw = to_array(q)
    with np.errstate(all="ignore"):
        return float(qx*qx + qy*qy + qz*qz + qw*qw)


def normalize(q: QuaternionLike) -> Quaternion:
    """
    Scale quaternion to unit magnitude.

    A zero-magnitude input yields NaN components; nothing is raised.
    """
    arr = to_array(q)
    magnitude = np.sqrt(np.float64(magnitude_squared(arr)))
    with np.errstate(all="ignore"):
        return Quaternion.from_array(arr / magnitude)


def invert(q: QuaternionLike) -> Quaternion:
    """
    Quaternion inverse: conjugate divided by squared magnitude.

    For a unit quaternion this is the conjugate, i.e. the reverse rotation.
    """
    qx, qy, qz, qw = to_array(q)
    m = np.float64(magnitude_squared((qx, qy, qz, qw)))
    with np.errstate(all="ignore"):
        return Quaternion.from_array([-qx / m, -qy / m, -qz / m, qw / m])


def multiply(q1: QuaternionLike, q2: QuaternionLike) -> Quaternion:
    """
    Hamilton product q1 ⊗ q2 (scalar-last), renormalized.

    Order matters: ``multiply(a, b)`` composes ``b`` after ``a`` in the frame
    of ``a`` and differs from ``multiply(b, a)`` in general.

    Parameters
    ----------
    q1, q2 : QuaternionLike
        Quaternions [x, y, z, w].

    Returns
    -------
    Quaternion
        Unit quaternion of the product.
    """
    x1, y1, z1, w1 = to_array(q1)
    x2, y2, z2, w2 = to_array(q2)
    with np.errstate(all="ignore"):
        product = [
            w1*x2 + x1*w2 + y1*z2 - z1*y2,
            w1*y2 - x1*z2 + y1*w2 + z1*x2,
            w1*z2 + x1*y2 - y1*x2 + z1*w2,
            w1*w2 - x1*x2 - y1*y2 - z1*z2,
        ]
    return normalize(product)


# =============================================================================
# Exponentiation
# =============================================================================

def power(q: QuaternionLike, exponent: float) -> Quaternion:
    """
    Raise a unit quaternion to a real exponent.

    Decomposes ``q`` into axis and angle, scales the angle by ``exponent`` and
    rebuilds the rotation about the same axis:

        q^t = [sin(t·θ/2)·n, cos(t·θ/2)],  θ = 2·acos(w)

    Parameters
    ----------
    q : QuaternionLike
        Unit quaternion [x, y, z, w].
    exponent : float
        Real exponent ``t``.

    Returns
    -------
    Quaternion
        Unit quaternion. ``power(q, 1) ≈ q`` and ``power(q, 0)`` is the
        identity.

    Notes
    -----
    ``w`` is not clamped to [-1, 1]; a value pushed outside by rounding makes
    ``acos`` return NaN, which propagates. Only the exact identity (θ == 0)
    is short-circuited, so a near-identity rotation normalizes a very short
    axis vector.
    """
    qx, qy, qz, qw = to_array(q)
    with np.errstate(all="ignore"):
        theta = 2.0 * np.arccos(qw)
        if theta == 0.0:
            return IDENTITY

        axis = normalize([qx, qy, qz, 0.0])

        new_theta = np.float64(exponent) * theta
        half_new_theta = 0.5 * new_theta
        sine_half = np.sin(half_new_theta)
        return normalize([
            axis.x * sine_half,
            axis.y * sine_half,
            axis.z * sine_half,
            np.cos(half_new_theta),
        ])

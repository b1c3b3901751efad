"""
Rate quaternions along a stream of orientation samples.

Checked wrapper around :func:`quatrate.rate.compute_unit_time_quaternion`
for consecutive sample pairs. Input validation and the optional non-finite
check happen here; the kernel itself stays silent.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from quatrate.quaternion import Quaternion, QuaternionLike
from quatrate.rate import compute_unit_time_quaternion
from quatrate.utils.validation import (
    validate_finite,
    validate_quaternion,
    validate_timestamps,
)


def unit_time_series(
    timestamps: Sequence[float] | NDArray[np.float64],
    orientations: Sequence[QuaternionLike],
    strict: bool = True,
) -> list[Quaternion]:
    """
    Compute the unit-time delta quaternion for every consecutive sample pair.

    Parameters
    ----------
    timestamps : array-like
        Strictly increasing sample times (N,)
    orientations : sequence of QuaternionLike
        Unit orientations [x, y, z, w], one per timestamp
    strict : bool
        If True, a non-finite rate raises NonFiniteQuaternionError.
        If False, a RuntimeWarning is issued and the rate is kept.

    Returns
    -------
    list[Quaternion]
        N - 1 rate quaternions; entry i covers samples i and i + 1.

    Raises
    ------
    ValueError
        If lengths differ, fewer than two samples are given, timestamps are
        not strictly increasing or an orientation is not 4-element

    Examples
    --------
    >>> t = [0.0, 0.5, 1.0]
    >>> qs = [orientation_from_axis_angle([0, 0, 1], a) for a in (0, 10, 20)]
    >>> rates = unit_time_series(t, qs)  # 20 deg/s about Z each
    """
    if len(timestamps) != len(orientations):
        raise ValueError(
            f"Got {len(timestamps)} timestamps for {len(orientations)} orientations."
        )
    t = validate_timestamps(timestamps)
    samples = [validate_quaternion(q) for q in orientations]

    rates: list[Quaternion] = []
    for i in range(len(samples) - 1):
        rate = compute_unit_time_quaternion(samples[i], samples[i + 1], t[i + 1] - t[i])
        validate_finite(rate, f"rate[{i}] (t={t[i]}..{t[i + 1]})", strict=strict)
        rates.append(rate)
    return rates

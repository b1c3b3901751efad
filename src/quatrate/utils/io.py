# src/quatrate/utils/io.py
import numpy as np
import pandas as pd
from pathlib import Path
from typing import List, Sequence, Tuple

from quatrate.quaternion import Quaternion, QuaternionLike, to_array

COLUMNS = ["t", "q_x", "q_y", "q_z", "q_w"]


def save_quaternion_history(
    times: Sequence[float],
    quaternions: Sequence[QuaternionLike],
    filepath: str,
) -> None:
    """
    Saves timestamped quaternions to a CSV file.

    Args:
        times: Sample times, one per quaternion.
        quaternions: Quaternions [x, y, z, w].
        filepath: Destination path (e.g., 'results/rates.csv')
    """
    if len(quaternions) == 0:
        raise ValueError("Quaternion history is empty. Nothing to save.")
    if len(times) != len(quaternions):
        raise ValueError(
            f"Got {len(times)} times for {len(quaternions)} quaternions."
        )

    path = Path(filepath)
    # Ensure the directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    data = np.column_stack([
        np.asarray(times, dtype=np.float64),
        np.vstack([to_array(q) for q in quaternions]),
    ])
    df = pd.DataFrame(data, columns=COLUMNS)
    df.to_csv(path, index=False)
    print(f"Quaternion history saved to {path.absolute()}")


def load_quaternion_history(filepath: str) -> Tuple[np.ndarray, List[Quaternion]]:
    """
    Loads timestamped quaternions written by save_quaternion_history.

    Args:
        filepath: CSV file with columns t, q_x, q_y, q_z, q_w.

    Returns:
        (times, quaternions)
    """
    df = pd.read_csv(filepath)
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{filepath} is missing columns: {missing}")

    times = df["t"].to_numpy(dtype=np.float64)
    values = df[COLUMNS[1:]].to_numpy(dtype=np.float64)
    return times, [Quaternion.from_array(row) for row in values]

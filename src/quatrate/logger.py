"""
CSV logging for timestamped quaternions.

Buffers rows in memory and writes in batches to minimize I/O overhead.
Implements context manager protocol for safe resource handling.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, TextIO

from quatrate.quaternion import QuaternionLike, to_array
from quatrate.utils.validation import validate_positive


class QuaternionLogger:
    """
    Buffered CSV logger for orientation samples or rate quaternions.

    Parameters
    ----------
    filepath : str | Path
        Output CSV file path
    name : str
        Column prefix, e.g. "imu" gives "imu.q_x", ..., "imu.q_w"
    buffer_size : int
        Number of rows to buffer before writing. Higher = fewer writes but more memory.

    Attributes
    ----------
    filepath : Path
        Path to output CSV file
    buffer_size : int
        Number of rows buffered before flush

    Notes
    -----
    **Usage Patterns:**

    1. Context manager (recommended):
    >>> with QuaternionLogger("rates.csv", name="rate") as logger:
    ...     for t, q in samples:
    ...         logger.log(t, q)

    2. Manual management:
    >>> logger = QuaternionLogger("rates.csv")
    >>> logger.log(0.0, IDENTITY)
    >>> logger.close()  # Important!
    """

    def __init__(
        self,
        filepath: str | Path,
        name: str = "q",
        buffer_size: int = 1000
    ) -> None:
        validate_positive(buffer_size, "buffer_size")

        self.filepath = Path(filepath)
        self.name = name
        self.buffer_size = buffer_size

        self._buffer: list[list[str]] = []
        self._file: TextIO | None = None
        self._writer: Any = None  # csv.writer is a function, not a type
        self._header_written = False

        # Ensure parent directory exists
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def __enter__(self) -> QuaternionLogger:
        """Open file for writing."""
        self._file = open(self.filepath, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close file, flushing any remaining data."""
        self.close()

    @property
    def header(self) -> list[str]:
        return ["t"] + [f"{self.name}.q_{c}" for c in ("x", "y", "z", "w")]

    def _write_header(self) -> None:
        if self._writer:
            self._writer.writerow(self.header)
            if self._file:
                self._file.flush()  # Ensure header written immediately

        self._header_written = True

    def log(self, t: float, q: QuaternionLike) -> None:
        """
        Log one timestamped quaternion to the buffer.

        Parameters
        ----------
        t : float
            Sample time
        q : QuaternionLike
            Quaternion [x, y, z, w]

        Notes
        -----
        Automatically opens file on first call if not using context manager.
        Writes to disk when buffer is full. Non-finite components are written
        as they are ("nan", "inf").
        """
        # Auto-open if not in context manager
        if self._file is None:
            self.__enter__()

        if not self._header_written:
            self._write_header()

        row = [f"{t:.10f}"]  # High precision time
        row.extend(f"{v:.10e}" for v in to_array(q))  # Scientific notation
        self._buffer.append(row)

        # Flush if buffer full
        if len(self._buffer) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        """Write buffered data to disk and clear buffer."""
        if self._writer and self._buffer:
            self._writer.writerows(self._buffer)
            if self._file:
                self._file.flush()
            self._buffer.clear()

    def close(self) -> None:
        """Flush remaining data and close file."""
        self.flush()
        if self._file:
            self._file.close()
            self._file = None
            self._writer = None

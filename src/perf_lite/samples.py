"""Append-only storage for raw timing samples."""

from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from perf_lite.errors import require


class SampleSet:
    """
    An ordered, append-only sequence of elapsed-time samples in nanoseconds.

    Samples are stored as float64 so later conversion to coarser units keeps
    sub-unit precision. The backing buffer is pre-allocated so that appending
    during measurement does not reallocate.

    Parameters
    ----------
    capacity : int, optional
        Number of samples to pre-allocate room for. Default is 0.
    """

    def __init__(self, capacity: int = 0) -> None:
        require(capacity >= 0, f"Invalid capacity; expected >=0 but got {capacity}")
        self._array = np.empty(shape=capacity, dtype=np.float64)
        self._size = 0
        self._is_frozen = False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_array().tolist())

    def __repr__(self) -> str:
        return f"SampleSet(size={self._size}, capacity={self.capacity})"

    @property
    def capacity(self) -> int:
        return self._array.shape[0]

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def is_frozen(self) -> bool:
        return self._is_frozen

    def reserve(self, capacity: int) -> None:
        """
        Ensure room for at least ``capacity`` samples without reallocating.

        Parameters
        ----------
        capacity : int
            The total number of samples expected.
        """
        if capacity <= self.capacity:
            return
        grown = np.empty(shape=capacity, dtype=np.float64)
        grown[: self._size] = self._array[: self._size]
        self._array = grown

    def append(self, interval_ns: float) -> None:
        """
        Add one sample to the end of the set.

        Parameters
        ----------
        interval_ns : float
            Elapsed time in nanoseconds.

        Raises
        ------
        ContractViolation
            If the set has been frozen.
        """
        require(not self._is_frozen, "Cannot append to a frozen SampleSet")
        if self._size == self.capacity:
            self.reserve(max(16, self.capacity * 2))
        self._array[self._size] = interval_ns
        self._size += 1

    def freeze(self) -> None:
        """Mark the set as complete; further appends are rejected."""
        self._is_frozen = True

    def as_array(self) -> NDArray[np.float64]:
        """
        Read-only view of the recorded samples.

        Returns
        -------
        np.ndarray
            A float64 view of length ``len(self)``.
        """
        view = self._array[: self._size]
        view.flags.writeable = False
        return view

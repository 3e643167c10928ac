"""Trip reference allocators — mint ``<prefix>-<year>-<NNN>`` identifiers.

References are human-readable labels, not keys: three digits per year means
collisions are expected.  Callers that need uniqueness must bring their own
allocator.

Usage::

    allocator = RandomTripReferenceAllocator(rng=np.random.default_rng(42))
    allocator.allocate(2024)          # 'TCN-2024-089'

    allocator = SequentialTripReferenceAllocator(start=1)
    allocator.allocate(2024)          # 'TCN-2024-001'
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

import numpy as np

REFERENCE_SPACE = 1_000
"""Three zero-padded digits per year."""


def format_trip_reference(prefix: str, year: int, number: int) -> str:
    """Render a reference such as ``TCN-2024-007``."""
    return f"{prefix}-{year:04d}-{number:03d}"


class TripReferenceAllocator(ABC):
    """Strategy for minting trip references."""

    def __init__(self, prefix: str = "TCN") -> None:
        self.prefix = prefix

    @abstractmethod
    def next_number(self) -> int:
        """Return the next number in ``[0, REFERENCE_SPACE)``."""

    def allocate(self, year: int) -> str:
        return format_trip_reference(self.prefix, year, self.next_number())


class RandomTripReferenceAllocator(TripReferenceAllocator):
    """Uniform random suffix, ~1/1000 collision chance per pair of trips.

    Parameters
    ----------
    prefix : str
        Reference prefix.
    rng : numpy.random.Generator, optional
        Source of randomness.  Pass a seeded generator for reproducible runs.
    """

    def __init__(self, prefix: str = "TCN", rng: np.random.Generator | None = None) -> None:
        super().__init__(prefix)
        self._rng = rng if rng is not None else np.random.default_rng()

    def next_number(self) -> int:
        return int(self._rng.integers(0, REFERENCE_SPACE))


class SequentialTripReferenceAllocator(TripReferenceAllocator):
    """Deterministic counter; wraps from 999 back to 000.

    Safe to share between threads.
    """

    def __init__(self, prefix: str = "TCN", start: int = 1) -> None:
        super().__init__(prefix)
        self._next = start % REFERENCE_SPACE
        self._lock = threading.Lock()

    def next_number(self) -> int:
        with self._lock:
            number = self._next
            self._next = (self._next + 1) % REFERENCE_SPACE
        return number

"""
Greedy best-fit allocation of piece lengths onto fixed length moldings.

A BinSet owns every stock unit (Bin) used so far. Pieces longer than the
stock are split into full bins plus one remainder, and each remainder goes
into the bin whose offcut fits it most tightly.

Packing quality depends on the caller feeding lengths longest first; the
core itself never sorts.
"""
import logging
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)


class CutError(Exception):
    """Base class for allocation errors."""


class InsufficientLength(CutError):
    """A bin does not have enough material left for the requested piece."""


class InvalidLength(CutError, ValueError):
    """A length can never be packed into bins of this stock size."""


def _check_length(length: int) -> None:
    if length < 0:
        raise InvalidLength(f"Piece length must not be negative, got {length}")


class Bin:
    """One fixed length molding and the pieces cut from it."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.pieces: List[int] = []

    def used_length(self) -> int:
        return sum(self.pieces)

    def remaining_length(self) -> int:
        return self.capacity - self.used_length()

    def cut(self, length: int) -> None:
        _check_length(length)
        if length > self.remaining_length():
            raise InsufficientLength(
                f"Cannot cut {length}mm, only {self.remaining_length()}mm left"
            )
        self.pieces.append(length)

    def __repr__(self):
        return f"Bin(capacity={self.capacity}, pieces={self.pieces})"

    def __str__(self):
        return f"Molding {{ length: {self.capacity}, pieces: {self.pieces} }}"


class BinSet:
    """Every molding used so far, all of the same stock length."""

    def __init__(self, fixed_length: int):
        if fixed_length <= 0:
            raise InvalidLength(f"Stock length must be positive, got {fixed_length}")
        self.fixed_length = fixed_length
        self.bins: List[Bin] = []

    def _new_bin(self) -> Bin:
        bin_ = Bin(self.fixed_length)
        self.bins.append(bin_)
        logger.debug(f"Opened bin {len(self.bins)} ({self.fixed_length}mm)")
        return bin_

    def allocate_full(self) -> None:
        """Use one whole molding."""
        self._new_bin().cut(self.fixed_length)

    def allocate_partial(self, length: int) -> None:
        """
        Cut a piece no longer than the stock.

        The piece goes into the bin with the smallest remaining length that
        still fits it; on equal remaining length the earliest bin wins. A new
        bin is opened when no existing one fits.
        """
        _check_length(length)
        if length > self.fixed_length:
            raise InvalidLength(
                f"Piece length {length}mm exceeds stock length {self.fixed_length}mm"
            )

        candidates = [i for i, b in enumerate(self.bins) if b.remaining_length() >= length]
        if candidates:
            # min() keeps the first of equal keys
            best = min(candidates, key=lambda i: self.bins[i].remaining_length())
            logger.debug(f"Best fit for {length}mm is bin {best + 1}")
            self.bins[best].cut(length)
        else:
            self._new_bin().cut(length)

    def add(self, length: int) -> None:
        """Distribute one requested length, which may exceed the stock."""
        _check_length(length)

        remaining = length
        while remaining >= self.fixed_length:
            self.allocate_full()
            remaining -= self.fixed_length
        if remaining > 0:
            self.allocate_partial(remaining)

    def extend(self, lengths: Iterable[int]) -> None:
        """Add lengths in the given order; nothing is added if any is invalid."""
        lengths = list(lengths)
        for length in lengths:
            _check_length(length)
        for length in lengths:
            self.add(length)

    def total_used(self) -> int:
        return sum(b.used_length() for b in self.bins)

    def total_waste(self) -> int:
        return sum(b.remaining_length() for b in self.bins)

    def __len__(self) -> int:
        return len(self.bins)

    def __iter__(self) -> Iterator[Bin]:
        return iter(self.bins)

"""Fixed-width integer bitset helpers."""

from __future__ import annotations

from typing import Iterator, Set

# Width of every bitset; vertex ids live in [0, MAX_VERTICES).
MAX_VERTICES = 16


def popcount(bits: int) -> int:
    return bin(bits).count("1")


def _lsb_index(bit: int) -> int:
    return bit.bit_length() - 1


def iter_bits(bits: int) -> Iterator[int]:
    """Yield the indices of set bits, lowest first."""
    while bits:
        low = bits & -bits
        bits -= low
        yield _lsb_index(low)


def to_set(bits: int) -> Set[int]:
    return set(iter_bits(bits))


def prefix_mask(n: int) -> int:
    """Bitset with exactly the low n bits set."""
    return (1 << n) - 1


def is_prefix(bits: int) -> bool:
    """True when the set bits form a contiguous range starting at 0."""
    return bits & (bits + 1) == 0

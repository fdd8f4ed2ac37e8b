"""graph6 codec for graphs of at most MAX_VERTICES vertices.

The first character holds the order n as ``ord(c) - 63``. The remaining
characters hold the upper triangle of the adjacency matrix six bits at a
time, most significant bit first, visiting pairs column by column:
(0,1), (0,2), (1,2), (0,3), ...
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .bitset import MAX_VERTICES, popcount
from .errors import Graph6DecodeError

logger = logging.getLogger(__name__)

HEADER = ">>graph6<<"
_OFFSET = 63
_MAX_CHAR = 126


def strip_header(text: str) -> str:
    """Remove surrounding whitespace and an optional '>>graph6<<' header."""
    s = text.strip()
    if s.startswith(HEADER):
        s = s[len(HEADER) :].strip()
    return s


def data_length(n: int) -> int:
    """Number of data characters that follow the order character."""
    return (n * (n - 1) // 2 + 5) // 6


def decode(text: str) -> Tuple[int, List[int]]:
    """Return (n, rows) where rows[u] is the neighbor bitset of vertex u.

    rows always has MAX_VERTICES entries; rows at or beyond n are empty.
    """
    if not isinstance(text, str):
        raise TypeError(f"graph6 text must be str, not {type(text).__name__}")
    s = strip_header(text)
    if not s:
        raise Graph6DecodeError("empty graph6 string")
    for pos, ch in enumerate(s):
        if not _OFFSET <= ord(ch) <= _MAX_CHAR:
            logger.debug("Rejecting graph6 %r: bad character at %d", text, pos)
            raise Graph6DecodeError(
                f"character {ch!r} at position {pos} is outside the graph6 range '?'..'~'"
            )

    n = ord(s[0]) - _OFFSET
    if n > MAX_VERTICES:
        logger.debug("Rejecting graph6 %r: order %d", text, n)
        raise Graph6DecodeError(f"graph6 declares {n} vertices, at most {MAX_VERTICES} are supported")
    expected = data_length(n)
    got = len(s) - 1
    if got < expected:
        logger.debug("Rejecting graph6 %r: %d of %d data characters", text, got, expected)
        raise Graph6DecodeError(f"graph6 for {n} vertices needs {expected} data characters, got {got}")
    if got > expected:
        logger.debug("Rejecting graph6 %r: %d of %d data characters", text, got, expected)
        raise Graph6DecodeError(f"graph6 for {n} vertices has {got - expected} trailing characters")

    rows = [0] * MAX_VERTICES
    k = 0
    c = 0
    i = 1
    for v in range(1, n):
        for u in range(v):
            if not k:
                c = ord(s[i]) - _OFFSET
                i += 1
                k = 6
            k -= 1
            if c & (1 << k):
                rows[u] |= 1 << v
                rows[v] |= 1 << u

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Decoded graph6 %r: n=%d edges=%d", s, n, sum(popcount(r) for r in rows) // 2)
    return n, rows


def encode(n: int, rows: Sequence[int]) -> str:
    """Encode the graph on vertices [0, n) given by neighbor bitsets."""
    if not 0 <= n <= MAX_VERTICES:
        raise ValueError(f"order must be in [0, {MAX_VERTICES}], got {n}")
    out = [chr(n + _OFFSET)]
    c = 0
    k = 6
    for v in range(1, n):
        for u in range(v):
            k -= 1
            if rows[u] >> v & 1:
                c |= 1 << k
            if not k:
                out.append(chr(c + _OFFSET))
                c = 0
                k = 6
    if k < 6:
        out.append(chr(c + _OFFSET))
    return "".join(out)

"""Bit-packed adjacency matrix for small undirected simple graphs."""

from __future__ import annotations

import logging
import operator
from typing import Iterable, List, Optional, Set, Tuple

from .bitset import MAX_VERTICES, is_prefix, iter_bits, popcount, prefix_mask, to_set
from .config import GraphOptions
from .errors import GraphStateError, InvalidVertexError
from .graph6 import decode, encode

logger = logging.getLogger(__name__)


def _check_vertex(vertex) -> int:
    if isinstance(vertex, bool):
        raise TypeError("vertex must be an int, not bool")
    try:
        v = operator.index(vertex)
    except TypeError:
        raise TypeError(f"vertex must be an int, not {type(vertex).__name__}") from None
    if not 0 <= v < MAX_VERTICES:
        logger.debug("Rejecting vertex %d outside [0, %d)", v, MAX_VERTICES)
        raise InvalidVertexError(v, f"must be in [0, {MAX_VERTICES})")
    return v


class AdjacencyMatrix:
    """Undirected simple graph on at most MAX_VERTICES vertices.

    ``present_vertices`` is a bitset of existing vertex ids and row u of the
    adjacency holds the neighbors of u as a bitset. Rows are kept symmetric,
    never contain their own vertex, and only reference present vertices
    (unless ``strict_edges`` is turned off, which allows edges to absent
    vertices).

    Instances are not thread-safe; share one across threads only behind a
    lock.
    """

    def __init__(self, text: Optional[str] = None, options: Optional[GraphOptions] = None) -> None:
        self.options = options if options is not None else GraphOptions()
        if text is None:
            text = self.options.default_text
        n, rows = decode(text)
        self._rows: List[int] = rows
        self._vertices = prefix_mask(n)

    @property
    def present_vertices(self) -> int:
        return self._vertices

    @property
    def adjacency(self) -> Tuple[int, ...]:
        return tuple(self._rows)

    def copy(self) -> "AdjacencyMatrix":
        g = type(self).__new__(type(self))
        g.options = self.options
        g._rows = list(self._rows)
        g._vertices = self._vertices
        return g

    # Queries

    def number_of_vertices(self) -> int:
        return popcount(self._vertices)

    def vertices(self) -> Set[int]:
        return to_set(self._vertices)

    def has_vertex(self, v: int) -> bool:
        v = _check_vertex(v)
        return bool(self._vertices >> v & 1)

    def vertex_degree(self, v: int) -> int:
        """Degree of v; 0 for a vertex that is not present."""
        v = _check_vertex(v)
        return popcount(self._rows[v])

    def vertex_neighbors(self, v: int) -> Set[int]:
        v = _check_vertex(v)
        return to_set(self._rows[v])

    def is_edge(self, u: int, v: int) -> bool:
        u = _check_vertex(u)
        v = _check_vertex(v)
        return bool(self._rows[u] >> v & 1)

    def number_of_edges(self) -> int:
        return sum(popcount(row) for row in self._rows) // 2

    def edges(self) -> Set[Tuple[int, int]]:
        """Every edge once, as (lesser, greater)."""
        out: Set[Tuple[int, int]] = set()
        for u, row in enumerate(self._rows):
            for v in iter_bits(row):
                out.add((u, v) if u < v else (v, u))
        return out

    # Mutations

    def add_vertex(self, v: int) -> bool:
        v = _check_vertex(v)
        bit = 1 << v
        changed = not self._vertices & bit
        self._vertices |= bit
        if self.options.legacy_returns:
            return False
        return changed

    def delete_vertex(self, v: int) -> bool:
        """Remove v and every edge incident to it."""
        v = _check_vertex(v)
        bit = 1 << v
        changed = bool(self._vertices & bit)
        mask = ~bit
        self._vertices &= mask
        self._rows[v] = 0
        for i in range(MAX_VERTICES):
            self._rows[i] &= mask
        if self.options.legacy_returns:
            return True
        return changed

    def add_edge(self, u: int, v: int) -> bool:
        """Insert edge {u, v}. A self-loop request leaves the graph unchanged."""
        u = _check_vertex(u)
        v = _check_vertex(v)
        if u == v:
            return self.options.legacy_returns
        if self.options.strict_edges:
            for w in (u, v):
                if not self._vertices >> w & 1:
                    logger.debug("Rejecting edge (%d, %d): vertex %d not present", u, v, w)
                    raise InvalidVertexError(w, "not a present vertex")
        changed = not self._rows[u] >> v & 1
        self._rows[u] |= 1 << v
        self._rows[v] |= 1 << u
        if self.options.legacy_returns:
            return True
        return changed

    def delete_edge(self, u: int, v: int) -> bool:
        u = _check_vertex(u)
        v = _check_vertex(v)
        changed = bool(self._rows[u] >> v & 1)
        self._rows[u] &= ~(1 << v)
        self._rows[v] &= ~(1 << u)
        if self.options.legacy_returns:
            return True
        return changed

    def add_edges(self, pairs: Iterable[Tuple[int, int]]) -> None:
        for u, v in pairs:
            self.add_edge(u, v)

    # Predicates

    def require_contiguous(self, what: str = "this operation") -> int:
        """Return n when the present vertices are exactly 0..n-1, else raise GraphStateError."""
        if not is_prefix(self._vertices):
            raise GraphStateError(
                f"{what} needs vertices 0..n-1 with no gaps, present vertices are {sorted(self.vertices())}"
            )
        return popcount(self._vertices)

    def is_complete_bipartite(self) -> bool:
        """Check whether the graph is complete bipartite.

        The neighbors of vertex 0 form one side and everything else the
        other: each side must be independent and every cross pair an edge.
        Graphs with at most one vertex, and edgeless graphs, count as complete
        bipartite. Raises GraphStateError when the present vertices are not
        exactly 0..n-1.
        """
        n = self.require_contiguous("is_complete_bipartite")
        full = prefix_mask(n)
        side_a = self._rows[0] & full
        side_b = full & ~side_a
        for u in iter_bits(side_a):
            if self._rows[u] & full != side_b:
                return False
        for u in iter_bits(side_b):
            if self._rows[u] & full != side_a:
                return False
        return True

    def to_graph6(self) -> str:
        n = self.require_contiguous("to_graph6")
        return encode(n, self._rows)

    # Python protocol

    def __len__(self) -> int:
        return self.number_of_vertices()

    def __contains__(self, v) -> bool:
        if isinstance(v, bool):
            return False
        try:
            v = operator.index(v)
        except TypeError:
            return False
        return 0 <= v < MAX_VERTICES and bool(self._vertices >> v & 1)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AdjacencyMatrix):
            return NotImplemented
        return self._vertices == other._vertices and self._rows == other._rows

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"AdjacencyMatrix(vertices={sorted(self.vertices())}, edges={sorted(self.edges())})"

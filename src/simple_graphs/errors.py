"""Exceptions raised by simple_graphs."""

from __future__ import annotations


class SimpleGraphError(Exception):
    pass


class Graph6DecodeError(SimpleGraphError, ValueError):
    """The text is not a graph6 encoding this package can hold."""


class InvalidVertexError(SimpleGraphError, ValueError, IndexError):
    """A vertex id is out of range, or names a vertex that is not present."""

    def __init__(self, vertex: int, reason: str) -> None:
        super().__init__(f"invalid vertex {vertex!r}: {reason}")
        self.vertex = vertex


class GraphStateError(SimpleGraphError, RuntimeError):
    """The graph's current shape does not meet an operation's precondition."""

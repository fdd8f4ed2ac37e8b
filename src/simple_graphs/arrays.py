"""numpy views of an AdjacencyMatrix."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .adjacency import AdjacencyMatrix
from .bitset import MAX_VERTICES
from .config import GraphOptions


def to_numpy(graph: AdjacencyMatrix, dtype=np.uint8) -> np.ndarray:
    """Dense (n, n) 0/1 adjacency matrix of a graph on vertices 0..n-1."""
    n = graph.require_contiguous("to_numpy")
    mat = np.zeros((n, n), dtype=dtype)
    for u, v in graph.edges():
        if u < n and v < n:
            mat[u, v] = 1
            mat[v, u] = 1
    return mat


def from_numpy(matrix, options: Optional[GraphOptions] = None) -> AdjacencyMatrix:
    """Build a graph from a square, symmetric, loop-free 0/1 matrix."""
    mat = np.asarray(matrix)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError(f"adjacency matrix must be square, got shape {mat.shape}")
    n = mat.shape[0]
    if n > MAX_VERTICES:
        raise ValueError(f"adjacency matrix has {n} rows, at most {MAX_VERTICES} are supported")
    nz = mat != 0
    if not np.array_equal(nz, nz.T):
        raise ValueError("adjacency matrix must be symmetric")
    if nz.diagonal().any():
        raise ValueError("adjacency matrix must have a zero diagonal")

    graph = AdjacencyMatrix("?", options=options)
    for v in range(n):
        graph.add_vertex(v)
    rows, cols = np.nonzero(np.triu(nz, k=1))
    graph.add_edges(zip(rows.tolist(), cols.tolist()))
    return graph

from .adjacency import AdjacencyMatrix
from .arrays import from_numpy, to_numpy
from .bitset import MAX_VERTICES
from .config import GraphOptions, load_options
from .errors import Graph6DecodeError, GraphStateError, InvalidVertexError, SimpleGraphError
from .graph6 import decode, encode

__all__ = [
    "AdjacencyMatrix",
    "MAX_VERTICES",
    "GraphOptions",
    "load_options",
    "decode",
    "encode",
    "SimpleGraphError",
    "Graph6DecodeError",
    "InvalidVertexError",
    "GraphStateError",
    "to_numpy",
    "from_numpy",
]

from __future__ import annotations

from dataclasses import dataclass
import os

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GraphOptions:
    # add_edge rejects endpoints that are not present vertices
    strict_edges: bool = True
    # mutations return the old constant values instead of "state changed"
    legacy_returns: bool = False
    # graph6 text decoded when AdjacencyMatrix() gets no text
    default_text: str = "@"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_options() -> GraphOptions:
    return GraphOptions(
        strict_edges=_env_flag("SIMPLE_GRAPHS_STRICT_EDGES", True),
        legacy_returns=_env_flag("SIMPLE_GRAPHS_LEGACY_RETURNS", False),
        default_text=os.getenv("SIMPLE_GRAPHS_DEFAULT_TEXT", "").strip() or "@",
    )

"""In-memory graph store and snapshot-based query engine."""

from graphctl.infrastructure.graph.engine import GraphEngine
from graphctl.infrastructure.graph.store import GraphStore

__all__ = ["GraphEngine", "GraphStore"]

"""graphctl: weighted graph store with traversal and shortest-path queries."""

__version__ = "0.1.0"

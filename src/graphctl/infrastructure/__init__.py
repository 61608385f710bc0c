"""Infrastructure layer: the mutable graph store and the query engine over it."""

"""Service layer: graph operations wrapped in the ServiceResult contract."""

"""BaseService: common foundation for graphctl services.

Services receive a :class:`GraphEngine` at construction time and never
cache anything derived from it; each call reads the current graph.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphctl.infrastructure.graph.engine import GraphEngine


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            def add_node(self, node_id: str) -> ServiceResult:
                if not self._engine.add_node(node_id):
                    ...
    """

    def __init__(self, engine: GraphEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> GraphEngine:
        return self._engine

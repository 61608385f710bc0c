"""Shared pytest fixtures and graph builders for graphctl tests."""

from __future__ import annotations

import os
from collections.abc import Generator, Iterable

import pytest
from click.testing import CliRunner

from graphctl.domain.models import Edge, GraphSnapshot, Node
from graphctl.infrastructure.graph.engine import GraphEngine
from graphctl.infrastructure.graph.store import GraphStore
from graphctl.services.graph import GraphService
from graphctl.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> GraphStore:
    return GraphStore()


@pytest.fixture
def engine(store: GraphStore) -> GraphEngine:
    """Engine wrapping the ``store`` fixture, so tests can inspect either."""
    return GraphEngine(store)


@pytest.fixture
def service(engine: GraphEngine) -> GraphService:
    return GraphService(engine)


@pytest.fixture(autouse=True)
def _no_config_discovery(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep a developer's own graphctl.toml or GRAPHCTL_* env out of tests."""
    for var in [v for v in os.environ if v.startswith("GRAPHCTL_")]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """A verbose CLI run enables telemetry for the rest of the thread."""
    yield
    disable_telemetry()


# ---------------------------------------------------------------------------
# Shared graph builders
# ---------------------------------------------------------------------------


def snapshot(
    node_ids: Iterable[str],
    edges: Iterable[tuple[str, str, float] | tuple[str, str, float, bool]] = (),
) -> GraphSnapshot:
    """Build a snapshot from ids and ``(start, end, weight[, directed])`` tuples."""
    return GraphSnapshot(
        nodes=tuple(Node(nid) for nid in node_ids),
        edges=tuple(
            Edge(e[0], e[1], weight=e[2], directed=len(e) > 3 and e[3])  # type: ignore[misc]
            for e in edges
        ),
    )


def build(
    engine: GraphEngine,
    node_ids: Iterable[str],
    edges: Iterable[tuple[str, str, float] | tuple[str, str, float, bool]] = (),
) -> GraphEngine:
    """Populate *engine*, asserting every mutation succeeds."""
    for nid in node_ids:
        assert engine.add_node(nid), nid
    for e in edges:
        directed = e[3] if len(e) > 3 else False  # type: ignore[misc]
        assert engine.add_edge(e[0], e[1], e[2], directed), e
    return engine

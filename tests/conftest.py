from __future__ import annotations

from pathlib import Path

import pytest

from trains.config import reset_config
from trains.domain.models import Edge
from trains.graph import GraphStore, RouteEngine

SAMPLE_TOKENS = "AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7"


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_edges() -> list[Edge]:
    return [
        Edge("A", "B", 5),
        Edge("B", "C", 4),
        Edge("C", "D", 8),
        Edge("D", "C", 8),
        Edge("D", "E", 6),
        Edge("A", "D", 5),
        Edge("C", "E", 2),
        Edge("E", "B", 3),
        Edge("A", "E", 7),
    ]


@pytest.fixture
def engine(sample_edges) -> RouteEngine:
    return RouteEngine(GraphStore.build(sample_edges))


@pytest.fixture
def routes_file(tmp_path) -> Path:
    path = tmp_path / "routes.txt"
    path.write_text(SAMPLE_TOKENS + "\n", encoding="utf-8")
    return path

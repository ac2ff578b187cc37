"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from flowbuilder.main import app
from flowbuilder.models import GraphEdge, GraphNode

NodeFactory = Callable[..., GraphNode]


@pytest.fixture
def make_node() -> NodeFactory:
    """Build a live node; the id doubles as the label unless one is given."""

    def _make(
        node_id: str,
        node_type: str,
        x: float = 0,
        y: float = 0,
        label: str | None = None,
        **data: Any,
    ) -> GraphNode:
        return GraphNode(
            id=node_id,
            type=node_type,
            label=label or node_id,
            position={"x": x, "y": y},
            data=data,
        )

    return _make


@pytest.fixture
def make_edge() -> Callable[..., GraphEdge]:
    def _make(source: str, target: str, label: str | None = None) -> GraphEdge:
        return GraphEdge(id=f"edge-{source}-{target}", source=source, target=target, label=label)

    return _make


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

"""Conversion between the live pipeline graph and its persisted definition.

Pipelines persist order, not layout. Exporting sorts nodes into visual order
and drops every edge; loading lays the steps out in a single column and
regenerates the sequential edges. Step ids, types, labels and payloads
survive a round trip, while user-chosen positions and hand-drawn edges do
not. That loss is inherent to the ordered-list format.
"""

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any

from flowbuilder.models.graph import GraphEdge, GraphNode, LiveGraph, Position
from flowbuilder.models.pipeline import PipelineDefinition, PipelineStep

# Nodes whose vertical positions differ by less than this are on the same row
ROW_TOLERANCE = 50

LAYOUT_X = 250
LAYOUT_Y_ORIGIN = 100
LAYOUT_Y_SPACING = 150

# Payload keys copied into named step fields when truthy
NAMED_STEP_FIELDS = (
    "connector",
    "config",
    "transform",
    "filter",
    "aggregate",
    "agentId",
    "operation",
    "collectionId",
    "outputVariable",
)


def sequential_edge_id(source: str, target: str) -> str:
    return f"edge-{source}-{target}"


def _compare_visual(a: GraphNode, b: GraphNode) -> float:
    if abs(a.position.y - b.position.y) < ROW_TOLERANCE:
        return a.position.x - b.position.x
    return a.position.y - b.position.y


def visual_order(nodes: Iterable[GraphNode]) -> list[GraphNode]:
    """Sort nodes top to bottom, reading nodes on roughly the same row left to right."""
    return sorted(nodes, key=cmp_to_key(_compare_visual))


def _to_step(node: GraphNode) -> PipelineStep:
    payload = node.data.to_payload()
    named = {key: payload[key] for key in NAMED_STEP_FIELDS if payload.get(key)}
    return PipelineStep(
        id=node.id,
        type=node.type,
        label=node.label or node.type,
        data=payload,
        **named,
    )


def to_definition(
    nodes: Iterable[GraphNode],
    edges: Iterable[GraphEdge] | None = None,
) -> PipelineDefinition:
    """Convert live pipeline nodes into a PipelineDefinition.

    Args:
        nodes: The live nodes, in any order.
        edges: Accepted for symmetry with the workflow converter and ignored;
            step order comes from node positions alone.

    Returns:
        PipelineDefinition with one step per node, in visual order.
    """
    return PipelineDefinition(steps=[_to_step(node) for node in visual_order(nodes)])


def _step_payload(step: PipelineStep) -> dict[str, Any]:
    payload: dict[str, Any] = {
        key: value for key, value in step.named_fields().items() if value
    }
    payload.update(step.data or {})
    return payload


def to_graph(definition: PipelineDefinition) -> LiveGraph:
    """Lay out a PipelineDefinition as a vertical chain of nodes."""
    nodes = [
        GraphNode(
            id=step.id,
            type=step.type,
            label=step.label,
            position=Position(x=LAYOUT_X, y=LAYOUT_Y_ORIGIN + index * LAYOUT_Y_SPACING),
            data=_step_payload(step),
        )
        for index, step in enumerate(definition.steps)
    ]

    edges = [
        GraphEdge(
            id=sequential_edge_id(source.id, target.id),
            source=source.id,
            target=target.id,
        )
        for source, target in zip(nodes, nodes[1:])
    ]

    return LiveGraph(nodes=nodes, edges=edges)

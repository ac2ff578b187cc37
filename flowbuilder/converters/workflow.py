"""Conversion between the live workflow graph and its persisted definition.

Both directions copy ids, types, labels, positions and edges as-is, so a
round trip is lossless for content and layout alike.
"""

from collections.abc import Iterable

from flowbuilder.models.graph import GraphEdge, GraphNode, LiveGraph
from flowbuilder.models.workflow import WorkflowDefinition, WorkflowEdge, WorkflowNode


def to_definition(nodes: Iterable[GraphNode], edges: Iterable[GraphEdge]) -> WorkflowDefinition:
    """Convert live nodes and edges into a WorkflowDefinition."""
    return WorkflowDefinition(
        nodes=[
            WorkflowNode(
                id=node.id,
                type=node.type,
                label=node.label or node.type,
                position=node.position.model_copy(),
                data=node.data.to_payload(),
            )
            for node in nodes
        ],
        edges=[
            WorkflowEdge(
                id=edge.id,
                source=edge.source,
                target=edge.target,
                label=edge.label,
            )
            for edge in edges
        ],
    )


def to_graph(definition: WorkflowDefinition) -> LiveGraph:
    """Rebuild the live graph from a WorkflowDefinition, positions included."""
    return LiveGraph(
        nodes=[
            GraphNode(
                id=node.id,
                type=node.type,
                label=node.label,
                position=node.position.model_copy(),
                data=dict(node.data),
            )
            for node in definition.nodes
        ],
        edges=[
            GraphEdge(
                id=edge.id,
                source=edge.source,
                target=edge.target,
                label=edge.label,
            )
            for edge in definition.edges
        ],
    )

"""Structural rules for workflow graphs.

Every rule runs on every call and contributes its own messages, so the
caller sees all problems at once.
"""

from collections.abc import Callable, Sequence

from flowbuilder.converters import workflow as workflow_converter
from flowbuilder.models.graph import GraphEdge, GraphNode
from flowbuilder.models.validation import ValidationResult
from flowbuilder.models.workflow import WorkflowDefinition

WorkflowRule = Callable[[Sequence[GraphNode], Sequence[GraphEdge]], list[str]]

# Exempt from the connectivity check
TERMINAL_TYPES = frozenset({"start", "end"})


def check_start_node(nodes: Sequence[GraphNode], edges: Sequence[GraphEdge]) -> list[str]:
    """Exactly one start node must exist."""
    start_count = sum(1 for node in nodes if node.type == "start")
    if start_count == 0:
        return ["Workflow must have at least one start node"]
    if start_count > 1:
        return ["Workflow can only have one start node"]
    return []


def check_end_node(nodes: Sequence[GraphNode], edges: Sequence[GraphEdge]) -> list[str]:
    if not any(node.type == "end" for node in nodes):
        return ["Workflow must have at least one end node"]
    return []


def check_connected(nodes: Sequence[GraphNode], edges: Sequence[GraphEdge]) -> list[str]:
    """Every node other than start/end must touch at least one edge.

    Start and end nodes are exempt even when they have no edges at all.
    """
    connected: set[str] = set()
    for edge in edges:
        connected.add(edge.source)
        connected.add(edge.target)

    return [
        f'Node "{node.label}" is not connected'
        for node in nodes
        if node.type not in TERMINAL_TYPES and node.id not in connected
    ]


def check_no_self_loops(nodes: Sequence[GraphNode], edges: Sequence[GraphEdge]) -> list[str]:
    return [
        f'Node "{edge.source}" cannot connect to itself'
        for edge in edges
        if edge.source == edge.target
    ]


def check_agents_selected(nodes: Sequence[GraphNode], edges: Sequence[GraphEdge]) -> list[str]:
    return [
        f'Agent node "{node.label}" must have an agent selected'
        for node in nodes
        if node.type == "agent" and not node.data.get("agentId")
    ]


def check_conditions_defined(
    nodes: Sequence[GraphNode], edges: Sequence[GraphEdge]
) -> list[str]:
    return [
        f'Condition node "{node.label}" must have a condition defined'
        for node in nodes
        if node.type == "condition" and not node.data.get("condition")
    ]


WORKFLOW_RULES: tuple[WorkflowRule, ...] = (
    check_start_node,
    check_end_node,
    check_connected,
    check_no_self_loops,
    check_agents_selected,
    check_conditions_defined,
)


def validate_workflow(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> ValidationResult:
    """Run every workflow rule over a live graph.

    Args:
        nodes: Live workflow nodes.
        edges: Live workflow edges.

    Returns:
        ValidationResult listing every violation found.
    """
    errors: list[str] = []
    for rule in WORKFLOW_RULES:
        errors.extend(rule(nodes, edges))
    return ValidationResult.from_errors(errors)


def validate_workflow_definition(definition: WorkflowDefinition) -> ValidationResult:
    """Validate a persisted WorkflowDefinition."""
    graph = workflow_converter.to_graph(definition)
    return validate_workflow(graph.nodes, graph.edges)

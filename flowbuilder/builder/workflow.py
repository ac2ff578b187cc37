"""Builder for branching workflows.

Edges exist only where the user drew them; nothing is auto-connected.
"""

from flowbuilder.builder.base import GraphBuilder
from flowbuilder.converters import workflow as workflow_converter
from flowbuilder.models.graph import GraphEdge, GraphNode, LiveGraph, Position
from flowbuilder.models.node_data import WORKFLOW_NODE_TYPES
from flowbuilder.models.validation import ValidationResult
from flowbuilder.models.workflow import WorkflowDefinition
from flowbuilder.validation.workflow import validate_workflow

INITIAL_START_NODE_ID = "start-1"


class WorkflowBuilder(GraphBuilder[WorkflowDefinition]):
    """Live workflow graph with node and edge selection.

    Example:
        builder = WorkflowBuilder()
        agent = builder.add_node("agent", {"x": 250, "y": 250})
        builder.connect(INITIAL_START_NODE_ID, agent.id)
        builder.update_node(agent.id, {"agentId": "agent-42"})
        result = builder.save(request_layer.update_workflow)
    """

    node_types = WORKFLOW_NODE_TYPES
    kind = "workflow"

    def initial_graph(self) -> LiveGraph:
        return LiveGraph(
            nodes=[
                GraphNode(
                    id=INITIAL_START_NODE_ID,
                    type="start",
                    label="Start",
                    position=Position(x=250, y=100),
                )
            ]
        )

    def to_definition(self, graph: LiveGraph) -> WorkflowDefinition:
        return workflow_converter.to_definition(graph.nodes, graph.edges)

    def to_graph(self, definition: WorkflowDefinition) -> LiveGraph:
        return workflow_converter.to_graph(definition)

    def check(self, graph: LiveGraph) -> ValidationResult:
        return validate_workflow(graph.nodes, graph.edges)

    # ==================== Selection ====================

    @property
    def selected_edge(self) -> GraphEdge | None:
        if self._selected_edge_id is None:
            return None
        return self._edges.get(self._selected_edge_id)

    def _clear_selection(self) -> None:
        super()._clear_selection()
        self._selected_edge_id = None

    def set_selected_node(self, node_id: str | None) -> None:
        """Select a node; any selected edge is deselected."""
        self._selected_node_id = node_id
        self._selected_edge_id = None

    def set_selected_edge(self, edge_id: str | None) -> None:
        """Select an edge; any selected node is deselected."""
        self._selected_edge_id = edge_id
        self._selected_node_id = None

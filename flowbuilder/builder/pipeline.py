"""Builder for linear pipelines.

Whenever the node list changes, consecutive nodes in array order are
chained with an edge. The chain is additive: existing edges are never
removed, and a chain edge the user deleted comes back on the next change.

Chaining follows array order while export follows visual order (see
``flowbuilder.converters.pipeline.visual_order``). The two agree as long
as nodes are added in the order they are laid out; when they diverge, the
exported step order is the visual one.
"""

import logging

from flowbuilder.builder.base import GraphBuilder
from flowbuilder.converters import pipeline as pipeline_converter
from flowbuilder.models.graph import GraphEdge, LiveGraph
from flowbuilder.models.node_data import PIPELINE_STEP_TYPES
from flowbuilder.models.pipeline import PipelineDefinition
from flowbuilder.models.validation import ValidationResult
from flowbuilder.validation.pipeline import validate_pipeline

logger = logging.getLogger(__name__)


class PipelineBuilder(GraphBuilder[PipelineDefinition]):
    """Live pipeline graph, auto-chained in array order."""

    node_types = PIPELINE_STEP_TYPES
    kind = "pipeline"

    def to_definition(self, graph: LiveGraph) -> PipelineDefinition:
        return pipeline_converter.to_definition(graph.nodes, graph.edges)

    def to_graph(self, definition: PipelineDefinition) -> LiveGraph:
        return pipeline_converter.to_graph(definition)

    def check(self, graph: LiveGraph) -> ValidationResult:
        return validate_pipeline(graph.nodes)

    def _on_nodes_changed(self) -> None:
        self.chain()

    def chain(self) -> list[GraphEdge]:
        """Connect every array-adjacent pair of nodes that lacks an edge.

        Returns:
            The edges that were added.
        """
        node_ids = list(self._nodes)
        added: list[GraphEdge] = []
        for source, target in zip(node_ids, node_ids[1:]):
            if self.has_edge(source, target):
                continue
            edge = GraphEdge(
                id=self._allocate_edge_id(source, target),
                source=source,
                target=target,
            )
            self._edges[edge.id] = edge
            added.append(edge)

        if added:
            logger.debug(f"Auto-chained {len(added)} pipeline edge(s)")
        return added

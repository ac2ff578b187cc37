"""Structural rules for pipeline graphs.

Only nodes are checked. Edges in a pipeline are an editing aid and are never
persisted, so they cannot make a pipeline valid or invalid.
"""

from collections.abc import Callable, Sequence

from flowbuilder.converters import pipeline as pipeline_converter
from flowbuilder.models.graph import GraphNode
from flowbuilder.models.pipeline import PipelineDefinition
from flowbuilder.models.validation import ValidationResult

PipelineRule = Callable[[Sequence[GraphNode]], list[str]]

EMPTY_PIPELINE_ERROR = "Pipeline must have at least one step"


def check_has_connector(nodes: Sequence[GraphNode]) -> list[str]:
    """At least one step must be a connector, configured or not."""
    if not any(node.type == "connector" for node in nodes):
        return ["Pipeline must have at least one connector step"]
    return []


def check_connectors_selected(nodes: Sequence[GraphNode]) -> list[str]:
    return [
        f'Connector step "{node.label}" must have a connector type selected'
        for node in nodes
        if node.type == "connector" and not node.data.get("connector")
    ]


def check_agents_selected(nodes: Sequence[GraphNode]) -> list[str]:
    return [
        f'Agent step "{node.label}" must have an agent selected'
        for node in nodes
        if node.type == "agent" and not node.data.get("agentId")
    ]


def check_collections_selected(nodes: Sequence[GraphNode]) -> list[str]:
    return [
        f'Vector step "{node.label}" must have a collection selected'
        for node in nodes
        if node.type == "vector" and not node.data.get("collectionId")
    ]


PIPELINE_RULES: tuple[PipelineRule, ...] = (
    check_has_connector,
    check_connectors_selected,
    check_agents_selected,
    check_collections_selected,
)


def validate_pipeline(nodes: Sequence[GraphNode]) -> ValidationResult:
    """Run every pipeline rule over the live nodes.

    An empty pipeline short-circuits with a single error; otherwise every
    rule contributes its messages.
    """
    if not nodes:
        return ValidationResult(valid=False, errors=[EMPTY_PIPELINE_ERROR])

    errors: list[str] = []
    for rule in PIPELINE_RULES:
        errors.extend(rule(nodes))
    return ValidationResult.from_errors(errors)


def validate_pipeline_definition(definition: PipelineDefinition) -> ValidationResult:
    """Validate a persisted PipelineDefinition."""
    return validate_pipeline(pipeline_converter.to_graph(definition).nodes)

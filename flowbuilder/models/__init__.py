"""Pydantic models for the workflow and pipeline builders."""

from flowbuilder.models.graph import (
    EdgeAddChange,
    EdgeChange,
    EdgeRemoveChange,
    EdgeSelectChange,
    GraphEdge,
    GraphNode,
    LiveGraph,
    NodeAddChange,
    NodeChange,
    NodeDimensionsChange,
    NodePositionChange,
    NodeRemoveChange,
    NodeSelectChange,
    Position,
)
from flowbuilder.models.node_data import (
    NODE_DATA_MODELS,
    PIPELINE_STEP_TYPES,
    WORKFLOW_NODE_TYPES,
    AgentNodeData,
    AggregateNodeData,
    ConditionNodeData,
    ConnectorNodeData,
    DelayNodeData,
    EndNodeData,
    FilterNodeData,
    NodeData,
    StartNodeData,
    TransformNodeData,
    VectorNodeData,
    build_node_data,
    default_label,
)
from flowbuilder.models.pipeline import PipelineDefinition, PipelineStep
from flowbuilder.models.validation import ValidationResult
from flowbuilder.models.workflow import WorkflowDefinition, WorkflowEdge, WorkflowNode

__all__ = [
    # Live graph
    "Position",
    "GraphNode",
    "GraphEdge",
    "LiveGraph",
    # Node payloads
    "NodeData",
    "StartNodeData",
    "EndNodeData",
    "AgentNodeData",
    "ConditionNodeData",
    "DelayNodeData",
    "TransformNodeData",
    "ConnectorNodeData",
    "FilterNodeData",
    "AggregateNodeData",
    "VectorNodeData",
    "NODE_DATA_MODELS",
    "WORKFLOW_NODE_TYPES",
    "PIPELINE_STEP_TYPES",
    "build_node_data",
    "default_label",
    # Editing-surface changes
    "NodeChange",
    "NodePositionChange",
    "NodeSelectChange",
    "NodeDimensionsChange",
    "NodeRemoveChange",
    "NodeAddChange",
    "EdgeChange",
    "EdgeSelectChange",
    "EdgeRemoveChange",
    "EdgeAddChange",
    # Definitions
    "WorkflowDefinition",
    "WorkflowNode",
    "WorkflowEdge",
    "PipelineDefinition",
    "PipelineStep",
    # Validation
    "ValidationResult",
]

"""Interactive builders holding the live workflow and pipeline graphs."""

from flowbuilder.builder.base import GraphBuilder, SaveResult
from flowbuilder.builder.pipeline import PipelineBuilder
from flowbuilder.builder.workflow import INITIAL_START_NODE_ID, WorkflowBuilder

__all__ = [
    "GraphBuilder",
    "SaveResult",
    "PipelineBuilder",
    "WorkflowBuilder",
    "INITIAL_START_NODE_ID",
]

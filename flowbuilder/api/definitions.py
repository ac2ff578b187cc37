"""Stateless conversion and validation routes.

Nothing here persists or executes a definition; the routes only expose the
converters and rule sets to clients that cannot run them in-process.
"""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from flowbuilder.converters import pipeline as pipeline_converter
from flowbuilder.converters import workflow as workflow_converter
from flowbuilder.models import LiveGraph, PipelineDefinition, ValidationResult, WorkflowDefinition
from flowbuilder.validation import validate_pipeline_definition, validate_workflow_definition

logger = logging.getLogger(__name__)

router = APIRouter()


def _format_errors(error: ValidationError) -> list[str]:
    """Flatten a pydantic error into "loc: msg" strings."""
    return [
        f"{'.'.join(str(x) for x in item['loc'])}: {item['msg']}" for item in error.errors()
    ]


# ==================== Workflows ====================


@router.post("/workflows/validate")
async def validate_workflow(definition: WorkflowDefinition) -> ValidationResult:
    """Check a workflow definition against the structural rules."""
    result = validate_workflow_definition(definition)
    if not result.valid:
        logger.info(f"Workflow failed validation with {len(result.errors)} error(s)")
    return result


@router.post("/workflows/graph")
async def workflow_to_graph(definition: WorkflowDefinition) -> LiveGraph:
    """Expand a workflow definition into the editable graph form."""
    return workflow_converter.to_graph(definition)


@router.post("/workflows/definition")
async def workflow_to_definition(graph: LiveGraph) -> WorkflowDefinition:
    """Collapse an editable graph into a workflow definition."""
    try:
        return workflow_converter.to_definition(graph.nodes, graph.edges)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=_format_errors(e)) from e


# ==================== Pipelines ====================


@router.post("/pipelines/validate")
async def validate_pipeline(definition: PipelineDefinition) -> ValidationResult:
    """Check a pipeline definition against the structural rules."""
    result = validate_pipeline_definition(definition)
    if not result.valid:
        logger.info(f"Pipeline failed validation with {len(result.errors)} error(s)")
    return result


@router.post("/pipelines/graph")
async def pipeline_to_graph(definition: PipelineDefinition) -> LiveGraph:
    """Lay out a pipeline definition as an editable vertical chain."""
    return pipeline_converter.to_graph(definition)


@router.post("/pipelines/definition")
async def pipeline_to_definition(graph: LiveGraph) -> PipelineDefinition:
    """Order an editable graph's nodes visually and emit the step list."""
    try:
        return pipeline_converter.to_definition(graph.nodes)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=_format_errors(e)) from e

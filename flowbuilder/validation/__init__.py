"""Structural validation for workflow and pipeline graphs."""

from flowbuilder.validation.pipeline import validate_pipeline, validate_pipeline_definition
from flowbuilder.validation.workflow import validate_workflow, validate_workflow_definition

__all__ = [
    "validate_pipeline",
    "validate_pipeline_definition",
    "validate_workflow",
    "validate_workflow_definition",
]

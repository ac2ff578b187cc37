"""Pydantic models for the persisted workflow definition.

Workflows store topology explicitly: node positions and edges are persisted
verbatim and array order carries no meaning.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from flowbuilder.models.graph import Position

WorkflowNodeType = Literal["start", "end", "agent", "condition", "delay", "transform"]


class WorkflowNode(BaseModel):
    """A persisted workflow node."""

    id: str
    type: WorkflowNodeType
    label: str
    position: Position
    data: dict[str, Any] = Field(default_factory=dict)


class WorkflowEdge(BaseModel):
    """A persisted workflow edge."""

    id: str
    source: str
    target: str
    label: str | None = None


class WorkflowDefinition(BaseModel):
    """The complete, UI-independent workflow definition."""

    nodes: list[WorkflowNode] = Field(default_factory=list)
    edges: list[WorkflowEdge] = Field(default_factory=list)

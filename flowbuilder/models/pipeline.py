"""Pydantic models for the persisted pipeline definition.

A pipeline is an ordered list of steps. There are no positions and no edges:
step ``i`` feeds step ``i + 1``.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

PipelineStepType = Literal["connector", "transform", "filter", "aggregate", "agent", "vector"]


class PipelineStep(BaseModel):
    """A single persisted pipeline step.

    The named optional fields mirror the step payload for the executor; the
    full payload is also kept in ``data`` for fields without a named slot.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: PipelineStepType
    label: str
    connector: Any = None
    config: Any = None
    transform: Any = None
    filter: Any = None
    aggregate: Any = None
    agent_id: Any = Field(default=None, alias="agentId")
    operation: Any = None
    collection_id: Any = Field(default=None, alias="collectionId")
    output_variable: Any = Field(default=None, alias="outputVariable")
    data: dict[str, Any] | None = None

    def named_fields(self) -> dict[str, Any]:
        """Named slots that are set, keyed by their persisted names."""
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"id", "type", "label", "data"},
        )


class PipelineDefinition(BaseModel):
    """The complete, UI-independent pipeline definition."""

    steps: list[PipelineStep] = Field(default_factory=list)

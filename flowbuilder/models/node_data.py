"""Type-specific node payloads.

Each node type owns one ``NodeData`` subclass declaring its named fields and
their defaults. Named fields accept any JSON value: editors write whatever
they parse into them, and the rule sets only test for presence. Keys a
subclass does not declare are kept as pass-through extras so payloads
written by newer editors survive a load/save cycle.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeData(BaseModel):
    """Base payload shared by every node type."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_payload(self) -> dict[str, Any]:
        """Dump the payload using its persisted (camelCase) keys, extras included."""
        return self.model_dump(by_alias=True)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a payload value by its persisted key."""
        return self.to_payload().get(key, default)


class StartNodeData(NodeData):
    """Entry point of a workflow."""


class EndNodeData(NodeData):
    """Terminal node of a workflow."""


class AgentNodeData(NodeData):
    """Invokes a configured agent."""

    agent_id: Any = Field(default=None, alias="agentId")


class ConditionNodeData(NodeData):
    """Branches on an expression."""

    condition: Any = None


class DelayNodeData(NodeData):
    """Pauses for ``delay`` milliseconds."""

    delay: Any = 1000


class TransformNodeData(NodeData):
    transform: Any = Field(default_factory=dict)


class ConnectorNodeData(NodeData):
    """Reads from or writes to an external connector."""

    connector: Any = None
    config: Any = Field(default_factory=dict)


class FilterNodeData(NodeData):
    filter: Any = Field(default_factory=dict)


class AggregateNodeData(NodeData):
    aggregate: Any = Field(default_factory=dict)


class VectorNodeData(NodeData):
    """Adds to or queries a vector collection."""

    operation: Any = "add"
    collection_id: Any = Field(default=None, alias="collectionId")


NODE_DATA_MODELS: dict[str, type[NodeData]] = {
    "start": StartNodeData,
    "end": EndNodeData,
    "agent": AgentNodeData,
    "condition": ConditionNodeData,
    "delay": DelayNodeData,
    "transform": TransformNodeData,
    "connector": ConnectorNodeData,
    "filter": FilterNodeData,
    "aggregate": AggregateNodeData,
    "vector": VectorNodeData,
}

WORKFLOW_NODE_TYPES = ("start", "end", "agent", "condition", "delay", "transform")
PIPELINE_STEP_TYPES = ("connector", "transform", "filter", "aggregate", "agent", "vector")


def node_data_model(node_type: str) -> type[NodeData]:
    """Return the payload class for a node type.

    Unknown types fall back to the bare ``NodeData`` which keeps every key
    as an extra.
    """
    return NODE_DATA_MODELS.get(node_type, NodeData)


def build_node_data(node_type: str, payload: dict[str, Any] | NodeData | None = None) -> NodeData:
    """Instantiate the typed payload for ``node_type``.

    With no payload this yields the default field table for the type.
    """
    model = node_data_model(node_type)
    if payload is None:
        return model()
    if isinstance(payload, NodeData):
        if type(payload) is model:
            return payload
        payload = payload.to_payload()
    return model.model_validate(payload)


def default_label(node_type: str) -> str:
    """Label given to a freshly created node ("agent" -> "Agent")."""
    return node_type[:1].upper() + node_type[1:]

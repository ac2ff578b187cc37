"""Pydantic models for the live (editable) graph.

Nodes and edges refer to each other by id only. The builders keep them in
id-keyed arenas and derive adjacency on demand.
"""

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializeAsAny,
    ValidationInfo,
    field_validator,
)

from flowbuilder.models.node_data import NodeData, build_node_data, default_label


class Position(BaseModel):
    """Layout coordinates of a node on the editing surface."""

    x: float
    y: float


class GraphNode(BaseModel):
    """A node in the live graph.

    ``data`` is re-typed from ``type`` on validation, so a plain dict payload
    becomes the matching ``NodeData`` subclass.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    label: str = Field(default="", validate_default=True)
    position: Position
    data: SerializeAsAny[NodeData] = Field(default_factory=NodeData, validate_default=True)
    selected: bool = False
    width: float | None = None
    height: float | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _type_data(cls, value: Any, info: ValidationInfo) -> NodeData:
        node_type = info.data.get("type", "")
        return build_node_data(node_type, value)

    @field_validator("label")
    @classmethod
    def _default_label(cls, value: str, info: ValidationInfo) -> str:
        return value or default_label(info.data.get("type", ""))


class GraphEdge(BaseModel):
    """A directed connection between two node ids."""

    id: str
    source: str
    target: str
    label: str | None = None
    selected: bool = False

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id


class LiveGraph(BaseModel):
    """Nodes and edges as held by a builder."""

    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)


# ==================== Editing-surface changes ====================


class NodePositionChange(BaseModel):
    type: Literal["position"] = "position"
    id: str
    position: Position | None = None
    dragging: bool = False


class NodeSelectChange(BaseModel):
    type: Literal["select"] = "select"
    id: str
    selected: bool


class NodeDimensionsChange(BaseModel):
    type: Literal["dimensions"] = "dimensions"
    id: str
    width: float
    height: float


class NodeRemoveChange(BaseModel):
    type: Literal["remove"] = "remove"
    id: str


class NodeAddChange(BaseModel):
    type: Literal["add"] = "add"
    item: GraphNode


NodeChange = Annotated[
    NodePositionChange | NodeSelectChange | NodeDimensionsChange | NodeRemoveChange | NodeAddChange,
    Field(discriminator="type"),
]


class EdgeSelectChange(BaseModel):
    type: Literal["select"] = "select"
    id: str
    selected: bool


class EdgeRemoveChange(BaseModel):
    type: Literal["remove"] = "remove"
    id: str


class EdgeAddChange(BaseModel):
    type: Literal["add"] = "add"
    item: GraphEdge


EdgeChange = Annotated[
    EdgeSelectChange | EdgeRemoveChange | EdgeAddChange,
    Field(discriminator="type"),
]

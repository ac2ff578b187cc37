"""Shared state machine for the interactive graph builders.

A builder exclusively owns one live graph: an id-keyed arena of nodes and
one of edges, both in insertion order. Every editing action runs to
completion synchronously and mutates the arenas in place. Converters and
validators only ever see copies handed out by ``snapshot``.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

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
from flowbuilder.models.node_data import build_node_data, default_label
from flowbuilder.models.validation import ValidationResult

logger = logging.getLogger(__name__)

DefinitionT = TypeVar("DefinitionT", bound=BaseModel)


@dataclass
class SaveResult(Generic[DefinitionT]):
    """Outcome of ``GraphBuilder.save`` or ``GraphBuilder.execute``.

    ``definition`` is None when validation failed and nothing was handed on.
    """

    validation: ValidationResult
    definition: DefinitionT | None = None


class GraphBuilder(Generic[DefinitionT]):
    """Base builder: live graph arenas, selection and the dirty flag.

    Subclasses declare the closed set of node types they accept, their
    initial snapshot and the conversion/validation pair for their semantics.
    """

    node_types: tuple[str, ...] = ()
    kind = "graph"

    def __init__(self) -> None:
        self._nodes: dict[str, GraphNode] = {}
        self._edges: dict[str, GraphEdge] = {}
        self._selected_node_id: str | None = None
        self._dirty = False
        self._counter = itertools.count(1)
        self._replace(self.initial_graph())

    # ==================== Semantics hooks ====================

    def initial_graph(self) -> LiveGraph:
        """Graph the builder starts from and returns to on ``reset``."""
        return LiveGraph()

    def to_definition(self, graph: LiveGraph) -> DefinitionT:
        raise NotImplementedError

    def to_graph(self, definition: DefinitionT) -> LiveGraph:
        raise NotImplementedError

    def check(self, graph: LiveGraph) -> ValidationResult:
        raise NotImplementedError

    def _on_nodes_changed(self) -> None:
        """Called after any change to the node list."""

    # ==================== State ====================

    @property
    def nodes(self) -> list[GraphNode]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[GraphEdge]:
        return list(self._edges.values())

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def selected_node(self) -> GraphNode | None:
        if self._selected_node_id is None:
            return None
        return self._nodes.get(self._selected_node_id)

    def get_node(self, node_id: str) -> GraphNode | None:
        return self._nodes.get(node_id)

    def get_edge(self, edge_id: str) -> GraphEdge | None:
        return self._edges.get(edge_id)

    def has_edge(self, source: str, target: str) -> bool:
        return any(e.source == source and e.target == target for e in self._edges.values())

    def incident_edges(self, node_id: str) -> list[GraphEdge]:
        return [edge for edge in self._edges.values() if edge.touches(node_id)]

    def snapshot(self) -> LiveGraph:
        """Deep copy of the live graph, safe to hand to collaborators."""
        return LiveGraph(nodes=self.nodes, edges=self.edges).model_copy(deep=True)

    def mark_dirty(self) -> None:
        self._dirty = True

    def mark_clean(self) -> None:
        self._dirty = False

    # ==================== Wholesale replacement ====================

    def set_nodes(self, nodes: Iterable[GraphNode]) -> None:
        """Replace the node list. Leaves the dirty flag alone."""
        self._nodes = {node.id: node for node in nodes}

    def set_edges(self, edges: Iterable[GraphEdge]) -> None:
        """Replace the edge list. Leaves the dirty flag alone."""
        self._edges = {edge.id: edge for edge in edges}

    def _replace(self, graph: LiveGraph) -> None:
        graph = graph.model_copy(deep=True)
        self.set_nodes(graph.nodes)
        self.set_edges(graph.edges)
        self._clear_selection()
        self._dirty = False

    def reset(self) -> None:
        """Return to the initial snapshot with no selection and no unsaved edits."""
        self._replace(self.initial_graph())
        logger.debug(f"Reset {self.kind} builder")

    def load(self, definition: DefinitionT | None) -> None:
        """Replace the live graph with a persisted definition.

        ``None`` means there is nothing to load and is equivalent to ``reset``.
        """
        if definition is None:
            self.reset()
            return
        self._replace(self.to_graph(definition))
        logger.debug(
            f"Loaded {self.kind} with {len(self._nodes)} node(s) and {len(self._edges)} edge(s)"
        )

    # ==================== Selection ====================

    def _clear_selection(self) -> None:
        self._selected_node_id = None

    def set_selected_node(self, node_id: str | None) -> None:
        self._selected_node_id = node_id

    # ==================== Editing actions ====================

    def _allocate_node_id(self, node_type: str) -> str:
        while True:
            node_id = f"{node_type}-{next(self._counter)}"
            if node_id not in self._nodes:
                return node_id

    def _allocate_edge_id(self, source: str, target: str) -> str:
        edge_id = f"edge-{source}-{target}"
        suffix = 1
        while edge_id in self._edges:
            suffix += 1
            edge_id = f"edge-{source}-{target}-{suffix}"
        return edge_id

    def add_node(self, node_type: str, position: Position | dict[str, float]) -> GraphNode:
        """Append a node of ``node_type`` with its default payload.

        Raises:
            ValueError: If ``node_type`` is not part of this builder's semantics.
        """
        if node_type not in self.node_types:
            raise ValueError(
                f"Unknown {self.kind} node type '{node_type}'. "
                f"Expected one of: {', '.join(self.node_types)}"
            )

        node = GraphNode(
            id=self._allocate_node_id(node_type),
            type=node_type,
            label=default_label(node_type),
            position=position,
            data=build_node_data(node_type),
        )
        self._nodes[node.id] = node
        self._dirty = True
        self._on_nodes_changed()
        logger.debug(f"Added {self.kind} node {node.id}")
        return node

    def delete_node(self, node_id: str) -> None:
        """Remove a node together with every edge touching it."""
        if self._nodes.pop(node_id, None) is None:
            logger.debug(f"Ignoring delete of unknown node {node_id}")
            return
        self._drop_incident_edges(node_id)
        self._dirty = True

    def _drop_incident_edges(self, node_id: str) -> None:
        self._edges = {
            edge_id: edge for edge_id, edge in self._edges.items() if not edge.touches(node_id)
        }

    def update_node(self, node_id: str, partial: dict[str, Any]) -> None:
        """Shallow-merge ``partial`` into a node's payload.

        A ``label`` key renames the node. Payloads loaded from older definitions
        may also carry their own ``label``; it is kept in step with the node.
        A ``None`` label is ignored since nodes always have one.
        Unknown ids are ignored: the editing surface may still send an edit
        for a node that was just deleted.
        """
        node = self._nodes.get(node_id)
        if node is None:
            logger.debug(f"Ignoring update of unknown node {node_id}")
            return

        partial = dict(partial)
        label = partial.pop("label", None)
        merged = {**node.data.to_payload(), **partial}
        if label is not None and "label" in merged:
            merged["label"] = label
        updates: dict[str, Any] = {"data": build_node_data(node.type, merged)}
        if label is not None:
            updates["label"] = label
        self._nodes[node_id] = node.model_copy(update=updates)
        self._dirty = True

    def connect(self, source: str, target: str, label: str | None = None) -> GraphEdge:
        """Add an edge from ``source`` to ``target``.

        Repeated connections between the same pair each get their own edge.
        """
        edge = GraphEdge(
            id=self._allocate_edge_id(source, target),
            source=source,
            target=target,
            label=label,
        )
        self._edges[edge.id] = edge
        self._dirty = True
        return edge

    def apply_node_changes(self, changes: Sequence[NodeChange]) -> None:
        """Apply a batch of changes reported by the editing surface."""
        for change in changes:
            if isinstance(change, NodeAddChange):
                self._nodes[change.item.id] = change.item
                continue
            if isinstance(change, NodeRemoveChange):
                if self._nodes.pop(change.id, None) is not None:
                    self._drop_incident_edges(change.id)
                continue

            node = self._nodes.get(change.id)
            if node is None:
                continue
            if isinstance(change, NodePositionChange):
                if change.position is not None:
                    self._nodes[node.id] = node.model_copy(update={"position": change.position})
            elif isinstance(change, NodeSelectChange):
                self._nodes[node.id] = node.model_copy(update={"selected": change.selected})
            elif isinstance(change, NodeDimensionsChange):
                self._nodes[node.id] = node.model_copy(
                    update={"width": change.width, "height": change.height}
                )

        self._dirty = True
        self._on_nodes_changed()

    def apply_edge_changes(self, changes: Sequence[EdgeChange]) -> None:
        """Apply a batch of edge changes reported by the editing surface."""
        for change in changes:
            if isinstance(change, EdgeAddChange):
                self._edges[change.item.id] = change.item
            elif isinstance(change, EdgeRemoveChange):
                self._edges.pop(change.id, None)
            elif isinstance(change, EdgeSelectChange):
                edge = self._edges.get(change.id)
                if edge is not None:
                    self._edges[edge.id] = edge.model_copy(update={"selected": change.selected})
        self._dirty = True

    # ==================== Export ====================

    def export(self) -> DefinitionT:
        """Convert the live graph into its persisted definition."""
        return self.to_definition(self.snapshot())

    def validate(self) -> ValidationResult:
        return self.check(self.snapshot())

    def _submit(self, handler: Callable[[DefinitionT], Any]) -> SaveResult[DefinitionT]:
        validation = self.validate()
        if not validation.valid:
            logger.info(
                f"Not submitting {self.kind}: {len(validation.errors)} validation error(s)"
            )
            return SaveResult(validation=validation)
        definition = self.export()
        handler(definition)
        return SaveResult(validation=validation, definition=definition)

    def save(self, persist: Callable[[DefinitionT], Any]) -> SaveResult[DefinitionT]:
        """Validate, convert and hand the definition to ``persist``.

        The builder is marked clean only once ``persist`` returns. Exceptions
        raised by ``persist`` propagate and leave the builder dirty.
        """
        result = self._submit(persist)
        if result.definition is not None:
            self.mark_clean()
        return result

    def execute(self, run: Callable[[DefinitionT], Any]) -> SaveResult[DefinitionT]:
        """Validate, convert and hand the definition to ``run``; dirty flag untouched."""
        return self._submit(run)

"""Tests for workflow validation rules."""

from flowbuilder.models import WorkflowDefinition
from flowbuilder.validation import validate_workflow, validate_workflow_definition
from flowbuilder.validation.workflow import check_connected, check_start_node


class TestStartAndEnd:
    """Tests for start/end node cardinality."""

    def test_start_and_end_without_edges_is_valid(self, make_node):
        # Start and end nodes are exempt from the connectivity check
        nodes = [make_node("s", "start"), make_node("e", "end")]
        result = validate_workflow(nodes, [])
        assert result.valid is True
        assert result.errors == []

    def test_two_start_nodes(self, make_node):
        nodes = [make_node("s1", "start"), make_node("s2", "start"), make_node("e", "end")]
        result = validate_workflow(nodes, [])
        assert result.valid is False
        assert result.errors == ["Workflow can only have one start node"]

    def test_missing_start_node(self, make_node):
        result = validate_workflow([make_node("e", "end")], [])
        assert result.errors == ["Workflow must have at least one start node"]

    def test_missing_end_node(self, make_node):
        result = validate_workflow([make_node("s", "start")], [])
        assert result.errors == ["Workflow must have at least one end node"]

    def test_empty_graph_reports_both(self):
        result = validate_workflow([], [])
        assert result.errors == [
            "Workflow must have at least one start node",
            "Workflow must have at least one end node",
        ]

    def test_rule_function_directly(self, make_node):
        assert check_start_node([make_node("s", "start")], []) == []


class TestConnectivity:
    """Tests for orphan detection and self-loops."""

    def test_orphan_reported_by_label(self, make_node, make_edge):
        nodes = [
            make_node("s", "start"),
            make_node("t", "transform", label="Reshape"),
            make_node("e", "end"),
        ]
        result = validate_workflow(nodes, [make_edge("s", "e")])
        assert result.errors == ['Node "Reshape" is not connected']

    def test_incoming_edge_counts_as_connected(self, make_node, make_edge):
        nodes = [make_node("s", "start"), make_node("d", "delay"), make_node("e", "end")]
        assert check_connected(nodes, [make_edge("s", "d")]) == []

    def test_self_loop(self, make_node, make_edge):
        nodes = [
            make_node("s", "start"),
            make_node("t", "transform"),
            make_node("e", "end"),
        ]
        edges = [make_edge("s", "t"), make_edge("t", "t"), make_edge("t", "e")]
        result = validate_workflow(nodes, edges)
        assert result.errors == ['Node "t" cannot connect to itself']


class TestNodeData:
    """Tests for type-specific required payload fields."""

    def test_agent_without_agent(self, make_node, make_edge):
        nodes = [
            make_node("s", "start"),
            make_node("a", "agent", label="Writer"),
            make_node("e", "end"),
        ]
        result = validate_workflow(nodes, [make_edge("s", "a"), make_edge("a", "e")])
        assert result.errors == ['Agent node "Writer" must have an agent selected']

    def test_empty_condition_counts_as_missing(self, make_node, make_edge):
        nodes = [
            make_node("s", "start"),
            make_node("c", "condition", label="Branch", condition=""),
            make_node("e", "end"),
        ]
        result = validate_workflow(nodes, [make_edge("s", "c"), make_edge("c", "e")])
        assert result.errors == ['Condition node "Branch" must have a condition defined']

    def test_all_violations_reported_together(self, make_node, make_edge):
        nodes = [
            make_node("s1", "start"),
            make_node("s2", "start"),
            make_node("a", "agent", label="Lonely"),
            make_node("c", "condition", label="Loop"),
        ]
        result = validate_workflow(nodes, [make_edge("c", "c")])
        assert result.valid is False
        assert result.errors == [
            "Workflow can only have one start node",
            "Workflow must have at least one end node",
            'Node "Lonely" is not connected',
            'Node "c" cannot connect to itself',
            'Agent node "Lonely" must have an agent selected',
            'Condition node "Loop" must have a condition defined',
        ]


class TestValidateDefinition:
    """Tests for validating persisted workflow definitions."""

    def test_valid_definition(self):
        definition = WorkflowDefinition.model_validate(
            {
                "nodes": [
                    {"id": "s", "type": "start", "label": "Start", "position": {"x": 0, "y": 0}},
                    {
                        "id": "a",
                        "type": "agent",
                        "label": "Agent",
                        "position": {"x": 0, "y": 100},
                        "data": {"agentId": "agent-7"},
                    },
                    {"id": "e", "type": "end", "label": "End", "position": {"x": 0, "y": 200}},
                ],
                "edges": [
                    {"id": "e1", "source": "s", "target": "a"},
                    {"id": "e2", "source": "a", "target": "e"},
                ],
            }
        )
        assert validate_workflow_definition(definition).valid is True

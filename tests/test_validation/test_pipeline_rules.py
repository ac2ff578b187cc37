"""Tests for pipeline validation rules."""

from flowbuilder.models import PipelineDefinition
from flowbuilder.validation import validate_pipeline, validate_pipeline_definition
from flowbuilder.validation.pipeline import EMPTY_PIPELINE_ERROR


class TestEmptyPipeline:
    """Tests for the empty-pipeline short circuit."""

    def test_no_steps(self):
        result = validate_pipeline([])
        assert result.valid is False
        assert result.errors == [EMPTY_PIPELINE_ERROR]

    def test_empty_definition(self):
        result = validate_pipeline_definition(PipelineDefinition(steps=[]))
        assert result.errors == ["Pipeline must have at least one step"]


class TestConnectorRules:
    """Tests for connector presence and configuration."""

    def test_unconfigured_connector_still_counts_as_connector(self):
        definition = PipelineDefinition.model_validate(
            {"steps": [{"id": "c", "type": "connector", "label": "Source", "connector": None}]}
        )
        result = validate_pipeline_definition(definition)
        assert result.valid is False
        assert result.errors == ['Connector step "Source" must have a connector type selected']

    def test_missing_connector_step(self, make_node):
        result = validate_pipeline([make_node("t", "transform")])
        assert result.errors == ["Pipeline must have at least one connector step"]

    def test_configured_connector(self, make_node):
        result = validate_pipeline([make_node("c", "connector", connector="gmail")])
        assert result.valid is True


class TestStepData:
    """Tests for agent and vector requirements."""

    def test_agent_and_vector_requirements(self, make_node):
        nodes = [
            make_node("c", "connector", connector="s3"),
            make_node("a", "agent", label="Summarize"),
            make_node("v", "vector", label="Store"),
        ]
        result = validate_pipeline(nodes)
        assert result.errors == [
            'Agent step "Summarize" must have an agent selected',
            'Vector step "Store" must have a collection selected',
        ]

    def test_edges_are_irrelevant(self, make_node):
        # Pipeline rules only look at nodes
        nodes = [make_node("c", "connector", connector="s3"), make_node("f", "filter")]
        assert validate_pipeline(nodes).valid is True

    def test_every_violation_reported(self, make_node):
        nodes = [make_node("a1", "agent"), make_node("a2", "agent"), make_node("v", "vector")]
        result = validate_pipeline(nodes)
        assert len(result.errors) == 4
        assert result.errors[0] == "Pipeline must have at least one connector step"

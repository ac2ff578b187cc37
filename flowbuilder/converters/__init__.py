"""Conversion between live graphs and persisted definitions."""

from flowbuilder.converters import pipeline, workflow
from flowbuilder.converters.pipeline import visual_order

__all__ = ["pipeline", "workflow", "visual_order"]

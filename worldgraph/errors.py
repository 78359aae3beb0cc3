"""Exceptions raised by world graph generation."""

from __future__ import annotations


class GenerationError(Exception):
    """Error during world graph generation."""

    pass


class GraphStructureError(GenerationError):
    """A world graph breaks one of its structural invariants."""

    pass

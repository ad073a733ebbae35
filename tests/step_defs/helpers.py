"""Shared helper functions for step definitions."""

from pytest_bdd import parsers

from quorum_bdd.nodes import STEP_TYPES


def step(text: str) -> parsers.parse:
    """Step text parser that also understands {name:Node} fields.

    ``{source:Node}`` matches a node name such as ``Node1`` and hands the
    step function a QuorumNode.
    """
    return parsers.parse(text, extra_types=STEP_TYPES)

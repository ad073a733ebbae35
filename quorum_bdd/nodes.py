"""Participant identities of the test network."""

from enum import Enum

from parse import with_pattern

NODE_PATTERN = r"Node\d+"


class QuorumNode(Enum):
    """Logical role name of one member of the permissioned network."""

    NODE1 = "Node1"
    NODE2 = "Node2"
    NODE3 = "Node3"
    NODE4 = "Node4"
    NODE5 = "Node5"
    NODE6 = "Node6"
    NODE7 = "Node7"

    def __str__(self) -> str:
        return self.value


@with_pattern(NODE_PATTERN)
def parse_node(text: str) -> QuorumNode:
    """Convert a node name taken from step text, e.g. ``Node1``."""
    try:
        return QuorumNode(text)
    except ValueError:
        raise ValueError(f"Unknown node: {text}") from None


# Extra types for parsers.parse(), used as {source:Node} in step text
STEP_TYPES = {"Node": parse_node}

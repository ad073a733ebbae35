"""Step-definition support library for Quorum private smart contract BDD tests.

Provides the participant registry, network configuration, Web3-backed
contract/transaction gateways, the typed scenario context shared between
steps, and the concurrent batch workflows used by the step definitions in
tests/step_defs/ and the Robot Framework keywords in quorum_bdd.keywords.
"""

from quorum_bdd.context import ContractRole, ScenarioContext
from quorum_bdd.models import ContractHandle, TransactionReceipt
from quorum_bdd.nodes import QuorumNode

__version__ = "0.1.0"

__all__ = [
    "ContractHandle",
    "ContractRole",
    "QuorumNode",
    "ScenarioContext",
    "TransactionReceipt",
]

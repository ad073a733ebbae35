"""Web3-backed gateways to the nodes of the network under test."""

from quorum_bdd.services.connections import NodeConnections
from quorum_bdd.services.contract_service import ContractService
from quorum_bdd.services.transaction_service import TransactionService

__all__ = [
    "ContractService",
    "NodeConnections",
    "TransactionService",
]

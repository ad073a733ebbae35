"""Typed scenario context shared between the steps of one scenario."""

from dataclasses import dataclass, field
from enum import Enum

from quorum_bdd.exceptions import ScenarioStateError
from quorum_bdd.models import ContractHandle
from quorum_bdd.nodes import QuorumNode


class ContractRole(Enum):
    """Side of a private transaction a node took part in."""

    SOURCE = "source"
    TARGET = "target"


@dataclass
class ScenarioContext:
    """State recorded by earlier steps of the running scenario.

    Created at scenario start and discarded at scenario end. Every attribute
    is last-write-wins.
    """

    contract: ContractHandle | None = None
    transaction_hash: str | None = None
    contracts: dict[tuple[QuorumNode, ContractRole], list[ContractHandle]] = field(
        default_factory=dict
    )

    def require_contract(self) -> ContractHandle:
        """Return the contract deployed earlier in the scenario."""
        if self.contract is None:
            raise ScenarioStateError("No contract has been deployed in this scenario")
        return self.contract

    def require_transaction_hash(self) -> str:
        """Return the transaction hash recorded earlier in the scenario."""
        if not self.transaction_hash:
            raise ScenarioStateError("No transaction hash has been recorded in this scenario")
        return self.transaction_hash

    def record_batch(
        self,
        source: QuorumNode,
        target: QuorumNode,
        contracts: list[ContractHandle],
    ) -> None:
        """Store a batch of contracts against both of its participants."""
        self.contracts[(source, ContractRole.SOURCE)] = contracts
        self.contracts[(target, ContractRole.TARGET)] = contracts

    def contracts_for(self, node: QuorumNode) -> list[ContractHandle]:
        """All contracts stored for ``node``, first as source then as target.

        A node that was both source and target of the same batch sees that
        batch twice.
        """
        return [
            *self.contracts.get((node, ContractRole.SOURCE), []),
            *self.contracts.get((node, ContractRole.TARGET), []),
        ]

    def require_contracts_for(self, node: QuorumNode) -> list[ContractHandle]:
        """Like contracts_for(), but fail if no batch was ever stored for ``node``."""
        if not any((node, role) in self.contracts for role in ContractRole):
            raise ScenarioStateError(f"No contracts have been deployed with {node}")
        return self.contracts_for(node)

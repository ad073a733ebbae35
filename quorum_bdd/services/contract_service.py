"""SimpleStorage contract deployment, reads and writes on private state."""

import logging
from typing import Any

from web3 import Web3
from web3.exceptions import BadFunctionCallOutput
from web3.types import RPCEndpoint

from quorum_bdd.contracts import (
    SIMPLE_STORAGE_ABI,
    SIMPLE_STORAGE_BYTECODE,
    SIMPLE_STORAGE_GAS,
)
from quorum_bdd.exceptions import TransactionFailedError
from quorum_bdd.models import ContractHandle, TransactionReceipt, to_hex
from quorum_bdd.nodes import QuorumNode
from quorum_bdd.services.connections import NodeConnections
from quorum_bdd.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)


class ContractService:
    """Operates a SimpleStorage contract that is private between two nodes.

    Private transactions are sent from the source node's default account with
    Quorum's ``privateFor`` set to the target node's privacy public key, so
    only those two participants hold the contract state.
    """

    def __init__(
        self,
        connections: NodeConnections,
        transaction_service: TransactionService | None = None,
        abi: list[dict] = SIMPLE_STORAGE_ABI,
        bytecode: str = SIMPLE_STORAGE_BYTECODE,
    ) -> None:
        self.connections = connections
        self.transaction_service = transaction_service or TransactionService(connections)
        self.abi = abi
        self.bytecode = bytecode

    def _private_transaction(self, source: QuorumNode, target: QuorumNode) -> dict[str, Any]:
        return {
            "from": self.connections.default_account(source),
            "gas": SIMPLE_STORAGE_GAS,
            "gasPrice": 0,
            "privateFor": [self.connections.privacy_public_key(target)],
        }

    def _contract_at(self, node: QuorumNode, address: str):
        w3 = self.connections.web3(node)
        return w3.eth.contract(address=Web3.to_checksum_address(address), abi=self.abi)

    def create_simple_contract(
        self, initial_value: int, source: QuorumNode, target: QuorumNode
    ) -> ContractHandle:
        """Deploy SimpleStorage with ``initial_value``, private for ``target``.

        Blocks until the deployment transaction is mined.
        """
        logger.debug("Deploying SimpleStorage(%d) from %s to %s", initial_value, source, target)
        w3 = self.connections.web3(source)
        factory = w3.eth.contract(abi=self.abi, bytecode=self.bytecode)
        tx_hash = to_hex(
            factory.constructor(initial_value).transact(
                self._private_transaction(source, target)
            )
        )
        receipt = self.transaction_service.wait_for_transaction_receipt(source, tx_hash)
        if not receipt.contract_address:
            raise TransactionFailedError(tx_hash, "Deployment created no contract")
        logger.debug("SimpleStorage deployed at %s", receipt.contract_address)
        return ContractHandle(
            contract_address=receipt.contract_address,
            transaction_hash=receipt.transaction_hash,
            transaction_receipt=receipt,
        )

    def read_simple_contract_value(self, node: QuorumNode, address: str) -> int:
        """Call ``get()`` on the contract at ``address`` as seen by ``node``.

        A node outside the contract's participants holds no code at
        ``address`` and answers the call with empty output; that reads as 0.

        Raises:
            BadFunctionCallOutput: If the node has code at ``address`` but the
                output cannot be decoded.
        """
        contract = self._contract_at(node, address)
        try:
            value = contract.functions.get().call(
                {"from": self.connections.default_account(node)}
            )
        except BadFunctionCallOutput:
            if len(self.connections.web3(node).eth.get_code(contract.address)) > 0:
                raise
            logger.debug("%s holds no private state for %s", node, address)
            return 0
        logger.debug("get() at %s on %s returned %s", address, node, value)
        return int(value)

    def update_simple_contract(
        self,
        source: QuorumNode,
        target: QuorumNode,
        address: str,
        new_value: int,
    ) -> TransactionReceipt:
        """Send ``set(new_value)`` privately from ``source`` to ``target``."""
        logger.debug("Calling set(%d) on %s from %s to %s", new_value, address, source, target)
        contract = self._contract_at(source, address)
        tx_hash = to_hex(
            contract.functions.set(new_value).transact(
                self._private_transaction(source, target)
            )
        )
        return self.transaction_service.wait_for_transaction_receipt(source, tx_hash)

    def get_storage_root(self, node: QuorumNode, address: str) -> str:
        """Return Quorum's ``eth_storageRoot`` for ``address`` on ``node``."""
        w3 = self.connections.web3(node)
        root = w3.manager.request_blocking(
            RPCEndpoint("eth_storageRoot"), [Web3.to_checksum_address(address)]
        )
        return to_hex(root)

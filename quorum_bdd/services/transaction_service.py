"""Transaction receipt lookups."""

import logging

from web3.exceptions import TransactionNotFound

from quorum_bdd.exceptions import TransactionFailedError
from quorum_bdd.models import TransactionReceipt
from quorum_bdd.nodes import QuorumNode
from quorum_bdd.services.connections import NodeConnections

logger = logging.getLogger(__name__)


class TransactionService:
    """Queries nodes for transaction receipts."""

    def __init__(self, connections: NodeConnections) -> None:
        self.connections = connections

    def get_transaction_receipt(
        self, node: QuorumNode, transaction_hash: str
    ) -> TransactionReceipt | None:
        """Return the receipt ``node`` holds for ``transaction_hash``, if any."""
        w3 = self.connections.web3(node)
        logger.debug("Fetching receipt of %s from %s", transaction_hash, node)
        try:
            receipt = w3.eth.get_transaction_receipt(transaction_hash)
        except TransactionNotFound:
            return None
        if receipt is None:
            return None
        return TransactionReceipt.from_web3(receipt)

    def wait_for_transaction_receipt(
        self, node: QuorumNode, transaction_hash: str
    ) -> TransactionReceipt:
        """Block until ``transaction_hash`` is mined and return its receipt.

        Raises:
            TransactionFailedError: If the transaction was mined with a
                failed status.
            web3.exceptions.TimeExhausted: If no receipt appeared within the
                configured receipt timeout.
        """
        w3 = self.connections.web3(node)
        receipt = TransactionReceipt.from_web3(
            w3.eth.wait_for_transaction_receipt(
                transaction_hash, timeout=self.connections.config.receipt_timeout
            )
        )
        if not receipt.status:
            raise TransactionFailedError(receipt.transaction_hash)
        logger.debug(
            "Transaction %s mined in block %s", receipt.transaction_hash, receipt.block_number
        )
        return receipt

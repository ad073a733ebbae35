"""Immutable views of what the network returns for a transaction or contract."""

from dataclasses import dataclass
from typing import Any, Mapping

from quorum_bdd.exceptions import ScenarioStateError


def to_hex(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    # HexBytes is a bytes subclass; plain strings pass through
    return str(value)


@dataclass(frozen=True)
class TransactionReceipt:
    """A transaction receipt as produced by a node.

    A block number of zero, or no block number at all, means the transaction
    has not been included in a block yet.
    """

    transaction_hash: str
    block_number: int | None
    status: bool = True
    contract_address: str | None = None

    @property
    def is_mined(self) -> bool:
        return self.block_number not in (None, 0)

    @classmethod
    def from_web3(cls, receipt: Mapping[str, Any]) -> "TransactionReceipt":
        """Convert a web3.py ``TxReceipt`` (AttributeDict) into a receipt."""
        status = receipt.get("status")
        return cls(
            transaction_hash=to_hex(receipt["transactionHash"]),
            block_number=receipt.get("blockNumber"),
            # Pre-Byzantium receipts carry no status field
            status=True if status is None else bool(status),
            contract_address=receipt.get("contractAddress"),
        )


@dataclass(frozen=True)
class ContractHandle:
    """A deployed contract instance and the transaction that created it."""

    contract_address: str
    transaction_hash: str
    transaction_receipt: TransactionReceipt | None = None

    def require_receipt(self) -> TransactionReceipt:
        """Return the deployment receipt or fail the step.

        Raises:
            ScenarioStateError: If the deployment receipt was never recorded.
        """
        if self.transaction_receipt is None:
            raise ScenarioStateError(
                f"no transaction receipt for contract {self.contract_address}"
            )
        return self.transaction_receipt

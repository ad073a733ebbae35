"""Exceptions raised by the quorum_bdd library."""


class QuorumBddError(Exception):
    """Base class for all quorum_bdd errors."""


class ConfigurationFailure(QuorumBddError):
    """Raised when the network configuration is missing or invalid."""


class ScenarioStateError(QuorumBddError):
    """Raised when a step needs state an earlier step should have recorded."""


class TransactionFailedError(QuorumBddError):
    """Raised when a mined transaction reports a failed status."""

    def __init__(self, transaction_hash: str, message: str = "Transaction failed"):
        super().__init__(f"{message}: {transaction_hash}")
        self.transaction_hash = transaction_hash

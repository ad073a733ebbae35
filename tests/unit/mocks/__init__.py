"""Mock classes for unit testing step definitions."""

from .mock_network import (
    EMPTY_STORAGE_ROOT,
    MockContractService,
    MockQuorumNetwork,
    MockTransactionService,
)

__all__ = [
    "EMPTY_STORAGE_ROOT",
    "MockContractService",
    "MockQuorumNetwork",
    "MockTransactionService",
]

"""Unit test conftest.

This conftest is loaded by pytest when running unit tests from this directory.
It overrides fixtures from the root conftest.py to provide a mock network
instead of real Quorum nodes, enabling isolated unit testing of step
definition functions.
"""

import pytest

from quorum_bdd.config import NetworkConfig, NodeConfig
from quorum_bdd.context import ScenarioContext
from quorum_bdd.nodes import QuorumNode
from tests.unit.mocks import MockContractService, MockQuorumNetwork, MockTransactionService


# -- Mock Network Fixtures --
# These fixtures override the network fixtures in the root conftest.py


@pytest.fixture
def network_config() -> NetworkConfig:
    """Network configuration with every node on localhost."""
    return NetworkConfig(
        name="mock",
        nodes={
            node: NodeConfig(
                node=node,
                url=f"http://localhost:{22000 + i}",
                privacy_public_key=f"{node.value}-public-key=",
            )
            for i, node in enumerate(QuorumNode)
        },
        max_workers=4,
        batch_timeout=30,
    )


@pytest.fixture
def mock_network() -> MockQuorumNetwork:
    """Mock Quorum network with all seven nodes."""
    return MockQuorumNetwork()


@pytest.fixture
def contract_service(mock_network: MockQuorumNetwork) -> MockContractService:
    """Mock contract gateway fixture."""
    return MockContractService(mock_network)


@pytest.fixture
def transaction_service(mock_network: MockQuorumNetwork) -> MockTransactionService:
    """Mock transaction gateway fixture."""
    return MockTransactionService(mock_network)


@pytest.fixture
def scenario_context() -> ScenarioContext:
    """Provides a clean, isolated scenario context for each unit test."""
    return ScenarioContext()

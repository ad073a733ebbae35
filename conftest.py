"""Root conftest.py - Auto-discover step definitions and provide network fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from quorum_bdd.config import NetworkConfig, get_network_config_path, load_network_config
from quorum_bdd.context import ScenarioContext
from quorum_bdd.services import ContractService, NodeConnections, TransactionService

STEP_DEFS_DIR = Path(__file__).parent / "tests" / "step_defs"


def _discover_step_definition_modules() -> list[str]:
    """Find all step definition modules in tests/step_defs/.

    pytest-bdd only sees step fixtures that live in a conftest, a test module
    or a plugin, so every module found here is loaded as a plugin.
    """
    if not STEP_DEFS_DIR.exists():
        print(f"Warning: Step definitions directory not found: {STEP_DEFS_DIR}")
        return []

    return [
        f"tests.step_defs.{f.stem}"
        for f in sorted(STEP_DEFS_DIR.glob("*.py"))
        if f.stem not in ("__init__", "helpers")
    ]


pytest_plugins = _discover_step_definition_modules()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("quorum", "Quorum network under test")
    group.addoption(
        "--network-config",
        action="store",
        default=None,
        help="JSON inventory of the network nodes "
        "(defaults to the QUORUM_NETWORK_CONFIG environment variable)",
    )


# Network fixtures - one set of node connections per test session
@pytest.fixture(scope="session")
def network_config(request: pytest.FixtureRequest) -> NetworkConfig:
    """Network inventory loaded from --network-config."""
    path = get_network_config_path(request.config.getoption("--network-config"))
    config = load_network_config(path)
    print(f"Using network '{config.name}' with nodes: {', '.join(str(n) for n in config.nodes)}")
    return config


@pytest.fixture(scope="session")
def node_connections(network_config: NetworkConfig) -> Iterator[NodeConnections]:
    """Web3 clients for every node, shared by all scenarios."""
    connections = NodeConnections(network_config)
    yield connections
    connections.close()


@pytest.fixture(scope="session")
def transaction_service(node_connections: NodeConnections) -> TransactionService:
    return TransactionService(node_connections)


@pytest.fixture(scope="session")
def contract_service(
    node_connections: NodeConnections, transaction_service: TransactionService
) -> ContractService:
    return ContractService(node_connections, transaction_service)


@pytest.fixture
def scenario_context() -> Iterator[ScenarioContext]:
    """State passed between the steps of one scenario.

    Created fresh for every scenario and discarded when it ends, even if the
    scenario fails.
    """
    context = ScenarioContext()
    yield context

    deployed = len({c.contract_address for batch in context.contracts.values() for c in batch})
    if context.contract is not None:
        deployed += 1
    if deployed:
        print(f"Scenario finished with {deployed} contracts deployed")

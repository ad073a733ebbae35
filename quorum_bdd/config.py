"""Network configuration for the private contract tests.

The network inventory is a JSON file describing every participant::

    {
        "name": "7nodes",
        "rpc_timeout": 30,
        "receipt_timeout": 120,
        "max_workers": 10,
        "batch_timeout": 600,
        "nodes": {
            "Node1": {
                "url": "http://localhost:22000",
                "privacy_public_key": "BULeR8JyUWhiuuCMU/HLA0Q5pzkYT+cHII3ZKBey3Bo="
            }
        }
    }

The file is located by the ``--network-config`` pytest option or the
``QUORUM_NETWORK_CONFIG`` environment variable.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from quorum_bdd.exceptions import ConfigurationFailure
from quorum_bdd.nodes import QuorumNode

NETWORK_CONFIG_ENV = "QUORUM_NETWORK_CONFIG"


@dataclass(frozen=True)
class NodeConfig:
    """Connection details of one participant."""

    node: QuorumNode
    url: str
    privacy_public_key: str


@dataclass(frozen=True)
class NetworkConfig:
    """Configuration of the network under test."""

    name: str = "quorum"
    nodes: dict[QuorumNode, NodeConfig] = field(default_factory=dict)

    # Timeouts (seconds)
    rpc_timeout: float = 30.0
    receipt_timeout: float = 120.0
    # None waits for the whole batch without a deadline
    batch_timeout: float | None = None

    # Worker pool size for concurrent deployments and receipt lookups
    max_workers: int = 10

    def node(self, node: QuorumNode) -> NodeConfig:
        """Return the connection details of ``node``.

        Raises:
            ConfigurationFailure: If the node is not part of the network.
        """
        try:
            return self.nodes[node]
        except KeyError:
            raise ConfigurationFailure(
                f"{node} is not configured in network '{self.name}'"
            ) from None

    def privacy_public_key(self, node: QuorumNode) -> str:
        return self.node(node).privacy_public_key


def get_network_config_path(option_value: str | None = None) -> Path:
    """Resolve the network config path from a CLI option or the environment.

    Raises:
        ConfigurationFailure: If neither the option nor the
            ``QUORUM_NETWORK_CONFIG`` environment variable is set.
    """
    if option_value:
        return Path(option_value)
    if not (path := os.environ.get(NETWORK_CONFIG_ENV)):
        raise ConfigurationFailure(
            f"No network config given: pass --network-config or set {NETWORK_CONFIG_ENV}"
        )
    return Path(path)


def parse_network_config(data: dict) -> NetworkConfig:
    """Build a NetworkConfig from the decoded JSON inventory."""
    if not isinstance(data, dict) or not isinstance(data.get("nodes"), dict):
        raise ConfigurationFailure("Network config must contain a 'nodes' mapping")

    nodes = {}
    for name, entry in data["nodes"].items():
        try:
            node = QuorumNode(name)
        except ValueError:
            raise ConfigurationFailure(f"Unknown node in network config: {name}") from None
        if not isinstance(entry, dict) or "url" not in entry:
            raise ConfigurationFailure(f"Node {name} has no 'url'")
        if not entry.get("privacy_public_key"):
            raise ConfigurationFailure(f"Node {name} has no 'privacy_public_key'")
        nodes[node] = NodeConfig(
            node=node,
            url=entry["url"],
            privacy_public_key=entry["privacy_public_key"],
        )

    max_workers = _number(data, "max_workers", int)
    if max_workers is None or max_workers < 1:
        raise ConfigurationFailure("max_workers must be at least 1")

    return NetworkConfig(
        name=data.get("name", NetworkConfig.name),
        nodes=nodes,
        rpc_timeout=_number(data, "rpc_timeout", float),
        receipt_timeout=_number(data, "receipt_timeout", float),
        batch_timeout=_number(data, "batch_timeout", float),
        max_workers=max_workers,
    )


def _number(data: dict, key: str, convert: Callable[[Any], Any]) -> Any:
    """Convert ``data[key]``, falling back to the NetworkConfig default."""
    value = data.get(key, getattr(NetworkConfig, key))
    if value is None:
        return None
    try:
        return convert(value)
    except (TypeError, ValueError):
        raise ConfigurationFailure(f"{key} must be a number, got {value!r}") from None


def load_network_config(path: str | Path) -> NetworkConfig:
    """Load the JSON network inventory at ``path``."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationFailure(f"Network config not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ConfigurationFailure(f"Network config {path} is not valid JSON: {e}") from e
    return parse_network_config(data)

"""Per-node Web3 clients."""

import logging
import threading
from typing import Callable

from web3 import Web3

from quorum_bdd.config import NetworkConfig
from quorum_bdd.exceptions import ConfigurationFailure
from quorum_bdd.nodes import QuorumNode

logger = logging.getLogger(__name__)


def http_web3(url: str, timeout: float) -> Web3:
    """Create a Web3 client talking JSON-RPC over HTTP to ``url``."""
    return Web3(Web3.HTTPProvider(url, request_kwargs={"timeout": timeout}))


class NodeConnections:
    """Lazily created Web3 client and default account for every participant.

    Clients are shared between the worker threads of a batch, so creation is
    guarded by a lock.
    """

    def __init__(
        self,
        config: NetworkConfig,
        web3_factory: Callable[[str, float], Web3] = http_web3,
    ) -> None:
        self.config = config
        self._web3_factory = web3_factory
        self._clients: dict[QuorumNode, Web3] = {}
        self._accounts: dict[QuorumNode, str] = {}
        self._lock = threading.Lock()

    def web3(self, node: QuorumNode) -> Web3:
        """Return the Web3 client of ``node``, connecting on first use."""
        with self._lock:
            if node not in self._clients:
                url = self.config.node(node).url
                logger.debug("Connecting to %s at %s", node, url)
                self._clients[node] = self._web3_factory(url, self.config.rpc_timeout)
            return self._clients[node]

    def default_account(self, node: QuorumNode) -> str:
        """Return the first account managed by ``node``.

        The RPC call is made without holding the lock.
        """
        with self._lock:
            if node in self._accounts:
                return self._accounts[node]
        accounts = self.web3(node).eth.accounts
        if not accounts:
            raise ConfigurationFailure(f"{node} has no unlocked accounts")
        with self._lock:
            return self._accounts.setdefault(node, accounts[0])

    def privacy_public_key(self, node: QuorumNode) -> str:
        return self.config.privacy_public_key(node)

    def close(self) -> None:
        """Forget all clients; the next call reconnects."""
        with self._lock:
            self._clients.clear()
            self._accounts.clear()

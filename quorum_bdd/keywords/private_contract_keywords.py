"""Private Contract Keywords for Robot Framework.

Keywords for private smart contract deployment and verification, aligned with
the BDD scenario steps. Uses @keyword decorator to map clean function names to
scenario step text.

Mirrors: tests/step_defs/private_contract_steps.py

Usage:
    *** Settings ***
    Library    quorum_bdd.keywords.PrivateContractKeywords    ${NETWORK_CONFIG}
"""

from robot.api.deco import keyword

from quorum_bdd.batch import count_mined_receipts, deploy_contracts_concurrently
from quorum_bdd.config import NetworkConfig, get_network_config_path, load_network_config
from quorum_bdd.context import ScenarioContext
from quorum_bdd.nodes import QuorumNode
from quorum_bdd.services import ContractService, NodeConnections, TransactionService


def _node(name: str | QuorumNode) -> QuorumNode:
    if isinstance(name, QuorumNode):
        return name
    try:
        return QuorumNode(name)
    except ValueError:
        raise ValueError(f"Unknown node: {name}") from None


class PrivateContractKeywords:
    """Keywords for private smart contracts matching BDD scenario steps.

    A new library instance, and with it a new scenario context, is created
    for every test.
    """

    ROBOT_LIBRARY_SCOPE = "TEST"
    ROBOT_LIBRARY_DOC_FORMAT = "TEXT"
    ROBOT_AUTO_KEYWORDS = False

    def __init__(
        self,
        network_config: str | None = None,
        contract_service: ContractService | None = None,
        transaction_service: TransactionService | None = None,
        config: NetworkConfig | None = None,
    ) -> None:
        """Initialize PrivateContractKeywords.

        Arguments:
            network_config: Path of the JSON network inventory (optional,
                falls back to QUORUM_NETWORK_CONFIG)
            contract_service: Contract gateway to use instead of Web3 (optional)
            transaction_service: Transaction gateway to use instead of Web3 (optional)
            config: Already loaded network configuration (optional)
        """
        self._network_config_path = network_config
        self._config = config
        self._contract_service = contract_service
        self._transaction_service = transaction_service
        self.context = ScenarioContext()

    # =========================================================================
    # Network Access
    # =========================================================================

    @property
    def config(self) -> NetworkConfig:
        if self._config is None:
            self._config = load_network_config(
                get_network_config_path(self._network_config_path)
            )
        return self._config

    def _connect(self) -> None:
        connections = NodeConnections(self.config)
        if self._transaction_service is None:
            self._transaction_service = TransactionService(connections)
        if self._contract_service is None:
            self._contract_service = ContractService(connections, self._transaction_service)

    @property
    def contract_service(self) -> ContractService:
        if self._contract_service is None:
            self._connect()
        return self._contract_service

    @property
    def transaction_service(self) -> TransactionService:
        if self._transaction_service is None:
            self._connect()
        return self._transaction_service

    # =========================================================================
    # Single Contract Keywords
    # =========================================================================

    @keyword(
        "Deploy a simple smart contract with initial value ${initial_value} "
        "in ${source}'s default account and it's private for ${target}."
    )
    def deploy_simple_contract(self, initial_value: int, source: str, target: str) -> str:
        """Deploy one private contract and remember it for following keywords.

        Maps to scenario step:
        - "Given Deploy a simple smart contract with initial value 42 in
          Node1's default account and it's private for Node7."

        Returns:
            Address of the deployed contract
        """
        contract = self.contract_service.create_simple_contract(
            int(initial_value), _node(source), _node(target)
        )
        self.context.contract = contract
        print(f"✓ Contract deployed at {contract.contract_address}")
        return contract.contract_address

    @keyword("Transaction Hash is returned.")
    def verify_transaction_hash(self) -> str:
        """Check the deployment produced a transaction hash and remember it.

        Returns:
            The deployment transaction hash
        """
        transaction_hash = self.context.require_contract().require_receipt().transaction_hash
        assert transaction_hash and transaction_hash.strip(), "Transaction hash is blank"
        self.context.transaction_hash = transaction_hash
        print(f"Transaction Hash is {transaction_hash}")
        return transaction_hash

    @keyword("Transaction Receipt is present in ${node}.")
    def verify_transaction_receipt(self, node: str) -> None:
        """Check the node holds a mined receipt for the recorded transaction."""
        node = _node(node)
        transaction_hash = self.context.require_transaction_hash()
        receipt = self.transaction_service.get_transaction_receipt(node, transaction_hash)
        assert receipt is not None, f"No receipt for {transaction_hash} in {node}"
        assert receipt.is_mined, (
            f"Receipt for {transaction_hash} in {node} is not mined "
            f"(block number {receipt.block_number})"
        )
        print(f"✓ Receipt present in {node} (block {receipt.block_number})")

    @keyword("Contracts stored in ${source} and ${target} must have the same storage root.")
    def verify_storage_root(self, source: str, target: str) -> None:
        """Participants of a private contract share its storage root."""
        address = self.context.require_contract().contract_address
        source_root = self.contract_service.get_storage_root(_node(source), address)
        target_root = self.contract_service.get_storage_root(_node(target), address)
        assert source_root == target_root, (
            f"Storage root in {source} ({source_root}) differs from "
            f"{target} ({target_root})"
        )

    @keyword(
        "Contracts stored in ${source} and ${stranger} must not have the same storage root."
    )
    def verify_storage_root_differs(self, source: str, stranger: str) -> None:
        """A node outside the visibility set does not see the contract state."""
        address = self.context.require_contract().contract_address
        source_root = self.contract_service.get_storage_root(_node(source), address)
        stranger_root = self.contract_service.get_storage_root(_node(stranger), address)
        assert source_root != stranger_root, (
            f"{stranger} has the same storage root as {source} ({source_root})"
        )

    @keyword("Smart contract's `get()` function execution in ${node} returns ${expected_value}.")
    def verify_contract_value(self, node: str, expected_value: int) -> None:
        """Read the contract value as the node sees it."""
        address = self.context.require_contract().contract_address
        actual_value = self.contract_service.read_simple_contract_value(_node(node), address)
        assert actual_value == int(expected_value), (
            f"get() in {node} returned {actual_value}, expected {expected_value}"
        )

    @keyword(
        "Execute smart contract's `set()` function with new value ${new_value} "
        "in ${source} and it's private for ${target}."
    )
    def update_contract_value(self, new_value: int, source: str, target: str) -> None:
        """Privately update the contract value and wait for it to be mined."""
        address = self.context.require_contract().contract_address
        receipt = self.contract_service.update_simple_contract(
            _node(source), _node(target), address, int(new_value)
        )
        assert receipt.transaction_hash and receipt.transaction_hash.strip(), (
            "set() returned a blank transaction hash"
        )
        assert receipt.is_mined, f"set() transaction {receipt.transaction_hash} was not mined"
        print(f"✓ set({new_value}) mined in block {receipt.block_number}")

    # =========================================================================
    # Contract Batch Keywords
    # =========================================================================

    @keyword(
        "Deploy ${count} private smart contracts between a default account in "
        "${source} and a default account in ${target}"
    )
    def deploy_multiple_contracts(self, count: int, source: str, target: str) -> int:
        """Deploy many private contracts at once and record them per node.

        Maps to scenario step:
        - "When Deploy 20 private smart contracts between a default account
          in Node1 and a default account in Node7"

        Returns:
            Number of contracts deployed
        """
        source, target = _node(source), _node(target)
        contracts = deploy_contracts_concurrently(
            self.contract_service,
            int(count),
            source,
            target,
            max_workers=self.config.max_workers,
            timeout=self.config.batch_timeout,
        )
        self.context.record_batch(source, target, contracts)
        print(f"✓ Deployed {len(contracts)} private contracts from {source} to {target}")
        return len(contracts)

    @keyword("${node} has received ${expected_count} transactions.")
    def verify_number_of_transactions(self, node: str, expected_count: int) -> None:
        """Count the batch deployments the node holds a mined receipt for."""
        node = _node(node)
        actual_count = count_mined_receipts(
            self.transaction_service,
            node,
            self.context.require_contracts_for(node),
            max_workers=self.config.max_workers,
            timeout=self.config.batch_timeout,
        )
        assert actual_count == int(expected_count), (
            f"{node} has received {actual_count} transactions, expected {expected_count}"
        )

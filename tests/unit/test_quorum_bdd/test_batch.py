"""Unit tests for concurrent batch deployment and receipt counting."""

import threading

import pytest

from quorum_bdd.batch import (
    BATCH_INITIAL_VALUE,
    count_mined_receipts,
    deploy_contracts_concurrently,
)
from quorum_bdd.exceptions import ScenarioStateError
from quorum_bdd.models import ContractHandle
from quorum_bdd.nodes import QuorumNode
from tests.unit.mocks import MockContractService, MockQuorumNetwork, MockTransactionService

NODE1, NODE3, NODE7 = QuorumNode.NODE1, QuorumNode.NODE3, QuorumNode.NODE7


def test_deploy_contracts_concurrently(contract_service: MockContractService):
    contracts = deploy_contracts_concurrently(contract_service, 3, NODE1, NODE7)

    assert len(contracts) == 3
    assert all(c.transaction_receipt.is_mined for c in contracts)
    for c in contracts:
        assert contract_service.read_simple_contract_value(NODE1, c.contract_address) == (
            BATCH_INITIAL_VALUE
        )
        assert contract_service.read_simple_contract_value(NODE7, c.contract_address) == (
            BATCH_INITIAL_VALUE
        )
        assert contract_service.read_simple_contract_value(NODE3, c.contract_address) == 0


def test_deploy_zero_contracts(contract_service: MockContractService):
    assert deploy_contracts_concurrently(contract_service, 0, NODE1, NODE7) == []
    assert contract_service.deploy_calls == 0


def test_deploy_negative_count(contract_service: MockContractService):
    with pytest.raises(ValueError, match="must not be negative"):
        deploy_contracts_concurrently(contract_service, -1, NODE1, NODE7)


def test_deployments_are_submitted_concurrently(mock_network: MockQuorumNetwork):
    """Every deployment is in flight before any of them completes."""
    n = 5
    barrier = threading.Barrier(n, timeout=5)

    class BarrierContractService(MockContractService):
        def create_simple_contract(self, initial_value, source, target) -> ContractHandle:
            barrier.wait()
            return super().create_simple_contract(initial_value, source, target)

    contracts = deploy_contracts_concurrently(
        BarrierContractService(mock_network), n, NODE1, NODE7, max_workers=n, timeout=10
    )

    assert len(contracts) == n


def test_count_mined_receipts(
    contract_service: MockContractService, transaction_service: MockTransactionService
):
    contracts = deploy_contracts_concurrently(contract_service, 4, NODE1, NODE7)

    assert count_mined_receipts(transaction_service, NODE7, contracts) == 4
    assert sorted(h for _, h in transaction_service.lookups) == sorted(
        c.transaction_hash for c in contracts
    )


def test_count_mined_receipts_skips_pending_and_missing(
    mock_network: MockQuorumNetwork,
    contract_service: MockContractService,
    transaction_service: MockTransactionService,
):
    mined = deploy_contracts_concurrently(contract_service, 2, NODE1, NODE7)
    mock_network.mine_transactions = False
    pending = deploy_contracts_concurrently(contract_service, 2, NODE1, NODE7)
    mock_network.lost_receipts.add((NODE1, mined[0].transaction_hash))

    assert count_mined_receipts(transaction_service, NODE1, mined + pending) == 1


def test_count_mined_receipts_requires_deployment_receipts(
    transaction_service: MockTransactionService,
):
    contracts = [ContractHandle(contract_address="0x01", transaction_hash="0x02")]

    with pytest.raises(ScenarioStateError, match="no transaction receipt for contract 0x01"):
        count_mined_receipts(transaction_service, NODE1, contracts)
    assert transaction_service.lookups == []

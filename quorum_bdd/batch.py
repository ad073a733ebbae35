"""Concurrent batch deployment and receipt verification."""

import logging
from functools import partial

from quorum_bdd.concurrency import run_concurrently
from quorum_bdd.models import ContractHandle

logger = logging.getLogger(__name__)

# Initial value of every contract deployed in a batch
BATCH_INITIAL_VALUE = 10


def deploy_contracts_concurrently(
    contract_service,
    count: int,
    source,
    target,
    initial_value: int = BATCH_INITIAL_VALUE,
    max_workers: int = 10,
    timeout: float | None = None,
) -> list[ContractHandle]:
    """Deploy ``count`` private contracts from ``source`` to ``target`` at once.

    Returns one handle per submitted deployment, in submission order. Any
    failed deployment fails the whole batch.
    """
    if count < 0:
        raise ValueError(f"Contract count must not be negative: {count}")

    deploy = partial(contract_service.create_simple_contract, initial_value, source, target)
    contracts = run_concurrently(
        [deploy] * count, max_workers=max_workers, timeout=timeout
    )
    logger.info("Deployed %d private contracts from %s to %s", len(contracts), source, target)
    return contracts


def count_mined_receipts(
    transaction_service,
    node,
    contracts: list[ContractHandle],
    max_workers: int = 10,
    timeout: float | None = None,
) -> int:
    """Count the deployments of ``contracts`` that ``node`` holds a mined receipt for.

    Raises:
        ScenarioStateError: If any contract has no deployment receipt. This
            is checked for every contract before any lookup is issued.
    """
    hashes = [c.require_receipt().transaction_hash for c in contracts]
    receipts = run_concurrently(
        [partial(transaction_service.get_transaction_receipt, node, h) for h in hashes],
        max_workers=max_workers,
        timeout=timeout,
    )
    mined = sum(1 for r in receipts if r is not None and r.is_mined)
    logger.info("%s holds %d of %d receipts as mined", node, mined, len(receipts))
    return mined

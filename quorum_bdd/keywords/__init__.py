"""Robot Framework keyword libraries for the private contract tests.

Each library mirrors a pytest-bdd step definition module in tests/step_defs/
and uses the @keyword decorator to map Python methods to scenario step text.

Libraries:
    PrivateContractKeywords: Private smart contract deployment and verification

Usage:
    *** Settings ***
    Library    quorum_bdd.keywords.PrivateContractKeywords    ${NETWORK_CONFIG}

    *** Test Cases ***
    Example Test
        Deploy a simple smart contract with initial value 42 in Node1's default account and it's private for Node7.
        Transaction Hash is returned.
"""

from quorum_bdd.keywords.private_contract_keywords import PrivateContractKeywords

__all__ = [
    "PrivateContractKeywords",
]

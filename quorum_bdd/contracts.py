"""Compiled artifacts of the contracts deployed by the tests.

SimpleStorage::

    pragma solidity ^0.4.15;

    contract simplestorage {
        uint public storedData;

        function simplestorage(uint initVal) {
            storedData = initVal;
        }

        function set(uint x) {
            storedData = x;
        }

        function get() constant returns (uint retVal) {
            return storedData;
        }
    }
"""

SIMPLE_STORAGE_ABI = [
    {
        "constant": True,
        "inputs": [],
        "name": "storedData",
        "outputs": [{"name": "", "type": "uint256"}],
        "payable": False,
        "type": "function",
    },
    {
        "constant": False,
        "inputs": [{"name": "x", "type": "uint256"}],
        "name": "set",
        "outputs": [],
        "payable": False,
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "get",
        "outputs": [{"name": "retVal", "type": "uint256"}],
        "payable": False,
        "type": "function",
    },
    {
        "inputs": [{"name": "initVal", "type": "uint256"}],
        "payable": False,
        "type": "constructor",
    },
]

SIMPLE_STORAGE_BYTECODE = (
    "0x6060604052341561000f57600080fd5b604051602080610149833981016040528080519060"
    "200190919050505b806000819055505b505b610104806100456000396000f30060606040526000"
    "357c0100000000000000000000000000000000000000000000000000000000900463ffffffff16"
    "80632a1afcd914605157806360fe47b11460775780636d4ce63c146097575b600080fd5b341560"
    "5b57600080fd5b606160bd565b6040518082815260200191505060405180910390f35b34156081"
    "57600080fd5b6095600480803590602001909190505060c3565b005b341560a157600080fd5b60"
    "a760ce565b6040518082815260200191505060405180910390f35b60005481565b806000819055"
    "505b50565b6000805490505b905600a165627a7a72305820d5851baab720bba574474de3d09dbe"
    "aabc674a15f4dd93b974908476542c23f00029"
)

# Gas limit for SimpleStorage deployment and set(); Quorum networks run gas-free
SIMPLE_STORAGE_GAS = 4_700_000

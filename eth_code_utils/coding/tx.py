"""
Transaction data encoding.

A contract call payload is the 4-byte function selector followed by the
ABI-encoded call parameters:

    0x<keccak256(signature)[:4]><encode(types, params)>

Hashing is done by web3 and parameter encoding by eth-abi. Nothing here
validates the signature or checks that ``types`` and ``params`` line up;
any mismatch surfaces as the encoder's own exception.
"""

import logging
from typing import Any, Sequence

from eth_abi import encode
from web3 import Web3

LOG = logging.getLogger(__name__)


def code_params(types: Sequence[str], params: Sequence[Any]) -> str:
    """
    ABI-encode call parameters.

    Args:
        types: ABI type names (e.g. ``["address", "uint256"]``)
        params: Values, positionally matching ``types``

    Returns:
        Encoded parameters as a hex string, without ``0x`` prefix
    """
    return encode(list(types), list(params)).hex()


def code_fun(fun_str: str) -> str:
    """
    Compute the function selector of a signature.

    Args:
        fun_str: Function signature (e.g. ``"transfer(address,uint256)"``)

    Returns:
        Selector as ``0x`` followed by 8 hex characters
    """
    code = "0x" + bytes(Web3.keccak(text=fun_str)[:4]).hex()
    LOG.debug("code_fun : %s", code)
    return code


def code_tx_data(fun_str: str, types: Sequence[str], params: Sequence[Any]) -> str:
    """
    Build the data field of a contract call transaction.

    Args:
        fun_str: Function signature
        types: ABI type names of the parameters
        params: Parameter values

    Returns:
        ``0x``-prefixed hex payload (selector followed by encoded params)
    """
    tx_data = code_fun(fun_str)
    tx_data += code_params(types, params)
    LOG.debug("txData_code : %s", tx_data)
    return tx_data

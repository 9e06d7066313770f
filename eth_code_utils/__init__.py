"""
eth-code-utils

Builds Ethereum contract transaction payloads (function selector plus
ABI-encoded parameters), encodes and decodes event logs, and decodes hex
return values to text.
"""

__version__ = "1.0.0"

from .coding import (
    code_event,
    code_fun,
    code_params,
    code_tx_data,
    decode_log,
    hex2a,
)

from .artifacts.loader import (
    get_abi,
    get_bytecode,
    load_artifact,
    list_available_contracts,
)

from .contracts.contract import ContractCoder

__all__ = [
    'code_tx_data',
    'hex2a',
    'code_fun',
    'code_params',
    'code_event',
    'decode_log',
    'get_abi',
    'get_bytecode',
    'load_artifact',
    'list_available_contracts',
    'ContractCoder',
]

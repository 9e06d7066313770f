"""Transaction, log and text encoding helpers."""
from .tx import code_fun, code_params, code_tx_data
from .log import code_event, decode_log
from .text import hex2a

__all__ = [
    "code_fun",
    "code_params",
    "code_tx_data",
    "code_event",
    "decode_log",
    "hex2a",
]

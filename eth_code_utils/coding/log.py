"""
Event log encoding.

Non-anonymous events carry the Keccak-256 hash of their signature as the
first topic. Indexed inputs follow in the remaining topics and the other
inputs are ABI-encoded in the log data.
"""

import logging
from typing import Any, Dict, List, Sequence, Union

from eth_abi import decode
from web3 import Web3

from ..artifacts.loader import canonical_type, function_signature

LOG = logging.getLogger(__name__)

HexLike = Union[str, bytes]


def _to_bytes(value: HexLike) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return bytes(Web3.to_bytes(hexstr=value))


def _is_hashed_when_indexed(abi_type: str) -> bool:
    """Indexed dynamic values and all arrays/tuples are stored as their hash."""
    return abi_type in ("string", "bytes") or abi_type.endswith("]") or abi_type.startswith("(")


def code_event(event_str: str) -> str:
    """
    Compute the topic of an event signature.

    Args:
        event_str: Event signature (e.g. ``"Transfer(address,address,uint256)"``)

    Returns:
        ``0x``-prefixed 32-byte topic
    """
    topic = "0x" + bytes(Web3.keccak(text=event_str)).hex()
    LOG.debug("code_event : %s", topic)
    return topic


def decode_log(
    event_abi: Dict[str, Any],
    topics: Sequence[HexLike],
    data: HexLike,
) -> Dict[str, Any]:
    """
    Decode a log entry against an event ABI entry.

    Indexed strings, bytes, arrays and tuples cannot be recovered from a
    log; their 32-byte topic (the hash of the value) is returned instead.

    Args:
        event_abi: ABI entry of the event
        topics: Log topics, hex strings or bytes
        data: Log data, hex string or bytes

    Returns:
        Mapping of input name to decoded value, in declaration order

    Raises:
        ValueError: If the topics do not match the event
    """
    inputs = event_abi.get("inputs", [])
    topic_values: List[bytes] = [_to_bytes(t) for t in topics]

    if not event_abi.get("anonymous", False):
        signature = function_signature(event_abi)
        expected = bytes(Web3.keccak(text=signature))
        if not topic_values or topic_values[0] != expected:
            raise ValueError(f"Log topic does not match event {signature}")
        topic_values = topic_values[1:]

    indexed = [inp for inp in inputs if inp.get("indexed")]
    if len(topic_values) != len(indexed):
        raise ValueError(
            f"Event {event_abi.get('name')} has {len(indexed)} indexed inputs "
            f"but the log carries {len(topic_values)} topics"
        )

    data_inputs = [inp for inp in inputs if not inp.get("indexed")]
    data_values = iter(decode([canonical_type(inp) for inp in data_inputs], _to_bytes(data)))
    topic_iter = iter(topic_values)

    decoded = {}
    for position, inp in enumerate(inputs):
        name = inp.get("name") or str(position)
        if inp.get("indexed"):
            topic = next(topic_iter)
            abi_type = canonical_type(inp)
            if _is_hashed_when_indexed(abi_type):
                decoded[name] = topic
            else:
                decoded[name] = decode([abi_type], topic)[0]
        else:
            decoded[name] = next(data_values)

    LOG.debug("decode_log %s : %s", event_abi.get("name"), decoded)
    return decoded

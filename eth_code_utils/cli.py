"""
Command-line interface for eth-code-utils.

Usage:
    eth-code-utils encode "transfer(address,uint256)" 0x11...11 1000
    eth-code-utils selector "balanceOf(address)"
    eth-code-utils topic "Transfer(address,address,uint256)"
    eth-code-utils hex2a 68656c6c6f
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from web3 import Web3

from . import __version__
from .coding import code_event, code_fun, code_tx_data, hex2a

LOG = logging.getLogger(__name__)


def signature_types(signature: str) -> List[str]:
    """
    Split the parameter types out of a signature.

    Commas nested in tuple types do not split.
    """
    start = signature.find('(')
    end = signature.rfind(')')
    if start < 0 or end < start:
        raise ValueError(f"Not a function signature: {signature}")

    types = []
    depth = 0
    current = ""
    for char in signature[start + 1:end]:
        if char == ',' and depth == 0:
            types.append(current.strip())
            current = ""
            continue
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
        current += char
    if current.strip():
        types.append(current.strip())
    return types


def _hex_to_bytes(value: Any) -> Any:
    if isinstance(value, list):
        return [_hex_to_bytes(item) for item in value]
    if isinstance(value, str) and value.startswith("0x"):
        return Web3.to_bytes(hexstr=value)
    return value


def parse_param(raw: str, abi_type: Optional[str] = None) -> Any:
    """
    Parse a parameter as JSON where possible, else keep the string.

    Hex strings given for a ``bytes`` or ``bytesN`` type (or arrays of
    them) are converted to bytes.
    """
    try:
        value = json.loads(raw)
    except ValueError:
        value = raw
    if abi_type is not None and abi_type.startswith("bytes"):
        return _hex_to_bytes(value)
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eth-code-utils",
        description="Encode Ethereum contract call data",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    encode = sub.add_parser("encode", help="build transaction data for a call")
    encode.add_argument("signature")
    encode.add_argument("params", nargs="*")
    encode.add_argument("--types", help="comma-separated types (default: from signature)")

    selector = sub.add_parser("selector", help="print a function selector")
    selector.add_argument("signature")

    topic = sub.add_parser("topic", help="print an event topic")
    topic.add_argument("signature")

    text = sub.add_parser("hex2a", help="decode hex to text")
    text.add_argument("hex")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "encode":
            if args.types:
                types = signature_types(f"({args.types})")
            else:
                types = signature_types(args.signature)
            params = [
                parse_param(raw, types[i] if i < len(types) else None)
                for i, raw in enumerate(args.params)
            ]
            print(code_tx_data(args.signature, types, params))
        elif args.command == "selector":
            print(code_fun(args.signature))
        elif args.command == "topic":
            print(code_event(args.signature))
        else:
            print(hex2a(args.hex))
    except Exception as e:
        LOG.debug("command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

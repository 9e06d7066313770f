"""
Contract coder for building call payloads from an ABI.

This module provides a high-level interface that looks functions and
events up in a contract ABI and hands their signatures and types to the
low-level encoders in ``eth_code_utils.coding``.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from eth_abi import decode
from web3 import Web3

from ..artifacts.loader import (
    PathLike,
    canonical_type,
    function_signature,
    get_abi,
    get_bytecode,
)
from ..coding.log import HexLike, code_event, decode_log
from ..coding.text import hex2a
from ..coding.tx import code_fun, code_params, code_tx_data


class ContractCoder:
    """
    Encoder for calls to, and logs from, a single contract.

    Overloaded functions are told apart by their number of arguments.
    """

    def __init__(self, abi: List[Dict[str, Any]], bytecode: str = "0x"):
        """
        Initialize the coder.

        Args:
            abi: Contract ABI
            bytecode: Deployment bytecode, needed only for encode_constructor
        """
        self.abi = abi
        self.bytecode = bytecode

    @classmethod
    def from_artifact(
        cls,
        contract_name: str,
        artifacts_dir: Optional[PathLike] = None
    ) -> "ContractCoder":
        """
        Create a coder from a compiled artifact.

        Args:
            contract_name: Name of the contract
            artifacts_dir: Directory holding the artifacts

        Returns:
            ContractCoder for the contract
        """
        return cls(
            get_abi(contract_name, artifacts_dir),
            get_bytecode(contract_name, artifacts_dir),
        )

    def _entries(self, entry_type: str) -> List[Dict[str, Any]]:
        return [item for item in self.abi if item.get('type') == entry_type]

    def get_function(self, name: str, arg_count: Optional[int] = None) -> Dict[str, Any]:
        """
        Find a function in the ABI.

        Args:
            name: Function name
            arg_count: Number of arguments, to pick between overloads

        Returns:
            ABI entry of the function

        Raises:
            ValueError: If no matching function exists
        """
        for item in self._entries('function'):
            if item.get('name') != name:
                continue
            if arg_count is None or len(item.get('inputs', [])) == arg_count:
                return item

        available = ", ".join(sorted({f.get('name', '') for f in self._entries('function')}))
        raise ValueError(
            f"Function {name} not found in ABI. "
            f"Available functions: {available}"
        )

    def get_event(self, name: str) -> Dict[str, Any]:
        """
        Find an event in the ABI.

        Raises:
            ValueError: If the event does not exist
        """
        for item in self._entries('event'):
            if item.get('name') == name:
                return item

        available = ", ".join(sorted(e.get('name', '') for e in self._entries('event')))
        raise ValueError(
            f"Event {name} not found in ABI. "
            f"Available events: {available}"
        )

    @staticmethod
    def _input_types(item: Dict[str, Any]) -> List[str]:
        return [canonical_type(inp) for inp in item.get('inputs', [])]

    def selector(self, name: str, arg_count: Optional[int] = None) -> str:
        """Get the 4-byte selector of a function."""
        return code_fun(function_signature(self.get_function(name, arg_count)))

    def encode_call(self, name: str, *args) -> str:
        """
        Encode a call to a contract function.

        Args:
            name: Function name
            *args: Function arguments

        Returns:
            ``0x``-prefixed transaction data
        """
        function_abi = self.get_function(name, len(args))
        return code_tx_data(
            function_signature(function_abi),
            self._input_types(function_abi),
            args,
        )

    def encode_constructor(self, *args) -> str:
        """
        Get deployment data: bytecode followed by the constructor arguments.

        Args:
            *args: Constructor arguments

        Returns:
            ``0x``-prefixed deployment data
        """
        constructors = self._entries('constructor')
        types = self._input_types(constructors[0]) if constructors else []
        return self.bytecode + code_params(types, args)

    def event_topic(self, name: str) -> str:
        """Get the topic of an event."""
        return code_event(function_signature(self.get_event(name)))

    def decode_event(
        self,
        name: str,
        topics: Sequence[HexLike],
        data: HexLike
    ) -> Dict[str, Any]:
        """
        Decode a log emitted by an event of this contract.

        Returns:
            Mapping of event input name to value
        """
        return decode_log(self.get_event(name), topics, data)

    def decode_output(
        self,
        name: str,
        data: HexLike,
        arg_count: Optional[int] = None
    ) -> Tuple[Any, ...]:
        """
        Decode the return data of a function call.

        Args:
            name: Function name
            data: Return data, hex string or bytes
            arg_count: Number of arguments, to pick between overloads

        Returns:
            Tuple of decoded return values
        """
        function_abi = self.get_function(name, arg_count)
        types = [canonical_type(out) for out in function_abi.get('outputs', [])]
        if isinstance(data, str):
            data = Web3.to_bytes(hexstr=data)
        return decode(types, bytes(data))

    @staticmethod
    def decode_text(data: str) -> str:
        """
        Decode raw return data as text, dropping zero bytes.

        Meant for fixed-size ``bytesN`` values holding ASCII.
        """
        if data.startswith('0x'):
            data = data[2:]
        return hex2a(data)

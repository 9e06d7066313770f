"""Tests for ContractCoder."""

import json

import pytest

from eth_code_utils import ContractCoder, code_tx_data

ADDRESS = "0x" + "11" * 20
OTHER = "0x" + "22" * 20

TOKEN_ABI = [
    {
        "type": "constructor",
        "inputs": [{"name": "supply", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "transfer",
        "inputs": [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "owner", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "name",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
    },
    {
        "type": "function",
        "name": "safeTransferFrom",
        "inputs": [
            {"name": "from", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "tokenId", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "safeTransferFrom",
        "inputs": [
            {"name": "from", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "tokenId", "type": "uint256"},
            {"name": "data", "type": "bytes"},
        ],
        "outputs": [],
    },
    {
        "type": "event",
        "name": "Transfer",
        "anonymous": False,
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
    },
]


def word(hex_value: str) -> str:
    return hex_value.rjust(64, "0")


@pytest.fixture
def coder():
    return ContractCoder(TOKEN_ABI, bytecode="0x6080")


def test_encode_call(coder):
    assert coder.encode_call("transfer", ADDRESS, 1000) == code_tx_data(
        "transfer(address,uint256)", ["address", "uint256"], [ADDRESS, 1000]
    )


def test_encode_call_without_arguments(coder):
    assert coder.encode_call("name") == "0x06fdde03"


def test_selector(coder):
    assert coder.selector("transfer") == "0xa9059cbb"
    assert coder.selector("balanceOf") == "0x70a08231"


def test_overloads_are_picked_by_argument_count(coder):
    assert coder.selector("safeTransferFrom", 3) == "0x42842e0e"
    assert coder.selector("safeTransferFrom", 4) == "0xb88d4fde"
    assert coder.encode_call("safeTransferFrom", ADDRESS, OTHER, 7).startswith("0x42842e0e")
    assert coder.encode_call("safeTransferFrom", ADDRESS, OTHER, 7, b"").startswith("0xb88d4fde")


def test_unknown_function(coder):
    with pytest.raises(ValueError, match="Function mint not found"):
        coder.encode_call("mint", ADDRESS, 1)


def test_wrong_argument_count(coder):
    with pytest.raises(ValueError, match="not found"):
        coder.encode_call("transfer", ADDRESS)


def test_encode_constructor(coder):
    assert coder.encode_constructor(1000) == "0x6080" + word("3e8")


def test_encode_constructor_without_constructor():
    coder = ContractCoder([], bytecode="0x6080")
    assert coder.encode_constructor() == "0x6080"


def test_event_topic(coder):
    assert coder.event_topic("Transfer") == (
        "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
    )


def test_decode_event(coder):
    topics = [coder.event_topic("Transfer"), "0x" + word("11" * 20), "0x" + word("22" * 20)]
    decoded = coder.decode_event("Transfer", topics, "0x" + word("a"))
    assert decoded == {"from": ADDRESS, "to": OTHER, "value": 10}


def test_unknown_event(coder):
    with pytest.raises(ValueError, match="Available events: Transfer"):
        coder.get_event("Approval")


def test_decode_output_uint(coder):
    assert coder.decode_output("balanceOf", "0x" + word("3e8")) == (1000,)


def test_decode_output_string(coder):
    data = word("20") + word("5") + "546f6b656e".ljust(64, "0")
    assert coder.decode_output("name", bytes.fromhex(data)) == ("Token",)


def test_decode_text():
    assert ContractCoder.decode_text("0x546f6b656e" + "00" * 27) == "Token"
    assert ContractCoder.decode_text("68656c6c6f") == "hello"


def test_from_artifact(tmp_path):
    (tmp_path / "Token.json").write_text(json.dumps({"abi": TOKEN_ABI, "bytecode": "0x60806040"}))
    coder = ContractCoder.from_artifact("Token", tmp_path)
    assert coder.bytecode == "0x60806040"
    assert coder.selector("transfer") == "0xa9059cbb"


def test_from_artifact_without_bytecode(tmp_path):
    (tmp_path / "IToken.json").write_text(json.dumps({"abi": TOKEN_ABI, "bytecode": None}))
    coder = ContractCoder.from_artifact("IToken", tmp_path)
    assert coder.bytecode == "0x"
    assert coder.encode_call("name") == "0x06fdde03"

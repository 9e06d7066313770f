"""
Artifact loader for compiled smart contracts.

This module loads ABI and bytecode from compiler output and derives the
canonical signatures that selectors and event topics are hashed from.
Both the flat layout (``<name>.json``) and the Hardhat/Foundry layout
(``<name>.sol/<name>.json``) are understood.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

# Artifact directory, overridable through the environment
ARTIFACTS_DIR = Path(os.environ.get("ETH_CODE_UTILS_ARTIFACTS", "artifacts"))

PathLike = Union[str, Path]


def _artifact_candidates(contract_name: str, artifacts_dir: Path) -> List[Path]:
    return [
        artifacts_dir / f"{contract_name}.json",
        artifacts_dir / f"{contract_name}.sol" / f"{contract_name}.json",
        artifacts_dir / f"{contract_name}.abi",
    ]


def load_artifact(contract_name: str, artifacts_dir: Optional[PathLike] = None) -> Dict[str, Any]:
    """
    Load the complete artifact JSON for a contract.

    Args:
        contract_name: Name of the contract (e.g., 'Token')
        artifacts_dir: Directory to search (default: ARTIFACTS_DIR)

    Returns:
        Artifact dictionary; a bare ABI file is returned as ``{"abi": [...]}``

    Raises:
        FileNotFoundError: If no artifact file exists for the contract
    """
    directory = Path(artifacts_dir) if artifacts_dir is not None else ARTIFACTS_DIR
    candidates = _artifact_candidates(contract_name, directory)

    for artifact_path in candidates:
        if artifact_path.is_file():
            with open(artifact_path, 'r', encoding='utf-8') as f:
                artifact = json.load(f)
            if isinstance(artifact, list):
                return {"contractName": contract_name, "abi": artifact}
            return artifact

    tried = ", ".join(str(p) for p in candidates)
    raise FileNotFoundError(
        f"Artifact not found for {contract_name}. Tried: {tried}"
    )


def get_abi(contract_name: str, artifacts_dir: Optional[PathLike] = None) -> list:
    """
    Get the ABI for a specific contract.

    Args:
        contract_name: Name of the contract
        artifacts_dir: Directory to search

    Returns:
        Contract ABI as a list
    """
    artifact = load_artifact(contract_name, artifacts_dir)
    return artifact.get('abi', [])


def get_bytecode(contract_name: str, artifacts_dir: Optional[PathLike] = None) -> str:
    """
    Get the deployment bytecode for a specific contract.

    Args:
        contract_name: Name of the contract
        artifacts_dir: Directory to search

    Returns:
        Bytecode as a hex string (with '0x' prefix)
    """
    artifact = load_artifact(contract_name, artifacts_dir)
    bytecode = artifact.get('bytecode') or '0x'
    # Foundry nests the hex under "object"
    if isinstance(bytecode, dict):
        bytecode = bytecode.get('object') or '0x'
    if not bytecode.startswith('0x'):
        bytecode = '0x' + bytecode
    return bytecode


def list_available_contracts(artifacts_dir: Optional[PathLike] = None) -> list:
    """
    List the contracts that have an artifact in the directory.

    Returns:
        Sorted list of contract names
    """
    directory = Path(artifacts_dir) if artifacts_dir is not None else ARTIFACTS_DIR
    if not directory.is_dir():
        return []

    names = set()
    for path in directory.iterdir():
        if path.is_file() and path.suffix in ('.json', '.abi'):
            names.add(path.stem)
        elif path.is_dir() and path.suffix == '.sol':
            names.update(p.stem for p in path.glob('*.json'))
    return sorted(names)


def canonical_type(abi_input: Dict[str, Any]) -> str:
    """
    Get the canonical type of an ABI input, expanding tuples.

    ``{"type": "tuple[]", "components": [address, uint256]}`` becomes
    ``"(address,uint256)[]"``.
    """
    abi_type = abi_input['type']
    if not abi_type.startswith('tuple'):
        return abi_type
    inner = ','.join(canonical_type(c) for c in abi_input.get('components', []))
    return f"({inner}){abi_type[len('tuple'):]}"


def function_signature(abi_item: Dict[str, Any]) -> str:
    """
    Build the signature of a function or event ABI entry.

    Returns:
        Signature such as ``"transfer(address,uint256)"``
    """
    inputs = ','.join(canonical_type(inp) for inp in abi_item.get('inputs', []))
    return f"{abi_item.get('name', '')}({inputs})"

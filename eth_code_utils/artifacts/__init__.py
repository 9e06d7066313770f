"""Loading utilities for compiled contract artifacts."""
from .loader import get_abi, get_bytecode, load_artifact, list_available_contracts

__all__ = ["get_abi", "get_bytecode", "load_artifact", "list_available_contracts"]

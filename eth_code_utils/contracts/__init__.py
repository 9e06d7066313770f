"""ABI-driven contract call encoding."""
from .contract import ContractCoder

__all__ = ["ContractCoder"]

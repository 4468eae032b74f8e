"""Data models."""

from .pool import OutputToken, PoolRecord
from .tag import ContractTag

__all__ = [
    "OutputToken",
    "PoolRecord",
    "ContractTag",
]

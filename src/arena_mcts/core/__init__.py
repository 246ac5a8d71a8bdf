"""Core primitives: arena allocation, fast logarithm, errors."""

from .arena import Arena, DEFAULT_BLOCK_SIZE
from .errors import ContractViolation
from .fastlog import fastlog, fastlog2, fastlog_array

__all__ = [
    "Arena",
    "DEFAULT_BLOCK_SIZE",
    "ContractViolation",
    "fastlog",
    "fastlog2",
    "fastlog_array",
]

# file: src/module1_codeword_table/__init__.py

"""
Module 1: Codeword Table Lookup

Translates abstract codewords (0..928) into the physical bar/space patterns
of one of the three PDF417 clusters. Stateless and safe to call from any
thread.

Public API:
    - get_code(cluster, value) -> int
    - bar_space_widths(pattern) -> list[int]
    - cluster_of(pattern) -> int
"""

from .codes import (
    get_code,
    bar_space_widths,
    cluster_of,
    NUM_CLUSTERS,
    MIN_VALUE,
    MAX_VALUE,
)
from .errors import CodewordTableError, DomainError

__version__ = "1.0.0"

__all__ = [
    "get_code",
    "bar_space_widths",
    "cluster_of",
    "NUM_CLUSTERS",
    "MIN_VALUE",
    "MAX_VALUE",
    "CodewordTableError",
    "DomainError",
]

# file: src/module1_codeword_table/codes.py

"""
Cluster table lookup for PDF417 codewords.

Each abstract codeword (0..928) has one bar/space pattern per cluster.
A pattern is 17 modules wide, made of 4 bars and 4 spaces, and is stored
as a 17-bit integer with the most significant bit being the first
(always dark) module.

The pattern constants are the standard ISO/IEC 15438 tables shipped by the
pdf417gen distribution.
"""

from typing import List

from pdf417gen.codes import map_code_word

from .errors import DomainError


NUM_CLUSTERS = 3
MIN_VALUE = 0
MAX_VALUE = 928
PATTERN_MODULES = 17
ELEMENTS_PER_PATTERN = 8


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def get_code(cluster: int, value: int) -> int:
    """
    Map an abstract codeword to its physical pattern for a cluster.

    Args:
        cluster: Cluster (table) id, one of 0, 1, 2
        value: Abstract codeword in [0, 928]

    Returns:
        17-bit bar/space pattern

    Raises:
        DomainError: If cluster or value is outside the declared domain
    """
    if not _is_int(cluster) or not 0 <= cluster < NUM_CLUSTERS:
        raise DomainError(
            f"Cluster must be 0, 1 or 2, got {cluster!r}",
            cluster=cluster,
            value=value,
        )

    if not _is_int(value) or not MIN_VALUE <= value <= MAX_VALUE:
        raise DomainError(
            f"Codeword must be in [{MIN_VALUE}, {MAX_VALUE}], got {value!r}",
            cluster=cluster,
            value=value,
        )

    return map_code_word(cluster, value)


def bar_space_widths(pattern: int) -> List[int]:
    """
    Split a 17-bit pattern into its element widths.

    Args:
        pattern: Physical codeword as returned by get_code()

    Returns:
        List of 8 widths [b1, s1, b2, s2, b3, s3, b4, s4] in modules

    Raises:
        DomainError: If pattern is not a 4-bar/4-space, 17-module word

    Example:
        >>> bar_space_widths(0x1d5c0)
        [3, 1, 1, 1, 1, 1, 3, 6]
    """
    if not _is_int(pattern) or pattern < 0 or pattern >> PATTERN_MODULES:
        raise DomainError(f"Pattern must be a 17-bit integer, got {pattern!r}")

    bits = [(pattern >> shift) & 1 for shift in range(PATTERN_MODULES - 1, -1, -1)]
    if bits[0] != 1 or bits[-1] != 0:
        raise DomainError(f"Pattern 0x{pattern:05x} must start with a bar and end with a space")

    widths = [1]
    for prev, bit in zip(bits, bits[1:]):
        if bit == prev:
            widths[-1] += 1
        else:
            widths.append(1)

    if len(widths) != ELEMENTS_PER_PATTERN:
        raise DomainError(
            f"Pattern 0x{pattern:05x} has {len(widths)} elements, expected {ELEMENTS_PER_PATTERN}"
        )

    return widths


def cluster_of(pattern: int) -> int:
    """
    Infer the cluster a physical codeword belongs to from its structure.

    A scanner uses this to know which row cluster it is reading without
    seeing the rest of the symbol.

    Args:
        pattern: Physical codeword

    Returns:
        Cluster id 0, 1 or 2

    Raises:
        DomainError: If the pattern does not belong to clusters 0, 3 or 6
    """
    widths = bar_space_widths(pattern)
    bars = widths[::2]
    cluster_number = (bars[0] - bars[1] + bars[2] - bars[3] + 9) % 9

    if cluster_number % 3:
        raise DomainError(
            f"Pattern 0x{pattern:05x} has cluster number {cluster_number}, not a PDF417 cluster"
        )

    return cluster_number // 3

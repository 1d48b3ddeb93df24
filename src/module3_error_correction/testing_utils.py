# file: src/module3_error_correction/testing_utils.py

"""
Testing utilities for the error correction module.

Provides error injection for validation and robustness testing.
Used only in test/evaluation contexts.
"""

import random
from typing import List, Optional, Sequence

from .galois import PRIME


def inject_codeword_errors(
    code_words: Sequence[int],
    num_errors: int,
    seed: Optional[int] = None
) -> List[int]:
    """
    Replace `num_errors` distinct codewords with different random values.

    Args:
        code_words: Original codeword sequence
        num_errors: Number of codewords to corrupt
        seed: Random seed for reproducibility (optional)

    Returns:
        Corrupted copy of the sequence

    Example:
        >>> original = [1, 2, 3, 4]
        >>> corrupted = inject_codeword_errors(original, 2, seed=7)
        >>> sum(a != b for a, b in zip(original, corrupted))
        2
    """
    if not 0 <= num_errors <= len(code_words):
        raise ValueError(
            f"num_errors must be in [0, {len(code_words)}], got {num_errors}"
        )

    rng = random.Random(seed)
    corrupted = list(code_words)

    for position in rng.sample(range(len(corrupted)), num_errors):
        delta = rng.randrange(1, PRIME)
        corrupted[position] = (corrupted[position] + delta) % PRIME

    return corrupted


def inject_burst_errors(
    code_words: Sequence[int],
    burst_length: int,
    seed: Optional[int] = None
) -> List[int]:
    """
    Corrupt `burst_length` consecutive codewords, e.g. a damaged row.

    Args:
        code_words: Original codeword sequence
        burst_length: Number of consecutive codewords to corrupt
        seed: Random seed for reproducibility (optional)

    Returns:
        Corrupted copy of the sequence
    """
    if not 0 <= burst_length <= len(code_words):
        raise ValueError("Burst longer than codeword sequence")

    rng = random.Random(seed)
    corrupted = list(code_words)
    start = rng.randint(0, len(corrupted) - burst_length)

    for position in range(start, start + burst_length):
        corrupted[position] = (corrupted[position] + rng.randrange(1, PRIME)) % PRIME

    return corrupted

# file: src/module3_error_correction/encoder.py

"""
Error correction entry point used by the symbol builder.

Provides compute_error_correction() operating on abstract codewords.
"""

from typing import List, Sequence

from .rs_codec import ReedSolomonCodec


def compute_error_correction(data_words: Sequence[int], security_level: int) -> List[int]:
    """
    Compute the Reed-Solomon tail for a PDF417 data sequence.

    This is a pure function: the same input always yields the same
    codewords and nothing is shared between calls except the cached,
    read-only generator polynomials.

    Args:
        data_words: Length descriptor, data and padding codewords, in
                    symbol order
        security_level: 0..8

    Returns:
        2^(security_level + 1) correction codewords

    Raises:
        RSConfigurationError: If security_level is out of range
        RSEncodingError: If a codeword is outside [0, 928]

    Example:
        >>> compute_error_correction([5, 453, 178, 121, 239], 1)
        [452, 327, 657, 619]
    """
    codec = ReedSolomonCodec(security_level)
    return codec.compute(data_words)

# file: src/module3_error_correction/decoder.py

"""
Error correction check for complete codeword sequences.

Provides verify_codewords() and correct_errors(), the counterpart a scanner
runs on the codewords read back from a symbol.
"""

from typing import List, Sequence

from .rs_codec import ReedSolomonCodec, compute_syndromes, ec_count_for_level


def verify_codewords(code_words: Sequence[int], security_level: int) -> bool:
    """
    Check that a data + correction sequence is an intact codeword.

    Args:
        code_words: Full sequence as produced by the symbol builder
        security_level: Level the sequence was protected with

    Returns:
        True when all syndromes are zero
    """
    ec_count = ec_count_for_level(security_level)
    return not any(compute_syndromes(code_words, ec_count))


def correct_errors(code_words: Sequence[int], security_level: int) -> List[int]:
    """
    Correct up to 2^security_level codeword errors.

    Args:
        code_words: Possibly corrupted data + correction sequence
        security_level: Level the sequence was protected with

    Returns:
        Corrected data codewords

    Raises:
        RSDecodingError: If the sequence is malformed
        RSCorrectionError: If errors exceed correction capability
    """
    codec = ReedSolomonCodec(security_level)
    return codec.decode(code_words)

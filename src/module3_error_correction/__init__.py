# file: src/module3_error_correction/__init__.py

"""
Module 3: Error Correction Coding (Reed-Solomon over GF(929))

Computes the error correction codewords appended to every PDF417 symbol
and provides the matching check/correction used to validate symbols.

Public API:
    - compute_error_correction(data_words, security_level) -> list[int]
    - verify_codewords(code_words, security_level) -> bool
    - correct_errors(code_words, security_level) -> list[int]
    - ReedSolomonCodec(security_level)
"""

from .encoder import compute_error_correction
from .decoder import verify_codewords, correct_errors
from .rs_codec import (
    ReedSolomonCodec,
    compute_syndromes,
    ec_count_for_level,
    generator_polynomial,
)
from .errors import (
    ReedSolomonError,
    RSConfigurationError,
    RSEncodingError,
    RSDecodingError,
    RSCorrectionError,
)

__version__ = "1.0.0"

__all__ = [
    "compute_error_correction",
    "verify_codewords",
    "correct_errors",
    "ReedSolomonCodec",
    "compute_syndromes",
    "ec_count_for_level",
    "generator_polynomial",
    "ReedSolomonError",
    "RSConfigurationError",
    "RSEncodingError",
    "RSDecodingError",
    "RSCorrectionError",
]

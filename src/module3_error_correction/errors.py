# file: src/module3_error_correction/errors.py

"""
Reed-Solomon exception hierarchy.

All exceptions inherit from ReedSolomonError for unified handling.
"""


class ReedSolomonError(Exception):
    """Base exception for all Reed-Solomon errors."""
    pass


class RSConfigurationError(ReedSolomonError):
    """Raised when the security level is invalid."""
    pass


class RSEncodingError(ReedSolomonError):
    """Raised when data codewords cannot be protected."""
    pass


class RSDecodingError(ReedSolomonError):
    """Raised when a codeword sequence cannot be decoded."""
    pass


class RSCorrectionError(RSDecodingError):
    """Raised when error correction capability is exceeded."""

    def __init__(self, message: str, num_errors: int = None, max_correctable: int = None):
        super().__init__(message)
        self.num_errors = num_errors
        self.max_correctable = max_correctable

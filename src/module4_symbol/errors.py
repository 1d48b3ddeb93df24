# file: src/module4_symbol/errors.py

"""
Symbol construction error types for Module 4.
"""

from ..module2_data_encoding.errors import EncodingError


class SymbolError(Exception):
    """Base exception for Module 4 symbol construction."""
    pass


class ConfigurationError(SymbolError):
    """Raised when columns or security level are non-numeric or out of range."""
    pass


class CapacityError(EncodingError):
    """Raised when the encoded data does not fit in a single symbol."""

    def __init__(self, message: str, rows: int = None, code_words: int = None):
        super().__init__(message)
        self.rows = rows
        self.code_words = code_words

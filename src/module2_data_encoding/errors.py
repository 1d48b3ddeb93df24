# file: src/module2_data_encoding/errors.py

"""
Data encoding exception hierarchy.

All exceptions inherit from EncodingError for unified handling.
"""


class EncodingError(Exception):
    """Base exception for turning input data into data codewords."""
    pass


class UnencodableCharacterError(EncodingError):
    """Raised when no mode encoder can represent a character."""

    def __init__(self, message: str, char: str = None, position: int = None):
        super().__init__(message)
        self.char = char
        self.position = position


class DataCapacityError(EncodingError):
    """Raised when the data needs more codewords than the caller allows."""

    def __init__(self, message: str, code_words: int = None, limit: int = None):
        super().__init__(message)
        self.code_words = code_words
        self.limit = limit

# file: src/module2_data_encoding/__init__.py

"""
Module 2: Data Encoding

Turns input text or bytes into abstract PDF417 data codewords using
pluggable compaction modes. Mode switching and segmentation happen here;
length descriptor, padding and error correction are added by Module 4.

Public API:
    - DataEncoder: segments input and concatenates mode output
    - ModeEncoder: contract for compaction modes (extension point)
    - TextEncoder, NumericEncoder, ByteEncoder: standard modes
    - EncodingError, UnencodableCharacterError, DataCapacityError

Example usage:
    >>> from src.module2_data_encoding import DataEncoder
    >>> DataEncoder().encode("HELLO")
    [214, 341, 449]
"""

from .base import ModeEncoder
from .byte_encoder import ByteEncoder, BYTE_SWITCH_CODE, BYTE_SWITCH_CODE_FULL
from .data_encoder import DataEncoder, default_encoders
from .errors import EncodingError, UnencodableCharacterError, DataCapacityError
from .numeric_encoder import NumericEncoder, NUMERIC_SWITCH_CODE
from .text_encoder import TextEncoder, TEXT_SWITCH_CODE

__all__ = [
    "DataEncoder",
    "default_encoders",
    "ModeEncoder",
    "TextEncoder",
    "NumericEncoder",
    "ByteEncoder",
    "TEXT_SWITCH_CODE",
    "NUMERIC_SWITCH_CODE",
    "BYTE_SWITCH_CODE",
    "BYTE_SWITCH_CODE_FULL",
    "EncodingError",
    "UnencodableCharacterError",
    "DataCapacityError",
]

__version__ = "1.0.0"

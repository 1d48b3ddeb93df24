# file: src/module4_symbol/__init__.py

"""
Module 4: PDF417 Symbol Construction

Builds the codeword grid of a PDF417 symbol: pads and protects the data
codewords, lays them out in rows, adds row indicators and translates each
row through its cluster table. Rendering is left to Renderer
implementations.

Public Interface:
    - PDF417: Symbol builder (columns, security level, encode)
    - BarcodeData: Encoded symbol
    - Renderer: Renderer contract
    - ConfigurationError, CapacityError

Example usage:
    >>> from src.module4_symbol import PDF417
    >>> pdf417 = PDF417()
    >>> pdf417.set_columns(8)
    >>> barcode = pdf417.encode("HELLO WORLD")
    >>> barcode.rows, len(barcode.codes[0])
    (2, 12)
"""

from .pdf417 import PDF417
from .barcode_data import BarcodeData
from .config import load_config, get_default_config
from .errors import SymbolError, ConfigurationError, CapacityError
from .indicators import (
    Cluster,
    left_indicator,
    right_indicator,
    read_row_indicators,
    merge_row_indicators,
)
from .renderer import Renderer, CodewordTableRenderer

__all__ = [
    "PDF417",
    "BarcodeData",
    "load_config",
    "get_default_config",
    "SymbolError",
    "ConfigurationError",
    "CapacityError",
    "Cluster",
    "left_indicator",
    "right_indicator",
    "read_row_indicators",
    "merge_row_indicators",
    "Renderer",
    "CodewordTableRenderer",
]

__version__ = "1.0.0"

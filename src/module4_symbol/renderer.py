# file: src/module4_symbol/renderer.py

"""
Renderer contract.

A renderer receives a finished BarcodeData and turns it into some output
(image, vector graphics, printer commands). The symbol builder never
depends on a renderer.
"""

from abc import ABC, abstractmethod
from typing import Any

from .barcode_data import BarcodeData


class Renderer(ABC):
    """Consumes a BarcodeData value."""

    @abstractmethod
    def render(self, data: BarcodeData) -> Any:
        """Render a symbol."""


class CodewordTableRenderer(Renderer):
    """
    Lists the physical codewords of a symbol, one symbol row per line.

    Useful for inspecting symbols and for comparing against other
    encoders; it does not draw bars.

    Parameters:
        fmt (str): 'hex' (5-digit patterns) or 'decimal'
    """

    FORMATS = ("hex", "decimal")

    def __init__(self, fmt: str = "hex"):
        if fmt not in self.FORMATS:
            raise ValueError(f"Unknown format {fmt!r}, expected one of {self.FORMATS}")
        self.fmt = fmt

    def render(self, data: BarcodeData) -> str:
        if self.fmt == "hex":
            cell = "{:05x}".format
        else:
            cell = "{:6d}".format

        return "\n".join(" ".join(cell(code) for code in row) for row in data.codes)

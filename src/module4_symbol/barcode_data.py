# file: src/module4_symbol/barcode_data.py

"""
Result of encoding one symbol.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np


@dataclass(frozen=True)
class BarcodeData:
    """
    Codewords of a complete PDF417 symbol.

    Attributes:
        codes: One tuple per row of physical codewords:
               (start, left, data..., right, stop)
        rows: Number of rows
        columns: Number of data columns per row
        code_words: Abstract codewords before table lookup
                    (length descriptor, data, padding, error correction)
        security_level: Error correction level 0..8
    """
    codes: Tuple[Tuple[int, ...], ...]
    rows: int
    columns: int
    code_words: Tuple[int, ...]
    security_level: int

    @property
    def ec_count(self) -> int:
        return 2 ** (self.security_level + 1)

    @property
    def length_descriptor(self) -> int:
        return self.code_words[0]

    @property
    def data_words(self) -> Tuple[int, ...]:
        """Length descriptor, data and padding codewords."""
        return self.code_words[:-self.ec_count]

    @property
    def ec_words(self) -> Tuple[int, ...]:
        return self.code_words[-self.ec_count:]

    def to_array(self) -> np.ndarray:
        """
        Physical codewords as a read-only (rows, columns + 4) array.
        """
        array = np.array(self.codes, dtype=np.int32).reshape(self.rows, self.columns + 4)
        array.setflags(write=False)
        return array

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": self.rows,
            "columns": self.columns,
            "security_level": self.security_level,
            "code_words": list(self.code_words),
            "codes": [list(row) for row in self.codes],
        }

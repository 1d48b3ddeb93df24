# file: src/module4_symbol/pdf417.py

"""
PDF417 symbol builder.

Pipeline:
    input data
    → data codewords (Module 2, mode segmentation and switch codes)
    → padding to a full last row
    → length descriptor
    → Reed-Solomon correction codewords (Module 3)
    → rows with start, left indicator, data, right indicator, stop,
      translated through the row's cluster table (Module 1)
"""

import math
import numbers
from typing import Any, Dict, List, Optional, Union

from ..module1_codeword_table import get_code
from ..module2_data_encoding import DataCapacityError, DataEncoder
from ..module3_error_correction import compute_error_correction
from .barcode_data import BarcodeData
from .errors import CapacityError, ConfigurationError
from .indicators import Cluster, left_indicator, right_indicator


class PDF417:
    """
    Builds PDF417 symbols as grids of codewords.

    Configuration (columns, security level) is validated when set and may
    be changed between encode() calls. It must not be changed while an
    encode() call on the same instance is running; use one instance per
    thread for concurrent encoding.
    """

    MIN_COLUMNS = 1
    MAX_COLUMNS = 30
    DEFAULT_COLUMNS = 6

    MIN_SECURITY_LEVEL = 0
    MAX_SECURITY_LEVEL = 8
    DEFAULT_SECURITY_LEVEL = 2

    MAX_ROWS = 90
    MAX_CODE_WORDS = 928

    START_CHARACTER = 0x1fea8
    STOP_CHARACTER = 0x3fa29

    PADDING_CODE_WORD = 900

    def __init__(
        self,
        columns: Union[int, float, str] = DEFAULT_COLUMNS,
        security_level: Union[int, float, str] = DEFAULT_SECURITY_LEVEL,
        data_encoder: Optional[DataEncoder] = None
    ):
        """
        Initialize the symbol builder.

        Args:
            columns: Number of data columns, 1..30
            security_level: Error correction level, 0..8
            data_encoder: Encoder for the data codewords. If None, uses the
                          standard numeric/text/byte modes.

        Raises:
            ConfigurationError: If columns or security_level are invalid
        """
        self._columns = self.DEFAULT_COLUMNS
        self._security_level = self.DEFAULT_SECURITY_LEVEL
        self.set_columns(columns)
        self.set_security_level(security_level)
        self.data_encoder = data_encoder if data_encoder is not None else DataEncoder()

    @classmethod
    def from_config(cls, config: Dict[str, Any], data_encoder: Optional[DataEncoder] = None) -> "PDF417":
        """
        Create a builder from a configuration dictionary.

        Configuration Schema:
            config['symbol']['columns']: Data columns (default: 6)
            config['symbol']['security_level']: EC level (default: 2)
        """
        section = config.get("symbol") or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"'symbol' section must be a mapping, got {type(section).__name__}")

        return cls(
            columns=section.get("columns", cls.DEFAULT_COLUMNS),
            security_level=section.get("security_level", cls.DEFAULT_SECURITY_LEVEL),
            data_encoder=data_encoder,
        )

    # -- Configuration -------------------------------------------------------

    def get_columns(self) -> int:
        return self._columns

    def set_columns(self, columns: Union[int, float, str]) -> None:
        """
        Set the number of data columns.

        Non-integer values inside the range are truncated toward zero.

        Raises:
            ConfigurationError: If columns is not numeric or not in [1, 30]
        """
        self._columns = self._validated("Column count", columns, self.MIN_COLUMNS, self.MAX_COLUMNS)

    def get_security_level(self) -> int:
        return self._security_level

    def set_security_level(self, security_level: Union[int, float, str]) -> None:
        """
        Set the Reed-Solomon security level.

        Raises:
            ConfigurationError: If the level is not numeric or not in [0, 8]
        """
        self._security_level = self._validated(
            "Security level", security_level, self.MIN_SECURITY_LEVEL, self.MAX_SECURITY_LEVEL
        )

    columns = property(get_columns, set_columns)
    security_level = property(get_security_level, set_security_level)

    @staticmethod
    def _validated(name: str, value: Any, minimum: int, maximum: int) -> int:
        if isinstance(value, bool):
            raise ConfigurationError(f"{name} must be numeric. Given: {value!r}")

        if isinstance(value, numbers.Real):
            number = value
        elif isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError as e:
                raise ConfigurationError(f"{name} must be numeric. Given: {value!r}") from e
        else:
            raise ConfigurationError(f"{name} must be numeric. Given: {value!r}")

        if math.isnan(number) or not minimum <= number <= maximum:
            raise ConfigurationError(f"{name} must be between {minimum} and {maximum}. Given: {value!r}")

        return int(number)

    # -- Encoding ------------------------------------------------------------

    def encode(self, data: Union[str, bytes]) -> BarcodeData:
        """
        Encode data into a complete symbol.

        Args:
            data: Text, or bytes

        Returns:
            BarcodeData with one row of physical codewords per symbol row

        Raises:
            EncodingError: If data contains characters no mode can encode
            CapacityError: If the symbol would exceed 90 rows or 928 codewords
        """
        columns = self._columns
        security_level = self._security_level

        code_words = self._encode_data(data, columns, security_level)
        rows = len(code_words) // columns

        codes = []
        for row_num in range(rows):
            cluster = Cluster.for_row(row_num)
            row_words = code_words[row_num * columns:(row_num + 1) * columns]

            left = left_indicator(row_num, rows, columns, security_level)
            right = right_indicator(row_num, rows, columns, security_level)

            row_codes = [self.START_CHARACTER, get_code(cluster, left)]
            row_codes.extend(get_code(cluster, word) for word in row_words)
            row_codes.extend([get_code(cluster, right), self.STOP_CHARACTER])

            codes.append(tuple(row_codes))

        return BarcodeData(
            codes=tuple(codes),
            rows=rows,
            columns=columns,
            code_words=tuple(code_words),
            security_level=security_level,
        )

    def encode_data(self, data: Union[str, bytes]) -> List[int]:
        """
        Encode data into the abstract codeword sequence of a symbol.

        Returns:
            [length descriptor] + data + padding + error correction
        """
        return self._encode_data(data, self._columns, self._security_level)

    def _encode_data(self, data: Union[str, bytes], columns: int, security_level: int) -> List[int]:
        ec_count = 2 ** (security_level + 1)

        # Room left for data once the descriptor and correction words are in
        limit = min(self.MAX_CODE_WORDS, self.MAX_ROWS * columns) - ec_count - 1
        try:
            data_words = self.data_encoder.encode(data, max_code_words=limit)
        except DataCapacityError as e:
            total_count = e.code_words + ec_count + 1
            rows = math.ceil(total_count / columns)

            if total_count > self.MAX_CODE_WORDS:
                message = f"Symbol needs at least {total_count} codewords, maximum is {self.MAX_CODE_WORDS}"
            else:
                message = f"Symbol needs at least {rows} rows at {columns} columns, maximum is {self.MAX_ROWS}"
            raise CapacityError(message, rows=rows, code_words=total_count) from e

        data_words = data_words + self._get_padding(len(data_words), ec_count, columns)

        # Length includes the data codewords, padding and the descriptor itself
        data_words.insert(0, len(data_words) + 1)

        self._check_capacity(len(data_words) + ec_count, columns)

        ec_words = compute_error_correction(data_words, security_level)
        return data_words + ec_words

    def _get_padding(self, data_count: int, ec_count: int, columns: int) -> List[int]:
        # Reserve one codeword for the length descriptor
        total_count = data_count + ec_count + 1
        remainder = total_count % columns

        if remainder:
            return [self.PADDING_CODE_WORD] * (columns - remainder)
        return []

    def _check_capacity(self, total_count: int, columns: int) -> None:
        rows = total_count // columns

        if total_count > self.MAX_CODE_WORDS:
            raise CapacityError(
                f"Symbol needs {total_count} codewords, maximum is {self.MAX_CODE_WORDS}",
                rows=rows,
                code_words=total_count,
            )

        if rows > self.MAX_ROWS:
            raise CapacityError(
                f"Symbol needs {rows} rows at {columns} columns, maximum is {self.MAX_ROWS}",
                rows=rows,
                code_words=total_count,
            )

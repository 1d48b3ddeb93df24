# file: src/module4_symbol/indicators.py

"""
Left and right row indicator codewords.

Every row carries two indicator codewords, 30 * (row // 3) + x, where x
depends on the row's cluster:

    cluster | left x                   | right x
    --------+--------------------------+-------------------------
       0    | (rows - 1) // 3          | columns - 1
       1    | level * 3 + (rows-1) % 3 | (rows - 1) // 3
       2    | columns - 1              | level * 3 + (rows-1) % 3

A single row therefore yields its own row number and two of the three
symbol parameters; any three consecutive rows yield all of them.
"""

from enum import IntEnum
from typing import Dict, Iterable


class Cluster(IntEnum):
    """Cluster (codeword table) used by a row."""

    ZERO = 0
    ONE = 1
    TWO = 2

    @classmethod
    def for_row(cls, row_num: int) -> "Cluster":
        return cls(row_num % 3)


def _rows_div3(rows: int, columns: int, security_level: int) -> int:
    return (rows - 1) // 3


def _level_rows_mod3(rows: int, columns: int, security_level: int) -> int:
    return security_level * 3 + (rows - 1) % 3


def _columns(rows: int, columns: int, security_level: int) -> int:
    return columns - 1


LEFT_X = {
    Cluster.ZERO: _rows_div3,
    Cluster.ONE: _level_rows_mod3,
    Cluster.TWO: _columns,
}

RIGHT_X = {
    Cluster.ZERO: _columns,
    Cluster.ONE: _rows_div3,
    Cluster.TWO: _level_rows_mod3,
}


def left_indicator(row_num: int, rows: int, columns: int, security_level: int) -> int:
    """Abstract codeword placed at the start of row `row_num`."""
    cluster = Cluster.for_row(row_num)
    return 30 * (row_num // 3) + LEFT_X[cluster](rows, columns, security_level)


def right_indicator(row_num: int, rows: int, columns: int, security_level: int) -> int:
    """Abstract codeword placed at the end of row `row_num`."""
    cluster = Cluster.for_row(row_num)
    return 30 * (row_num // 3) + RIGHT_X[cluster](rows, columns, security_level)


def _read_x(x_fields: str, x: int) -> Dict[str, int]:
    if x_fields == "rows_div3":
        return {"rows_div3": x}
    if x_fields == "columns":
        return {"columns": x + 1}
    return {"security_level": x // 3, "rows_mod3": x % 3}


_LEFT_FIELDS = {
    Cluster.ZERO: "rows_div3",
    Cluster.ONE: "level_rows_mod3",
    Cluster.TWO: "columns",
}

_RIGHT_FIELDS = {
    Cluster.ZERO: "columns",
    Cluster.ONE: "rows_div3",
    Cluster.TWO: "level_rows_mod3",
}


def read_row_indicators(cluster: int, left: int, right: int) -> Dict[str, int]:
    """
    Recover what a single row's indicators say about the symbol.

    Args:
        cluster: Cluster of the row (known to a scanner from the patterns)
        left: Left indicator abstract codeword
        right: Right indicator abstract codeword

    Returns:
        Dictionary with 'row' plus the fields carried by this cluster, among
        'rows_div3', 'rows_mod3', 'columns' and 'security_level'

    Raises:
        ValueError: If the two indicators disagree on the row band
    """
    cluster = Cluster(cluster)
    band, left_x = divmod(left, 30)
    right_band, right_x = divmod(right, 30)

    if band != right_band:
        raise ValueError(f"Row indicators disagree on band: {band} != {right_band}")

    info = {"row": 3 * band + cluster}
    info.update(_read_x(_LEFT_FIELDS[cluster], left_x))
    info.update(_read_x(_RIGHT_FIELDS[cluster], right_x))
    return info


def merge_row_indicators(readings: Iterable[Dict[str, int]]) -> Dict[str, int]:
    """
    Combine per-row readings into the symbol parameters.

    Args:
        readings: Output of read_row_indicators() for several rows

    Returns:
        Dictionary with 'rows', 'columns' and 'security_level'

    Raises:
        ValueError: If readings conflict or do not cover all parameters
    """
    merged = {}
    for reading in readings:
        for key, value in reading.items():
            if key == "row":
                continue
            if merged.setdefault(key, value) != value:
                raise ValueError(f"Conflicting {key}: {merged[key]} != {value}")

    missing = {"rows_div3", "rows_mod3", "columns", "security_level"} - merged.keys()
    if missing:
        raise ValueError(f"Row indicators do not cover: {', '.join(sorted(missing))}")

    return {
        "rows": 3 * merged["rows_div3"] + merged["rows_mod3"] + 1,
        "columns": merged["columns"],
        "security_level": merged["security_level"],
    }

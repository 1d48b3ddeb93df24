# file: src/module2_data_encoding/numeric_encoder.py

"""
Numeric compaction mode.

Digits are taken in groups of up to 44. Each group is prefixed with a
leading "1" (so leading zeros survive) and written as a base 900 number,
most significant codeword first.
"""

from typing import List, Optional, Tuple

from .base import ModeEncoder


NUMERIC_SWITCH_CODE = 902
GROUP_SIZE = 44

_DIGITS = frozenset("0123456789")


def to_base900(number: int) -> List[int]:
    """Convert a non-negative integer to base 900 digits, most significant first."""
    digits = []
    while True:
        number, remainder = divmod(number, 900)
        digits.append(remainder)
        if number == 0:
            break
    return digits[::-1]


# Codewords taken by a group of k digits; "1" followed by k digits always has
# the same base 900 length as 10^k
_GROUP_LENGTHS = [0] + [len(to_base900(10 ** k)) for k in range(1, GROUP_SIZE + 1)]


class NumericEncoder(ModeEncoder):
    """Encoder for the numeric compaction mode (latch codeword 902)."""

    name = "numeric"

    def can_encode(self, char: str) -> bool:
        return char in _DIGITS

    def get_switch_code(self, data: str) -> int:
        return NUMERIC_SWITCH_CODE

    def encode(self, string: str, add_switch_code: bool) -> List[int]:
        self._check_encodable(string)

        codes = [self.get_switch_code(string)] if add_switch_code else []
        for start in range(0, len(string), GROUP_SIZE):
            group = string[start:start + GROUP_SIZE]
            codes.extend(to_base900(int("1" + group)))

        return codes

    def initial_state(self) -> int:
        # digits in the current group
        return 0

    def advance(self, state: int, char: str, following: Optional[str]) -> Tuple[int, int]:
        digits = 0 if state == GROUP_SIZE else state
        return digits + 1, _GROUP_LENGTHS[digits + 1] - _GROUP_LENGTHS[digits]

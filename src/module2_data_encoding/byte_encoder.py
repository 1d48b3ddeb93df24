# file: src/module2_data_encoding/byte_encoder.py

"""
Byte compaction mode.

Six bytes are read as a 48-bit big-endian number and written as five base
900 codewords. Bytes left over after the last full group are written one
per codeword, which is only allowed after the 901 latch; data whose length
is a multiple of six uses the 924 latch instead.
"""

from typing import List, Optional, Tuple

from .base import ModeEncoder
from .numeric_encoder import to_base900


BYTE_SWITCH_CODE = 901
BYTE_SWITCH_CODE_FULL = 924

GROUP_SIZE = 6
GROUP_CODEWORDS = 5


class ByteEncoder(ModeEncoder):
    """
    Encoder for the byte compaction mode.

    Characters are treated as bytes, so only code points below 256 are
    accepted. Encode text to bytes (e.g. UTF-8) before handing it over
    if it contains other characters.
    """

    name = "byte"

    def can_encode(self, char: str) -> bool:
        return len(char) == 1 and ord(char) < 256

    def get_switch_code(self, data: str) -> int:
        if len(data) % GROUP_SIZE == 0:
            return BYTE_SWITCH_CODE_FULL
        return BYTE_SWITCH_CODE

    def encode(self, string: str, add_switch_code: bool) -> List[int]:
        self._check_encodable(string)

        data = string.encode("latin-1")
        codes = [self.get_switch_code(string)] if add_switch_code else []

        full_length = len(data) - len(data) % GROUP_SIZE
        for start in range(0, full_length, GROUP_SIZE):
            number = int.from_bytes(data[start:start + GROUP_SIZE], "big")
            group = to_base900(number)
            codes.extend([0] * (GROUP_CODEWORDS - len(group)) + group)

        codes.extend(data[full_length:])
        return codes

    def initial_state(self) -> int:
        # bytes in the current group
        return 0

    def advance(self, state: int, char: str, following: Optional[str]) -> Tuple[int, int]:
        # the sixth byte turns six single-byte codewords into five
        added = 0 if state == GROUP_SIZE - 1 else 1
        return (state + 1) % GROUP_SIZE, added

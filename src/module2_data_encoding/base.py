# file: src/module2_data_encoding/base.py

"""
Mode encoder contract.

A mode encoder converts one class of characters (text, digits, raw bytes)
into abstract codewords and knows the codeword that switches a decoder
into its mode. New compaction modes are added by subclassing ModeEncoder
and registering the instance with a DataEncoder.
"""

from abc import ABC, abstractmethod
from typing import Hashable, List, Optional, Tuple

from .errors import UnencodableCharacterError


class ModeEncoder(ABC):
    """
    Base class for PDF417 compaction mode encoders.

    Attributes:
        name: Short mode name used in messages
        is_initial_mode: True for the mode a decoder is in at the start of
                         a symbol; a leading segment in this mode needs no
                         switch codeword
    """

    name = "mode"
    is_initial_mode = False

    @abstractmethod
    def can_encode(self, char: str) -> bool:
        """
        Check whether a single character can be encoded by this mode.

        Must be pure and never raise.
        """

    @abstractmethod
    def encode(self, string: str, add_switch_code: bool) -> List[int]:
        """
        Encode a string into abstract codewords.

        Args:
            string: Characters to encode, all accepted by can_encode()
            add_switch_code: Prepend get_switch_code(string) when True

        Returns:
            Ordered list of codewords in [0, 928]

        Raises:
            UnencodableCharacterError: If any character is not encodable
        """

    @abstractmethod
    def get_switch_code(self, data: str) -> int:
        """Return the codeword that latches into this mode for `data`."""

    def initial_state(self) -> Hashable:
        """State of an empty segment, as passed to the first advance() call."""
        return ""

    def advance(self, state: Hashable, char: str, following: Optional[str]) -> Tuple[Hashable, int]:
        """
        Account for one more character of a segment without encoding it.

        The data encoder uses this to cost every candidate segmentation in a
        single pass. Summed over a segment, the added codewords must equal
        len(self.encode(segment, False)).

        The default keeps the segment text as state and re-encodes it, which
        is correct for any mode but slow; built-in modes override it with a
        small finite state.

        Args:
            state: Value from initial_state() or a previous advance()
            char: Character appended to the segment
            following: Next character of the same segment, None at its end

        Returns:
            Tuple of (new state, codewords added)
        """
        extended = state + char
        return extended, len(self.encode(extended, False)) - len(self.encode(state, False))

    def can_encode_all(self, string: str) -> bool:
        return all(self.can_encode(char) for char in string)

    def _check_encodable(self, string: str) -> None:
        for position, char in enumerate(string):
            if not self.can_encode(char):
                raise UnencodableCharacterError(
                    f"{self.name} mode cannot encode {char!r} at position {position}",
                    char=char,
                    position=position,
                )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

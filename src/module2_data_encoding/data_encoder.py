# file: src/module2_data_encoding/data_encoder.py

"""
Data encoder: composes mode encoders into a single codeword stream.

The input is cut into segments, each encoded by one mode encoder, and the
per-segment codewords are concatenated with a switch codeword in front of
every segment except a leading one in the initial mode. The segmentation
chosen is the one with the fewest codewords overall.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple, Union

from .base import ModeEncoder
from .byte_encoder import ByteEncoder
from .errors import DataCapacityError, EncodingError, UnencodableCharacterError
from .numeric_encoder import NumericEncoder
from .text_encoder import TextEncoder


def default_encoders() -> List[ModeEncoder]:
    """Standard encoders in priority order."""
    return [NumericEncoder(), TextEncoder(), ByteEncoder()]


class DataEncoder:
    """
    Segments input data across registered mode encoders.

    Segmentation minimizes the total number of codewords, switch codewords
    included, over every way of cutting the input into segments that some
    registered mode can encode. Among equally short encodings the one that
    keeps the current segment going wins, then the encoder earlier in
    priority order, so the result is deterministic.

    The search is a single left-to-right pass. For each position it keeps
    the cheapest cost of every (mode, mode state) pair for a segment still
    open, plus the cheapest cost with all segments closed; mode states come
    from ModeEncoder.advance().

    Parameters:
        encoders: Mode encoders in priority order (defaults to numeric,
                  text, byte)
    """

    def __init__(self, encoders: Optional[Iterable[ModeEncoder]] = None):
        self.encoders = list(default_encoders() if encoders is None else encoders)

        if not self.encoders:
            raise EncodingError("DataEncoder needs at least one mode encoder")

    def register(self, encoder: ModeEncoder, index: Optional[int] = None) -> None:
        """
        Register an additional mode encoder.

        Args:
            encoder: Encoder to add
            index: Position in the priority order (appended when None)
        """
        if not isinstance(encoder, ModeEncoder):
            raise EncodingError(
                f"Encoder must implement ModeEncoder, got {type(encoder).__name__}"
            )

        if index is None:
            self.encoders.append(encoder)
        else:
            self.encoders.insert(index, encoder)

    def encode(self, data: Union[str, bytes], max_code_words: Optional[int] = None) -> List[int]:
        """
        Encode data into abstract data codewords (no length, padding or EC).

        Args:
            data: Text, or bytes which are read as Latin-1 code points
            max_code_words: Give up as soon as every encoding is known to
                            need more codewords than this (no limit if None)

        Returns:
            Ordered list of codewords including mode switch codewords

        Raises:
            UnencodableCharacterError: If a character fits no registered mode
            DataCapacityError: If the data cannot fit in max_code_words
            EncodingError: If data is neither str nor bytes
        """
        string = self._normalize(data)

        codes = []
        for index, (encoder, segment) in enumerate(self.segment(string, max_code_words)):
            add_switch_code = not (index == 0 and encoder.is_initial_mode)
            codes.extend(encoder.encode(segment, add_switch_code))

        return codes

    def segment(self, string: str, max_code_words: Optional[int] = None) -> List[Tuple[ModeEncoder, str]]:
        """Split a string into the (encoder, segment) pairs of its shortest encoding."""
        capable = self._capable_encoders(string)
        length = len(string)

        # closed[p]: (cost, encoder index, segment start) of the best encoding
        # of string[:p] ending on a segment boundary
        closed: List[Optional[Tuple[int, int, int]]] = [None] * (length + 1)
        closed[0] = (0, -1, 0)

        # (encoder index, mode state) -> (cost, segment start) for a segment
        # that continues with the character at the current position
        opened: Dict[Tuple[int, Hashable], Tuple[int, int]] = {}

        for position, char in enumerate(string):
            base = closed[position][0]
            for index in capable[position]:
                encoder = self.encoders[index]
                switch = 0 if position == 0 and encoder.is_initial_mode else 1
                self._relax(opened, (index, encoder.initial_state()), base + switch, position)

            following = string[position + 1] if position + 1 < length else None
            advanced: Dict[Tuple[int, Hashable], Tuple[int, int]] = {}

            for (index, state), (cost, start) in sorted(opened.items(), key=lambda item: item[0][0]):
                encoder = self.encoders[index]

                if following is not None and index in capable[position + 1]:
                    next_state, added = encoder.advance(state, char, following)
                    self._relax(advanced, (index, next_state), cost + added, start)

                _, added = encoder.advance(state, char, None)
                best = closed[position + 1]
                if best is None or cost + added < best[0]:
                    closed[position + 1] = (cost + added, index, start)

            opened = advanced

            if max_code_words is not None:
                bound = min([cost for cost, _ in opened.values()] + [closed[position + 1][0]])
                if bound > max_code_words:
                    raise DataCapacityError(
                        f"Data needs more than {max_code_words} codewords "
                        f"(at least {bound} for the first {position + 1} characters)",
                        code_words=bound,
                        limit=max_code_words,
                    )

        segments = []
        end = length
        while end:
            _, index, start = closed[end]
            segments.append((self.encoders[index], string[start:end]))
            end = start

        return segments[::-1]

    def _capable_encoders(self, string: str) -> List[List[int]]:
        """Indexes of the encoders accepting each character, in priority order."""
        capable = []

        for position, char in enumerate(string):
            indexes = [i for i, encoder in enumerate(self.encoders) if encoder.can_encode(char)]
            if not indexes:
                raise UnencodableCharacterError(
                    f"No registered mode can encode {char!r} at position {position}",
                    char=char,
                    position=position,
                )
            capable.append(indexes)

        return capable

    @staticmethod
    def _relax(table: dict, key: Tuple[int, Hashable], cost: int, start: int) -> None:
        current = table.get(key)
        if current is None or cost < current[0]:
            table[key] = (cost, start)

    @staticmethod
    def _normalize(data: Union[str, bytes]) -> str:
        if isinstance(data, (bytes, bytearray)):
            return bytes(data).decode("latin-1")
        if isinstance(data, str):
            return data
        raise EncodingError(f"Data must be str or bytes, got {type(data).__name__}")

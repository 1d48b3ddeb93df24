# file: src/module2_data_encoding/text_encoder.py

"""
Text compaction mode.

Text compaction packs two sub-mode values (0..29) into one codeword as
30 * high + low. Characters live in four sub-modes:

    alpha:  A-Z, space
    lower:  a-z, space
    mixed:  digits, space and  & CR HT , : # - . $ / + % * = ^
    punct:  ; < > @ [ \\ ] _ ` ~ ! CR HT , : LF - . $ / " | * ( ) ? { } '

Switching between sub-modes uses latch values (persistent) or shift
values (next character only). A decoder starts every text segment in the
alpha sub-mode.
"""

from typing import Dict, List, Optional, Tuple

from .base import ModeEncoder


TEXT_SWITCH_CODE = 900

ALPHA = "alpha"
LOWER = "lower"
MIXED = "mixed"
PUNCT = "punct"

# Sub-mode values
LL = 27  # latch to lower (from alpha, mixed)
ML = 28  # latch to mixed (from alpha, lower)
AL_MIXED = 28  # latch to alpha from mixed
AL_PUNCT = 29  # latch to alpha from punct
PL = 25  # latch to punct from mixed
PS = 29  # shift to punct (alpha, lower, mixed)
AS = 27  # shift to alpha from lower

SPACE_VALUE = 26
PADDING_VALUE = PS


def _table(chars: str) -> Dict[str, int]:
    return {char: value for value, char in enumerate(chars)}


_ALPHA_TABLE = _table("ABCDEFGHIJKLMNOPQRSTUVWXYZ ")
_LOWER_TABLE = _table("abcdefghijklmnopqrstuvwxyz ")
_MIXED_TABLE = _table("0123456789&\r\t,:#-.$/+%*=^")
_MIXED_TABLE[" "] = SPACE_VALUE
_PUNCT_TABLE = _table(";<>@[\\]_`~!\r\t,:\n-.$/\"|*()?{}'")

TABLES = {
    ALPHA: _ALPHA_TABLE,
    LOWER: _LOWER_TABLE,
    MIXED: _MIXED_TABLE,
    PUNCT: _PUNCT_TABLE,
}

# Preferred sub-mode when a character lives in several of them
SUBMODE_ORDER = (ALPHA, LOWER, MIXED, PUNCT)

LATCHES = {
    (ALPHA, LOWER): [LL],
    (ALPHA, MIXED): [ML],
    (ALPHA, PUNCT): [ML, PL],
    (LOWER, ALPHA): [ML, AL_MIXED],
    (LOWER, MIXED): [ML],
    (LOWER, PUNCT): [ML, PL],
    (MIXED, ALPHA): [AL_MIXED],
    (MIXED, LOWER): [LL],
    (MIXED, PUNCT): [PL],
    (PUNCT, ALPHA): [AL_PUNCT],
    (PUNCT, LOWER): [AL_PUNCT, LL],
    (PUNCT, MIXED): [AL_PUNCT, ML],
}

_ENCODABLE = frozenset().union(*TABLES.values())


class TextEncoder(ModeEncoder):
    """Encoder for the text compaction mode (latch codeword 900)."""

    name = "text"
    is_initial_mode = True

    def can_encode(self, char: str) -> bool:
        return char in _ENCODABLE

    def get_switch_code(self, data: str) -> int:
        return TEXT_SWITCH_CODE

    def encode(self, string: str, add_switch_code: bool) -> List[int]:
        self._check_encodable(string)

        values = self._to_submode_values(string)
        if len(values) % 2:
            values.append(PADDING_VALUE)

        codes = [self.get_switch_code(string)] if add_switch_code else []
        codes.extend(30 * high + low for high, low in zip(values[::2], values[1::2]))
        return codes

    def initial_state(self) -> Tuple[str, int]:
        # (sub-mode, number of values mod 2)
        return ALPHA, 0

    def advance(self, state: Tuple[str, int], char: str, following: Optional[str]) -> Tuple[Tuple[str, int], int]:
        submode, parity = state
        values, submode = self._char_values(submode, char, following)

        total = parity + len(values)
        # ceil(total / 2) - ceil(parity / 2), a pending odd value was already charged
        added = (total + 1) // 2 - parity
        return (submode, total % 2), added

    def _to_submode_values(self, string: str) -> List[int]:
        """Convert characters into sub-mode values, inserting latches and shifts."""
        values = []
        submode = ALPHA

        for i, char in enumerate(string):
            following = string[i + 1] if i + 1 < len(string) else None
            char_values, submode = self._char_values(submode, char, following)
            values.extend(char_values)

        return values

    def _char_values(self, submode: str, char: str, following: Optional[str]) -> Tuple[List[int], str]:
        """Values for one character and the sub-mode left active after it."""
        table = TABLES[submode]
        if char in table:
            return [table[char]], submode

        if submode != PUNCT and char in _PUNCT_TABLE and not self._needs(following, submode, PUNCT):
            return [PS, _PUNCT_TABLE[char]], submode

        if submode == LOWER and char in _ALPHA_TABLE and not self._needs(following, submode, ALPHA):
            return [AS, _ALPHA_TABLE[char]], submode

        target = next(mode for mode in SUBMODE_ORDER if char in TABLES[mode])
        return LATCHES[(submode, target)] + [TABLES[target][char]], target

    @staticmethod
    def _needs(char: Optional[str], submode: str, target: str) -> bool:
        """True when `char` is missing from `submode` but present in `target`."""
        return char is not None and char not in TABLES[submode] and char in TABLES[target]

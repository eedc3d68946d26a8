"""Enumerations for utf8codec."""

import enum


class ScalarCheck(enum.IntFlag):
    """Bit flags selecting which scalar-value rules the decoder enforces.

    Overlong encodings are always rejected; these flags govern the checks
    applied to a sequence that is otherwise well formed.
    """

    NONE = 0
    SURROGATES = 1
    MAX_CODE_POINT = 2
    ALL = SURROGATES | MAX_CODE_POINT


class DecoderPhase(enum.IntEnum):
    """Where a decoder is relative to code point boundaries."""

    READY = 0
    ACCUMULATING = 1

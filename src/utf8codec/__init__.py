"""Strict RFC 3629 UTF-8 encoder and streaming decoder."""

from __future__ import annotations

from collections.abc import Iterable

from utf8codec._utils import (
    MAX_CODE_POINT,
    REPLACEMENT_BYTES,
    REPLACEMENT_CHARACTER,
    ascii_to_unicode,
)
from utf8codec.decoder import Decoder, DecoderState
from utf8codec.encoder import encode, encode_code_point
from utf8codec.enums import DecoderPhase, ScalarCheck

__version__ = "1.0.0"
__all__ = [
    "MAX_CODE_POINT",
    "REPLACEMENT_BYTES",
    "REPLACEMENT_CHARACTER",
    "Decoder",
    "DecoderPhase",
    "DecoderState",
    "ScalarCheck",
    "ascii_to_unicode",
    "decode",
    "encode",
    "encode_code_point",
]


def decode(
    octets: bytes | bytearray | memoryview | str | Iterable[int],
    checks: ScalarCheck = ScalarCheck.ALL,
    final: bool = False,
) -> list[int]:
    """Decode a complete UTF-8 byte string in one call.

    Equivalent to feeding *octets* to a fresh :class:`Decoder`.  A truncated
    trailing sequence is left undecoded unless *final* is ``True``, in which
    case it becomes one U+FFFD.
    """
    return Decoder(checks).decode(octets, final=final)

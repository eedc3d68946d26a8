"""UTF-8 encoder: code points to octets.

See RFC 3629, section 3.  Values that are not Unicode scalar values
(surrogate halves, anything above U+10FFFF, negative numbers) are written as
the encoding of U+FFFD instead, so the output is always well-formed UTF-8.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from utf8codec._utils import (
    MAX_CODE_POINT,
    REPLACEMENT_BYTES,
    SURROGATE_MAX,
    SURROGATE_MIN,
)

logger = logging.getLogger(__name__)


def encode_code_point(code_point: int) -> bytes:
    """Encode a single code point.

    :param code_point: Any integer; invalid values degrade to U+FFFD.
    :returns: One to four octets.
    :raises TypeError: If *code_point* is not an integer.
    """
    if isinstance(code_point, bool) or not isinstance(code_point, int):
        msg = f"code points must be integers, got {type(code_point).__name__}"
        raise TypeError(msg)
    if code_point < 0:
        return _replacement(code_point)

    bits = code_point.bit_length()
    if bits <= 7:
        return bytes((code_point & 0x7F,))
    if bits <= 11:
        return bytes(
            (
                0xC0 | ((code_point >> 6) & 0x1F),
                0x80 | (code_point & 0x3F),
            )
        )
    if bits <= 16:
        if SURROGATE_MIN <= code_point <= SURROGATE_MAX:
            return _replacement(code_point)
        return bytes(
            (
                0xE0 | ((code_point >> 12) & 0x0F),
                0x80 | ((code_point >> 6) & 0x3F),
                0x80 | (code_point & 0x3F),
            )
        )
    if bits <= 21 and code_point <= MAX_CODE_POINT:
        return bytes(
            (
                0xF0 | ((code_point >> 18) & 0x07),
                0x80 | ((code_point >> 12) & 0x3F),
                0x80 | ((code_point >> 6) & 0x3F),
                0x80 | (code_point & 0x3F),
            )
        )
    return _replacement(code_point)


def encode(code_points: Iterable[int] | str) -> bytes:
    """Encode a sequence of code points as UTF-8.

    Never fails on the values themselves: each invalid code point becomes
    the three-octet encoding of U+FFFD.

    :param code_points: Integers, or a ``str`` whose characters are taken
        as their code points.
    :returns: The encoded octets.
    :raises TypeError: If an element is not an integer.
    """
    if isinstance(code_points, str):
        code_points = map(ord, code_points)
    out = bytearray()
    for code_point in code_points:
        out += encode_code_point(code_point)
    return bytes(out)


def _replacement(code_point: int) -> bytes:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("replacing unencodable code point %#x", code_point)
    return REPLACEMENT_BYTES

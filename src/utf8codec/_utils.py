"""Internal shared constants and utilities for utf8codec."""

from __future__ import annotations

from collections.abc import Iterable

from utf8codec.enums import ScalarCheck

#: Code point substituted for anything that cannot be encoded or decoded.
REPLACEMENT_CHARACTER: int = 0xFFFD

#: UTF-8 encoding of :data:`REPLACEMENT_CHARACTER`.
REPLACEMENT_BYTES: bytes = b"\xef\xbf\xbd"

#: Largest Unicode scalar value.
MAX_CODE_POINT: int = 0x10FFFF

SURROGATE_MIN: int = 0xD800
SURROGATE_MAX: int = 0xDFFF

#: Smallest value a sequence of the given length may carry; anything below
#: could have been written with fewer octets.
MIN_CODE_POINT_BY_LENGTH: dict[int, int] = {2: 0x80, 3: 0x800, 4: 0x10000}


def ascii_to_unicode(text: str) -> list[int]:
    """Map a 7-bit ASCII string one-to-one onto code points.

    :param text: ASCII-only text.
    :returns: The code point of each character, in order.
    :raises ValueError: If *text* contains a character above U+007F.
    """
    if not text.isascii():
        msg = "text must contain only 7-bit ASCII characters"
        raise ValueError(msg)
    return [ord(ch) for ch in text]


def _validate_checks(checks: ScalarCheck) -> None:
    """Raise ValueError if *checks* is not a :class:`ScalarCheck`."""
    if isinstance(checks, bool) or not isinstance(checks, ScalarCheck):
        msg = "checks must be a ScalarCheck flag"
        raise ValueError(msg)


def _as_octets(data: bytes | bytearray | memoryview | str | Iterable[int]) -> bytes:
    """Normalize any accepted decoder input to ``bytes``.

    A ``str`` is treated as a byte-bearing string: every character stands for
    one octet, so nothing above U+00FF is allowed.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        try:
            return data.encode("latin-1")
        except UnicodeEncodeError as e:
            msg = f"byte string contains a character above U+00FF at index {e.start}"
            raise ValueError(msg) from None
    if isinstance(data, Iterable):
        # bytes() raises ValueError for ints outside 0..255 and TypeError
        # for non-ints.
        return bytes(data)
    msg = f"cannot decode object of type {type(data).__name__}"
    raise TypeError(msg)

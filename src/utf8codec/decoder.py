"""Streaming UTF-8 decoder: octets to code points."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable

from utf8codec._utils import (
    MAX_CODE_POINT,
    MIN_CODE_POINT_BY_LENGTH,
    REPLACEMENT_CHARACTER,
    SURROGATE_MAX,
    SURROGATE_MIN,
    _as_octets,
    _validate_checks,
)
from utf8codec.enums import DecoderPhase, ScalarCheck

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class DecoderState:
    """Partial multi-byte sequence carried between :meth:`Decoder.decode` calls.

    ``remaining == 0`` means the decoder sits between code points.
    """

    accumulator: int = 0
    remaining: int = 0
    sequence_length: int = 0

    def clear(self) -> None:
        self.accumulator = 0
        self.remaining = 0
        self.sequence_length = 0


class Decoder:
    """Incremental UTF-8 decoder.

    Feed octets in chunks of any size; the concatenated results equal those
    of decoding the whole stream at once.  Malformed input never raises.
    Each broken or invalid sequence yields one U+FFFD and decoding carries on
    with the next octet.

    One instance per byte stream.  Instances are not safe to share between
    threads without external locking.
    """

    def __init__(self, checks: ScalarCheck = ScalarCheck.ALL) -> None:
        """Initialize the decoder.

        :param checks: Which scalar-value rules to apply to completed
            multi-byte sequences.  The default rejects surrogate halves and
            values above U+10FFFF; :attr:`ScalarCheck.NONE` applies only the
            overlong check.
        """
        _validate_checks(checks)
        self._checks = checks
        self._state = DecoderState()
        self._bytes_consumed = 0
        self._error_count = 0

    def decode(
        self,
        octets: bytes | bytearray | memoryview | str | Iterable[int],
        final: bool = False,
    ) -> list[int]:
        """Decode the next chunk of the stream.

        :param octets: The next octets.  A ``str`` is read as a byte string,
            one octet per character.
        :param final: If ``True``, a sequence still incomplete at the end of
            *octets* is reported as one U+FFFD instead of being held over.
        :returns: Code points completed by this call only.
        :raises TypeError: If *octets* is not a supported type.
        :raises ValueError: If *octets* holds values that are not octets.
        """
        data = _as_octets(octets)
        state = self._state
        out: list[int] = []
        offset = self._bytes_consumed

        for byte in data:
            if state.remaining:
                if byte & 0xC0 == 0x80:
                    state.accumulator = (state.accumulator << 6) | (byte & 0x3F)
                    state.remaining -= 1
                    if not state.remaining:
                        out.append(self._complete(offset))
                    offset += 1
                    continue
                # Broken sequence: close it, then treat this octet as a
                # leading octet below.
                out.append(self._error("truncated sequence before", byte, offset))
                state.clear()

            if byte < 0x80:
                out.append(byte)
            elif byte & 0xE0 == 0xC0:
                state.accumulator = byte & 0x1F
                state.remaining = 1
                state.sequence_length = 2
            elif byte & 0xF0 == 0xE0:
                state.accumulator = byte & 0x0F
                state.remaining = 2
                state.sequence_length = 3
            elif byte & 0xF8 == 0xF0:
                state.accumulator = byte & 0x07
                state.remaining = 3
                state.sequence_length = 4
            else:
                out.append(self._error("invalid leading", byte, offset))
            offset += 1

        self._bytes_consumed = offset
        if final and state.remaining:
            out.append(self._error("stream ends inside sequence", None, offset))
            state.clear()
        return out

    def flush(self) -> list[int]:
        """Finish the stream, reporting any incomplete sequence as U+FFFD."""
        return self.decode(b"", final=True)

    def reset(self) -> None:
        """Discard any partial sequence and zero the counters."""
        self._state.clear()
        self._bytes_consumed = 0
        self._error_count = 0

    def _complete(self, offset: int) -> int:
        """Validate the fully assembled sequence and return its code point."""
        state = self._state
        code_point = state.accumulator
        length = state.sequence_length
        state.clear()
        if code_point < MIN_CODE_POINT_BY_LENGTH[length]:
            return self._error("overlong encoding ending", None, offset)
        if (
            self._checks & ScalarCheck.SURROGATES
            and SURROGATE_MIN <= code_point <= SURROGATE_MAX
        ):
            return self._error("surrogate half ending", None, offset)
        if self._checks & ScalarCheck.MAX_CODE_POINT and code_point > MAX_CODE_POINT:
            return self._error("code point above U+10FFFF ending", None, offset)
        return code_point

    def _error(self, reason: str, byte: int | None, offset: int) -> int:
        self._error_count += 1
        if logger.isEnabledFor(logging.DEBUG):
            if byte is None:
                logger.debug("%s at offset %d", reason, offset)
            else:
                logger.debug("%s octet %#04x at offset %d", reason, byte, offset)
        return REPLACEMENT_CHARACTER

    @property
    def checks(self) -> ScalarCheck:
        """The scalar-value checks this decoder enforces."""
        return self._checks

    @property
    def phase(self) -> DecoderPhase:
        """:attr:`DecoderPhase.ACCUMULATING` while a sequence is incomplete."""
        if self._state.remaining:
            return DecoderPhase.ACCUMULATING
        return DecoderPhase.READY

    @property
    def pending(self) -> bool:
        """Whether octets of an incomplete sequence are held over."""
        return self._state.remaining > 0

    @property
    def state(self) -> DecoderState:
        """A snapshot of the partial-sequence state."""
        return dataclasses.replace(self._state)

    @property
    def bytes_consumed(self) -> int:
        """Octets fed since construction or the last :meth:`reset`."""
        return self._bytes_consumed

    @property
    def error_count(self) -> int:
        """U+FFFD substitutions made for malformed input so far."""
        return self._error_count

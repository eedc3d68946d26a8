# tests/test_streaming.py
"""Chunked decoding must match decoding the whole stream at once."""

from __future__ import annotations

import pytest

from utf8codec.decoder import Decoder
from utf8codec.enums import ScalarCheck


def _decode_chunked(data: bytes, chunk_size: int, checks: ScalarCheck) -> list[int]:
    decoder = Decoder(checks)
    out: list[int] = []
    for i in range(0, len(data), chunk_size):
        out.extend(decoder.decode(data[i : i + chunk_size]))
    return out


def test_every_split_point(stream: bytes):
    expected = Decoder().decode(stream)
    for split in range(len(stream) + 1):
        decoder = Decoder()
        result = decoder.decode(stream[:split]) + decoder.decode(stream[split:])
        assert result == expected, f"split at {split}"


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 5])
@pytest.mark.parametrize("checks", [ScalarCheck.ALL, ScalarCheck.NONE])
def test_fixed_chunk_sizes(stream: bytes, chunk_size: int, checks: ScalarCheck):
    expected = Decoder(checks).decode(stream)
    assert _decode_chunked(stream, chunk_size, checks) == expected


def test_state_carried_across_empty_chunks():
    decoder = Decoder()
    out = []
    for chunk in (b"\xf0", b"", b"\x9f", b"", b"", b"\x98", b"\x80"):
        out.extend(decoder.decode(chunk))
    assert out == [0x1F600]


def test_chunked_counters_match_one_shot(stream: bytes):
    whole = Decoder()
    whole.decode(stream)
    chunked = Decoder()
    for byte in stream:
        chunked.decode(bytes([byte]))
    assert chunked.bytes_consumed == whole.bytes_consumed == len(stream)
    assert chunked.error_count == whole.error_count
    assert chunked.state == whole.state


def test_final_chunked_matches_final_one_shot(stream: bytes):
    expected = Decoder().decode(stream, final=True)
    decoder = Decoder()
    out = decoder.decode(stream[:3])
    out += decoder.decode(stream[3:], final=True)
    assert out == expected

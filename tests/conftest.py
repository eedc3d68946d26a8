# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest

# Well-formed and malformed streams exercising every decoder branch.
_STREAMS: dict[str, bytes] = {
    "ascii": b"Hello world",
    "mixed": bytes([0x41, 0xE2, 0x89, 0xA2, 0xCE, 0x91, 0x2E]),
    "japanese": bytes([0xE6, 0x97, 0xA5, 0xE6, 0x9C, 0xAC, 0xE8, 0xAA, 0x9E]),
    "four_byte": "🌍 𣎴 \U0010ffff".encode(),
    "stray_continuation": bytes([0x41, 0xE2, 0x89, 0xA2, 0x91, 0x2E]),
    "broken_sequence": bytes([0x41, 0xE2, 0x89, 0xA2, 0xCE, 0xE2, 0x89, 0xA2]),
    "overlong": b"\xc0\xaf\xe0\x80\xaf\xf0\x80\x80\xaf\xc1\xbf",
    "surrogate": b"a\xed\xa0\x80b",
    "above_range": b"a\xf4\x90\x80\x80b",
    "invalid_leads": b"\xf8\x88\x80\x80\x80\xfc\xff\xfe",
    "truncated_tail": b"ok\xf0\x9f\x98",
}


@pytest.fixture(params=list(_STREAMS), ids=list(_STREAMS))
def stream(request: pytest.FixtureRequest) -> bytes:
    """One sample byte stream per parametrized run."""
    return _STREAMS[request.param]

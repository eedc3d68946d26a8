#!/usr/bin/env python
"""Benchmark utf8codec encode/decode throughput.

Times :func:`utf8codec.encode` and :class:`utf8codec.Decoder` over a sample
corpus with ``time.perf_counter()``, alongside the built-in ``utf-8`` codec
for reference.  Use ``--json-only`` for machine-readable output.
"""

from __future__ import annotations

import argparse
import json
import statistics
import sys
import time
from collections.abc import Callable
from pathlib import Path

_SAMPLE = (
    "Hello world. Héllo wörld café résumé naïve. "
    "日本語のテキスト。Ελληνικά. Emoji 🌍🌎🌏 𣎴\n"
)


def _time(fn: Callable[[], object], repeat: int) -> list[float]:
    times: list[float] = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        times.append(time.perf_counter() - t0)
    return times


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark utf8codec encode/decode throughput.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="UTF-8 text file to use as the corpus (default: built-in sample)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=1 << 20,
        help="Approximate corpus size in bytes for the built-in sample",
    )
    parser.add_argument(
        "--repeat", type=int, default=5, help="Timed runs per operation (default: 5)"
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=4096,
        help="Chunk size for the streaming decode run (default: 4096)",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output",
    )
    args = parser.parse_args()

    if args.file is not None:
        try:
            data = args.file.read_bytes()
        except OSError as e:
            print(f"benchmark: {args.file}: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        sample = _SAMPLE.encode()
        data = sample * max(1, args.size // len(sample))

    t0 = time.perf_counter()
    import utf8codec

    import_time = time.perf_counter() - t0

    code_points = utf8codec.decode(data)
    chunk_size = args.chunk_size

    def stream_decode() -> None:
        decoder = utf8codec.Decoder()
        for i in range(0, len(data), chunk_size):
            decoder.decode(data[i : i + chunk_size])

    operations: dict[str, Callable[[], object]] = {
        "encode": lambda: utf8codec.encode(code_points),
        "decode": lambda: utf8codec.decode(data),
        "decode_streaming": stream_decode,
        "builtin_decode": lambda: data.decode("utf-8", errors="replace"),
    }
    results = {
        name: statistics.median(_time(fn, args.repeat))
        for name, fn in operations.items()
    }

    if args.json_only:
        print(
            json.dumps(
                {"bytes": len(data), "import_time": import_time, "median": results}
            )
        )
        return

    mib = len(data) / (1 << 20)
    print(f"utf8codec {utf8codec.__version__}")
    print(f"  Corpus:       {len(data)} bytes, {len(code_points)} code points")
    print(f"  Import:       {import_time:.3f}s")
    print()
    print("Median timing:")
    for name, elapsed in results.items():
        print(f"  {name:<17} {elapsed * 1000:9.1f}ms  {mib / elapsed:8.2f} MiB/s")


if __name__ == "__main__":
    main()

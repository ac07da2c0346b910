#!/usr/bin/env python3
"""Quick perf benchmark for the scanner."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from colloid.pipeline import run_lex


def _load_sources(paths: list[Path], *, encoding: str, repeat: int) -> list[str]:
    sources: list[str] = []
    for path in paths:
        text = path.read_text(encoding=encoding)
        sources.append(text * max(repeat, 1))
    return sources


def _run_once(
    sources: list[str],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_chars = 0
    total_tokens = 0
    total_errors = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for source in iterator:
        result = run_lex(source)
        total_chars += len(source)
        total_tokens += len(result.tokens)
        total_errors += len(result.errors)
    duration = time.perf_counter() - start
    return duration, total_chars, total_tokens, total_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark scanner throughput")
    parser.add_argument("paths", type=Path, nargs="+", help="Source files to scan")
    parser.add_argument("--encoding", type=str, default="utf-8", help="Source encoding (default: utf-8)")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--repeat",
        type=int,
        default=1,
        help="Concatenate each source with itself N times to enlarge the input",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    missing = [path for path in args.paths if not path.is_file()]
    if missing:
        raise SystemExit(f"No such file: {', '.join(str(path) for path in missing)}")

    sources = _load_sources(args.paths, encoding=args.encoding, repeat=args.repeat)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        chars_count = 0
        tokens_count = 0
        errors_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, chars_count, tokens_count, errors_count = _run_once(
                sources,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, chars_count, tokens_count, errors_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, chars_count, tokens_count, errors_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, chars_count, tokens_count, errors_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Files: {len(sources)}")
    print(f"Characters: {chars_count}")
    print(f"Tokens: {tokens_count}")
    print(f"Errors: {errors_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Chars/s (mean):  {chars_count / mean:.1f}")
    print(f"Tokens/s (mean): {tokens_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
